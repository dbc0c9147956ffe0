"""Tests for response parsing."""

from __future__ import annotations

from typing import Any

import pytest

from semcommit.llm.parser import parse_response, strip_enclosing_quotes


@pytest.mark.unit
@pytest.mark.llm
class TestParseResponse:
	"""Test cases for extracting choices[0].message.content."""

	def test_quoted_content_is_unwrapped(self) -> None:
		"""One enclosing quote pair is removed."""
		response = {"choices": [{"message": {"content": '"fix: correct typo"'}}]}

		assert parse_response(response) == "fix: correct typo"

	def test_plain_content_is_returned(self) -> None:
		"""Unquoted content passes through unchanged."""
		response = {"choices": [{"message": {"content": "feat: add parser"}}], "usage": {"total_tokens": 9}}

		assert parse_response(response) == "feat: add parser"

	def test_only_first_choice_is_used(self) -> None:
		"""Later choices are ignored."""
		response = {
			"choices": [
				{"message": {"content": "chore: first"}},
				{"message": {"content": "chore: second"}},
			]
		}

		assert parse_response(response) == "chore: first"

	@pytest.mark.parametrize(
		"response",
		[
			{},
			{"choices": []},
			{"choices": None},
			{"choices": "not a list"},
			{"choices": {"0": {"message": {"content": "x"}}}},
			{"choices": [{}]},
			{"choices": [None]},
			{"choices": [{"message": None}]},
			{"choices": [{"message": {}}]},
			{"choices": [{"message": {"role": "assistant"}}]},
			{"choices": [{"message": {"content": None}}]},
			{"choices": [{"message": {"content": 42}}]},
			{"error": {"message": "invalid api key"}},
			[],
			None,
			"choices",
		],
	)
	def test_malformed_responses_give_empty_message(self, response: Any) -> None:  # noqa: ANN401
		"""Any missing key or wrong shape yields an empty string."""
		assert parse_response(response) == ""


@pytest.mark.unit
class TestStripEnclosingQuotes:
	"""Test cases for outer quote removal."""

	@pytest.mark.parametrize(
		("text", "expected"),
		[
			('"fix: x"', "fix: x"),
			("'fix: x'", "fix: x"),
			('""fix: x""', '"fix: x"'),
			('fix: "quoted" word', 'fix: "quoted" word'),
			('"fix: x', '"fix: x'),
			("\"fix: x'", "\"fix: x'"),
			('"', '"'),
			('""', ""),
			("", ""),
		],
	)
	def test_strip(self, text: str, expected: str) -> None:
		"""Only a matching leading and trailing pair is removed."""
		assert strip_enclosing_quotes(text) == expected
