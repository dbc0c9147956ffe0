"""Tests for the CLI functionality."""

from __future__ import annotations

from pathlib import Path
from unittest.mock import patch

import pytest
from pygit2 import Commit
from typer.testing import CliRunner

from semcommit.cli_app import app
from semcommit.llm.errors import GenerationError
from tests.base import GitTestBase, write_file

runner = CliRunner()


@pytest.mark.integration
@pytest.mark.git
class TestCommitCommand(GitTestBase):
	"""Test cases for the semcommit command."""

	@pytest.fixture(autouse=True)
	def _in_repo(self, _setup_repo: None, monkeypatch: pytest.MonkeyPatch) -> None:
		monkeypatch.chdir(self.repo_path)

	def test_commit_success(self, api_key: str) -> None:
		"""A successful run prints the message and the new commit id."""
		previous = self.commit_files({"a.txt": "baz\n"})
		write_file(self.repo, "a.txt", "baz\nqux\n")

		with patch("semcommit.llm.client.OpenAIMessageGenerator.generate", return_value="feat: add qux"):
			result = runner.invoke(app, [])

		assert result.exit_code == 0, result.output
		head = self.repo.head.peel(Commit)
		assert head.message == "feat: add qux"
		assert head.parent_ids == [previous.id]
		assert "Generated commit message: feat: add qux" in result.output
		assert f"New commit: {head.id}" in result.output

	def test_missing_credential_exits_non_zero(self, monkeypatch: pytest.MonkeyPatch) -> None:
		"""Without an API key nothing is committed."""
		monkeypatch.delenv("OPENAI_API_KEY", raising=False)
		previous = self.commit_files({"a.txt": "baz\n"})

		result = runner.invoke(app, [])

		assert result.exit_code == 1
		assert "OPENAI_API_KEY" in result.output
		assert self.repo.head.target == previous.id

	def test_credential_from_env_file(self, monkeypatch: pytest.MonkeyPatch) -> None:
		"""The API key may come from a .env file in the current directory."""
		# setenv first so the value loaded from .env is undone after the test
		monkeypatch.setenv("OPENAI_API_KEY", "placeholder")
		monkeypatch.delenv("OPENAI_API_KEY")
		self.commit_files({"a.txt": "baz\n"})
		(self.repo_path / ".env").write_text("OPENAI_API_KEY=sk-from-file\n", encoding="utf-8")

		with patch(
			"semcommit.llm.client.OpenAIMessageGenerator.generate", return_value="chore: env file"
		) as mock_generate:
			result = runner.invoke(app, [])

		assert result.exit_code == 0, result.output
		assert mock_generate.call_count == 1

	def test_generation_failure_exits_non_zero(self, api_key: str) -> None:
		"""A failing service aborts before committing."""
		previous = self.commit_files({"a.txt": "baz\n"})

		with patch(
			"semcommit.llm.client.OpenAIMessageGenerator.generate",
			side_effect=GenerationError("connection refused"),
		):
			result = runner.invoke(app, [])

		assert result.exit_code == 1
		assert "generate" in result.output
		assert "Generated commit message" not in result.output
		assert self.repo.head.target == previous.id

	def test_unborn_repository_exits_non_zero(self, api_key: str) -> None:
		"""Committing without an initial commit fails loudly."""
		with patch("semcommit.llm.client.OpenAIMessageGenerator.generate", return_value="feat: first"):
			result = runner.invoke(app, [])

		assert result.exit_code == 1
		assert "commit" in result.output
		assert "Generated commit message: feat: first" in result.output
		assert self.repo.head_is_unborn

	def test_subdirectory_exits_non_zero(self, api_key: str, monkeypatch: pytest.MonkeyPatch) -> None:
		"""Running from a subdirectory does not commit into the enclosing repository."""
		previous = self.commit_files({"a.txt": "baz\n"})
		nested = self.repo_path / "docs"
		nested.mkdir()
		monkeypatch.chdir(nested)

		with patch(
			"semcommit.llm.client.OpenAIMessageGenerator.generate", return_value="feat: nested"
		) as mock_generate:
			result = runner.invoke(app, [])

		assert result.exit_code == 1
		assert "diff" in result.output
		assert mock_generate.call_count == 0
		assert self.repo.head.target == previous.id

	def test_empty_message_warns(self, api_key: str) -> None:
		"""An empty generated message is committed with a warning."""
		self.commit_files({"a.txt": "baz\n"})

		with patch("semcommit.llm.client.OpenAIMessageGenerator.generate", return_value=""):
			result = runner.invoke(app, [])

		assert result.exit_code == 0, result.output
		assert "empty commit message" in result.output
		assert self.repo.head.peel(Commit).message == ""


@pytest.mark.unit
def test_not_a_repository_exits_non_zero(
	tmp_path: Path, monkeypatch: pytest.MonkeyPatch, api_key: str
) -> None:
	"""Running outside a repository fails in the diff stage."""
	monkeypatch.chdir(tmp_path)

	result = runner.invoke(app, [])

	assert result.exit_code == 1
	assert "diff" in result.output
