"""Best-effort extraction of the generated message from a chat-completion response."""

from __future__ import annotations

import logging
from typing import Any

logger = logging.getLogger(__name__)

QUOTE_CHARS = ('"', "'")


def strip_enclosing_quotes(text: str) -> str:
	"""Remove a single matching pair of quotes wrapping ``text``, if present."""
	if len(text) >= 2 and text[0] in QUOTE_CHARS and text[-1] == text[0]:  # noqa: PLR2004
		return text[1:-1]
	return text


def _message_content(response: Any) -> str | None:  # noqa: ANN401
	if not isinstance(response, dict):
		return None
	choices = response.get("choices")
	if not isinstance(choices, list) or not choices:
		return None
	first_choice = choices[0]
	if not isinstance(first_choice, dict):
		return None
	message = first_choice.get("message")
	if not isinstance(message, dict):
		return None
	content = message.get("content")
	return content if isinstance(content, str) else None


def parse_response(response: Any) -> str:  # noqa: ANN401
	"""
	Extract ``choices[0].message.content`` from a decoded response.

	Every step of the lookup is optional. A missing key or a value of the wrong
	shape gives an empty message instead of an error.

	Args:
	    response: Decoded JSON document returned by the service.

	Returns:
	    The message content with one enclosing quote pair removed, or an empty string.
	"""
	content = _message_content(response)
	if content is None:
		logger.warning("Response did not contain choices[0].message.content; using an empty message")
		return ""
	return strip_enclosing_quotes(content)
