"""Prompt and request construction for commit message generation."""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, Field

DEFAULT_COMMIT_TYPES = ["feat", "chore", "refactor", "fix"]
DEFAULT_MAX_LENGTH = 100

COMMIT_PROMPT_TEMPLATE = (
	"Generate a semantic commit based on the following change diff, "
	"commit should not be more than {max_length} chars and prefixes are {prefixes}, "
	"do not mention change diff in your commit \n change diff: {diff}"
)


class CommitConvention(BaseModel):
	"""Style policy the generated message is asked to follow."""

	types: list[str] = Field(default_factory=lambda: list(DEFAULT_COMMIT_TYPES))
	max_length: int = Field(default=DEFAULT_MAX_LENGTH, gt=0)

	@property
	def prefixes(self) -> str:
		"""Prefix vocabulary as written into the prompt, e.g. ``[feat:, fix: ]``."""
		return "[" + ", ".join(f"{commit_type}:" for commit_type in self.types) + " ]"


DEFAULT_CONVENTION = CommitConvention()


class ChatMessage(BaseModel):
	"""A single role/content pair of a chat-completion request."""

	role: Literal["user", "system", "assistant"]
	content: str


class GenerationRequest(BaseModel):
	"""Body of a chat-completion request."""

	model: str
	messages: list[ChatMessage]


def build_prompt(diff: str, convention: CommitConvention = DEFAULT_CONVENTION) -> str:
	"""
	Compose the commit message prompt.

	The diff is appended verbatim at the end, without truncation or escaping.

	Args:
	    diff: Unified diff text, possibly empty.
	    convention: Prefix vocabulary and length limit to request.

	Returns:
	    The prompt text.
	"""
	return COMMIT_PROMPT_TEMPLATE.format(
		max_length=convention.max_length,
		prefixes=convention.prefixes,
		diff=diff,
	)


def build_request(prompt: str, model_id: str) -> GenerationRequest:
	"""Wrap ``prompt`` into a request with a single user message."""
	return GenerationRequest(model=model_id, messages=[ChatMessage(role="user", content=prompt)])
