"""LLM access for commit message generation."""

from semcommit.llm.client import (
	DEFAULT_ENDPOINT,
	DEFAULT_MODEL,
	MessageGenerator,
	OpenAIMessageGenerator,
	generate,
	send_chat_request,
)
from semcommit.llm.errors import GenerationError, LLMError
from semcommit.llm.parser import parse_response, strip_enclosing_quotes
from semcommit.llm.prompts import (
	ChatMessage,
	CommitConvention,
	GenerationRequest,
	build_prompt,
	build_request,
)

__all__ = [
	"DEFAULT_ENDPOINT",
	"DEFAULT_MODEL",
	"ChatMessage",
	"CommitConvention",
	"GenerationError",
	"GenerationRequest",
	"LLMError",
	"MessageGenerator",
	"OpenAIMessageGenerator",
	"build_prompt",
	"build_request",
	"generate",
	"parse_response",
	"send_chat_request",
	"strip_enclosing_quotes",
]
