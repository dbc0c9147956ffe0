"""Error types for LLM operations."""


class LLMError(Exception):
	"""Base exception for LLM-related errors."""


class GenerationError(LLMError):
	"""Raised when the remote generation service cannot be reached or rejects the request."""
