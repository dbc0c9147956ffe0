"""Schemas for the semcommit configuration file."""

from __future__ import annotations

from pydantic import BaseModel, Field

from semcommit.llm.client import DEFAULT_ENDPOINT, DEFAULT_MODEL
from semcommit.llm.prompts import CommitConvention


class LLMConfigSchema(BaseModel):
	"""Settings for the remote generation service."""

	model: str = DEFAULT_MODEL
	endpoint: str = DEFAULT_ENDPOINT
	# Name of the environment variable holding the API key
	api_key_env: str = "OPENAI_API_KEY"
	# None keeps the transport default
	timeout: float | None = Field(default=None, gt=0)


class CommitConfigSchema(BaseModel):
	"""Settings for the generated commit."""

	convention: CommitConvention = Field(default_factory=CommitConvention)
	# Commit even when the service response carried no message
	allow_empty_message: bool = True


class AppConfigSchema(BaseModel):
	"""Top-level configuration."""

	llm: LLMConfigSchema = Field(default_factory=LLMConfigSchema)
	commit: CommitConfigSchema = Field(default_factory=CommitConfigSchema)
