"""Configuration for semcommit."""

from semcommit.config.config_loader import (
	ConfigError,
	ConfigLoader,
	ConfigParsingError,
	CredentialError,
	load_credential,
)
from semcommit.config.config_schema import AppConfigSchema, CommitConfigSchema, LLMConfigSchema

__all__ = [
	"AppConfigSchema",
	"CommitConfigSchema",
	"ConfigError",
	"ConfigLoader",
	"ConfigParsingError",
	"CredentialError",
	"LLMConfigSchema",
	"load_credential",
]
