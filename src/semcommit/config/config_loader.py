"""
Configuration loader for semcommit.

This module provides functionality for loading the optional YAML
configuration file and the API credential.

"""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Any

import yaml
from xdg.BaseDirectory import xdg_config_home

from semcommit.config.config_schema import AppConfigSchema
from semcommit.pipeline import PipelineConfig

logger = logging.getLogger(__name__)

CONFIG_FILE_NAME = ".semcommit.yml"


class ConfigError(Exception):
	"""Exception raised for configuration errors."""


class ConfigParsingError(ConfigError):
	"""Exception raised when configuration file cannot be parsed."""


class CredentialError(ConfigError):
	"""Exception raised when the API credential is missing."""


def load_credential(env_var: str = "OPENAI_API_KEY") -> str:
	"""
	Read the API key from the environment.

	Args:
		env_var: Name of the environment variable holding the key

	Returns:
		The API key

	Raises:
		CredentialError: If the variable is unset or empty
	"""
	value = os.environ.get(env_var, "").strip()
	if not value:
		msg = f"{env_var} is not set. Export it or add it to a .env file."
		logger.error(msg)
		raise CredentialError(msg)
	return value


class ConfigLoader:
	"""
	Loads and manages configuration for semcommit using Pydantic schemas.

	Missing configuration files are not an error; defaults from the schema
	are used instead.

	"""

	_instance = None  # For singleton pattern

	@classmethod
	def get_instance(cls, config_file: Path | None = None, reload: bool = False) -> ConfigLoader:
		"""
		Get the singleton instance of ConfigLoader.

		Args:
			config_file: Path to configuration file (optional)
			reload: Whether to reload config even if already loaded

		Returns:
			ConfigLoader: Singleton instance

		"""
		if cls._instance is None or reload:
			cls._instance = cls(config_file)
		return cls._instance

	def __init__(self, config_file: Path | None = None) -> None:
		"""
		Initialize the configuration loader.

		Args:
			config_file: Path to configuration file (optional)

		"""
		self._config_file = config_file
		self._resolved_config_file = self._resolve_config_file(config_file)
		self._app_config = self._load_config()

	def _resolve_config_file(self, config_file: Path | None = None) -> Path | None:
		"""
		Resolve the configuration file path.

		If a config file is specified, use that. Otherwise, look in standard locations:
		1. ./.semcommit.yml in the current directory
		2. $XDG_CONFIG_HOME/semcommit/config.yml
		3. ~/.semcommit/config.yml

		Args:
			config_file: Explicitly provided config file path (optional)

		Returns:
			Resolved config file path or None if no suitable file found

		"""
		if config_file:
			path = config_file.expanduser().resolve()
			if not path.exists():
				logger.warning("Specified config file not found: %s", path)
			return path

		local_config = Path(CONFIG_FILE_NAME)
		if local_config.exists():
			return local_config

		xdg_config_file = Path(xdg_config_home) / "semcommit" / "config.yml"
		if xdg_config_file.exists():
			return xdg_config_file

		legacy_config = Path.home() / ".semcommit" / "config.yml"
		if legacy_config.exists():
			return legacy_config

		return None

	@staticmethod
	def _parse_yaml_file(file_path: Path) -> dict[str, Any]:
		"""
		Parse a YAML file into a dictionary.

		Raises:
			yaml.YAMLError: If the file cannot be parsed as a YAML mapping
		"""
		with file_path.open(encoding="utf-8") as f:
			content = yaml.safe_load(f)
			if content is None:  # Empty file
				return {}
			if not isinstance(content, dict):
				msg = f"File {file_path} does not contain a valid YAML dictionary"
				raise yaml.YAMLError(msg)
			return content

	def _load_config(self) -> AppConfigSchema:
		"""
		Load configuration from file and parse it into AppConfigSchema.

		Raises:
			ConfigParsingError: If configuration file exists but cannot be loaded or parsed.

		"""
		file_config_dict: dict[str, Any] = {}
		path = self._resolved_config_file
		if path is None:
			logger.debug("No configuration file found. Using default configuration.")
		elif not path.exists():
			logger.info("Configuration file not found: %s. Using default configuration.", path)
		else:
			try:
				file_config_dict = self._parse_yaml_file(path)
				logger.info("Loaded configuration from %s", path)
			except yaml.YAMLError as e:
				msg = f"Configuration file {path} does not contain a valid YAML dictionary."
				logger.exception(msg)
				raise ConfigParsingError(msg) from e
			except OSError as e:
				msg = f"Error accessing configuration file {path}: {e}"
				logger.exception(msg)
				raise ConfigParsingError(msg) from e

		try:
			return AppConfigSchema(**file_config_dict)
		except Exception as e:  # Catch Pydantic validation errors etc.
			msg = f"Error parsing configuration into schema: {e}"
			logger.exception(msg)
			raise ConfigParsingError(msg) from e

	@property
	def get(self) -> AppConfigSchema:
		"""The loaded application configuration."""
		return self._app_config

	@property
	def config_file(self) -> Path | None:
		"""The configuration file in use, if any."""
		return self._resolved_config_file

	def to_pipeline_config(self, repo_path: Path, credential: str | None = None) -> PipelineConfig:
		"""
		Build the explicit pipeline configuration.

		Args:
			repo_path: Repository directory the pipeline runs against
			credential: API key; read from the configured environment variable when omitted

		Returns:
			PipelineConfig for a single pipeline run

		Raises:
			CredentialError: If no credential is given and none is set in the environment
		"""
		config = self.get
		if credential is None:
			credential = load_credential(config.llm.api_key_env)
		return PipelineConfig(
			repo_path=repo_path,
			credential=credential,
			model=config.llm.model,
			endpoint=config.llm.endpoint,
			timeout=config.llm.timeout,
			convention=config.commit.convention,
			allow_empty_message=config.commit.allow_empty_message,
		)
