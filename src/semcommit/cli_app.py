"""Command-line interface for the semcommit tool."""

from __future__ import annotations

import logging
import sys
from pathlib import Path

import typer
from dotenv import load_dotenv

from semcommit.config import ConfigError, ConfigLoader
from semcommit.pipeline import Pipeline, PipelineFailedError
from semcommit.utils.cli_utils import exit_with_error, handle_keyboard_interrupt, show_warning
from semcommit.utils.log_setup import console, is_verbose_from_env, setup_logging

logger = logging.getLogger(__name__)

app = typer.Typer(
	help="semcommit - Generate a semantic commit message for your changes and commit it.",
	add_completion=False,
)


def load_env_files() -> None:
	"""Load environment variables from .env.local, falling back to .env."""
	for candidate in (Path(".env.local"), Path(".env")):
		if candidate.exists():
			load_dotenv(dotenv_path=candidate)
			logger.debug("Loaded environment variables from %s", candidate)
			return


@app.command()
def commit_command() -> None:
	"""Commit the staged index with a message generated from the working tree diff."""
	setup_logging(is_verbose=is_verbose_from_env())
	load_env_files()

	pipeline: Pipeline | None = None
	try:
		pipeline_config = ConfigLoader.get_instance().to_pipeline_config(Path.cwd())
		console.print(f"Current directory: {pipeline_config.repo_path}")

		pipeline = Pipeline(pipeline_config)
		result = pipeline.run()
	except KeyboardInterrupt:
		handle_keyboard_interrupt()
	except ConfigError as e:
		exit_with_error(f"Configuration error: {e}", exception=e)
	except PipelineFailedError as e:
		if pipeline is not None and pipeline.message is not None:
			console.print(f"Generated commit message: {pipeline.message}")
		exit_with_error(f"Failed during the {e.stage.value} stage.", exception=e.cause)
	else:
		if not result.message:
			show_warning("The generation service returned an empty commit message.")
		console.print(f"Generated commit message: {result.message}")
		console.print(f"New commit: {result.commit_id}")


def main() -> int:
	"""Run the CLI application."""
	return app()


if __name__ == "__main__":
	sys.exit(main())
