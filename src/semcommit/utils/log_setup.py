"""
Logging setup for semcommit.

Console logging goes through rich; errors and warnings meant for the user
are shown as framed summaries.

"""

from __future__ import annotations

import logging
import os

from rich.console import Console
from rich.logging import RichHandler
from rich.rule import Rule
from rich.text import Text

# Initialize console for rich output
console = Console()

VERBOSE_ENV_VAR = "SEMCOMMIT_VERBOSE"
NOISY_LOGGERS = ("urllib3", "requests", "charset_normalizer")


def is_verbose_from_env() -> bool:
	"""Whether verbose logging was requested through the environment."""
	return os.environ.get(VERBOSE_ENV_VAR, "").strip().lower() in {"1", "true", "yes", "on"}


def setup_logging(is_verbose: bool = False, log_to_console: bool = True) -> None:
	"""
	Set up logging configuration.

	Args:
	    is_verbose: Enable verbose logging
	    log_to_console: Whether to log to the console

	"""
	log_level = logging.DEBUG if is_verbose else logging.WARNING

	root_logger = logging.getLogger()
	root_logger.setLevel(log_level)

	# Clear existing handlers to avoid duplicate logs if called multiple times
	for handler in root_logger.handlers[:]:
		root_logger.removeHandler(handler)

	if log_to_console:
		console_handler = RichHandler(
			level=log_level,
			rich_tracebacks=True,
			show_time=True,
			show_path=is_verbose,
		)
		root_logger.addHandler(console_handler)

	if not is_verbose:
		for name in NOISY_LOGGERS:
			logging.getLogger(name).setLevel(logging.ERROR)


def _display_summary(title: str, message: str, style: str) -> None:
	console.print()
	console.print(Rule(Text(title, style=f"bold {style}"), style=style))
	console.print(f"\n{message}\n")
	console.print(Rule(style=style))
	console.print()


def display_error_summary(error_message: str) -> None:
	"""Print ``error_message`` between red rules titled "Error Summary"."""
	_display_summary("Error Summary", error_message, "red")


def display_warning_summary(warning_message: str) -> None:
	"""Print ``warning_message`` between yellow rules titled "Warning Summary"."""
	_display_summary("Warning Summary", warning_message, "yellow")
