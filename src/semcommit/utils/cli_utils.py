"""Console helpers for the semcommit command."""

from __future__ import annotations

import contextlib
import logging
import os
from typing import TYPE_CHECKING, NoReturn

import typer

from semcommit.utils.log_setup import console, display_error_summary, display_warning_summary

if TYPE_CHECKING:
	from collections.abc import Iterator

logger = logging.getLogger(__name__)

INTERRUPTED_EXIT_CODE = 130


@contextlib.contextmanager
def loading_spinner(message: str = "Processing...") -> Iterator[None]:
	"""
	Show a status spinner around the generation request.

	The spinner is skipped under pytest and in CI, where there is no terminal to animate.

	Args:
	    message: Text shown next to the spinner

	"""
	if os.environ.get("PYTEST_CURRENT_TEST") or os.environ.get("CI"):
		yield
		return

	with console.status(message):
		yield


def show_warning(message: str) -> None:
	"""Print a framed warning for the user."""
	display_warning_summary(message)


def exit_with_error(message: str, exception: Exception | None = None, exit_code: int = 1) -> NoReturn:
	"""
	Print a framed error summary and stop the command.

	Args:
	    message: What failed, in the user's terms
	    exception: Underlying cause; its text is appended as details
	    exit_code: Process exit status

	"""
	if exception is not None:
		logger.debug("Command failed", exc_info=exception)
		message = f"{message}\n\nDetails: {exception}"
	display_error_summary(message)
	raise typer.Exit(exit_code) from exception


def handle_keyboard_interrupt() -> NoReturn:
	"""Stop the command after Ctrl-C without writing a commit."""
	console.print("\n[yellow]Cancelled, nothing was committed.[/yellow]")
	raise typer.Exit(INTERRUPTED_EXIT_CODE)
