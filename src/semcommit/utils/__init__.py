"""Utility module for semcommit package."""

from .cli_utils import exit_with_error, handle_keyboard_interrupt, loading_spinner, show_warning
from .log_setup import console, display_error_summary, display_warning_summary, setup_logging

__all__ = [
	"console",
	"display_error_summary",
	"display_warning_summary",
	"exit_with_error",
	"handle_keyboard_interrupt",
	"loading_spinner",
	"setup_logging",
	"show_warning",
]
