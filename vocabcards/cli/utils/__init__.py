"""CLI utility modules."""

from vocabcards.cli.utils.async_runner import run_async, run_command
from vocabcards.cli.utils.console import console, error_console, format_type
from vocabcards.cli.utils.progress import create_progress, create_spinner

__all__ = [
    "run_async",
    "run_command",
    "console",
    "error_console",
    "format_type",
    "create_progress",
    "create_spinner",
]
