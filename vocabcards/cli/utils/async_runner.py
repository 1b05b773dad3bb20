"""Async runner utilities for CLI commands."""

import asyncio
import logging
from collections.abc import Coroutine
from typing import Any, TypeVar

import typer

from vocabcards.cli.utils.console import error_console
from vocabcards.exceptions import VocabCardsError

logger = logging.getLogger(__name__)

T = TypeVar("T")


def run_async(coro: Coroutine[Any, Any, T]) -> T:
    """Run an async coroutine from synchronous CLI code."""
    return asyncio.run(coro)


def run_command(coro: Coroutine[Any, Any, T]) -> T:
    """
    Run a command coroutine, reporting expected failures as an error line.

    Any VocabCardsError (bad CSV, unreachable dictionary, ...) exits with code 1.
    """
    try:
        return run_async(coro)
    except VocabCardsError as e:
        logger.debug(f"Command failed: {e}", exc_info=True)
        error_console.print(f"[error]{e}[/]")
        raise typer.Exit(1) from None
