"""CSV processing command."""

import logging
from pathlib import Path

import typer
from rich.panel import Panel
from rich.table import Table

from vocabcards.cli.utils.async_runner import run_command
from vocabcards.cli.utils.console import console, error_console, format_type
from vocabcards.cli.utils.progress import create_progress
from vocabcards.config import settings
from vocabcards.database import async_session
from vocabcards.services.card_store import LocalCardStore
from vocabcards.services.processor import (
    ProcessingResult,
    ProcessingSummary,
    ProcessingTarget,
    build_processor,
)

logger = logging.getLogger(__name__)


def process_csv(
    csv_path: Path = typer.Argument(..., help="Path to a vocabulary CSV file (columns: word, type)"),
    deck: str | None = typer.Option(
        None, "--deck", "-d", help="Deck to add the cards to (created if missing)"
    ),
    batch_size: int | None = typer.Option(
        None, "--batch-size", "-b", min=1, help="Entries processed concurrently"
    ),
) -> None:
    """Create flashcards for every word of a CSV file."""
    if not csv_path.exists():
        error_console.print(f"[error]File not found: {csv_path}[/]")
        raise typer.Exit(1)

    summary = run_command(
        _process_csv(csv_path, deck or settings.default_deck, batch_size or settings.batch_size)
    )
    display_summary(summary)


async def _process_csv(csv_path: Path, deck_name: str, batch_size: int) -> ProcessingSummary:
    """Async implementation of process command."""
    console.print(f"\n[bold]Processing:[/] {csv_path.name}")

    async with async_session() as session:
        store = LocalCardStore(session)
        deck = await store.get_or_create_deck(deck_name)
        console.print(f"[dim]Deck: {deck.name} ({deck.id})[/]\n")

        processor = build_processor(store)
        entries = await processor.csv_reader.read(csv_path)
        if not entries:
            console.print("[warning]No vocabulary entries found in file.[/]")

        target = ProcessingTarget(deck_id=deck.id, deck_name=deck.name)

        with create_progress() as progress:
            task = progress.add_task("Processing words...", total=len(entries))

            def advance(result: ProcessingResult) -> None:
                word = result.entry.word
                if result.skipped:
                    description = f"[skipped]Skipped: {word}[/]"
                elif result.success:
                    description = f"[green]Created: {word}[/]"
                else:
                    description = f"[red]Failed: {word}[/]"
                progress.update(task, advance=1, description=description)

            return await processor.process_entries(
                entries, target, batch_size=batch_size, on_result=advance
            )


def display_summary(summary: ProcessingSummary) -> None:
    """Print counters and the list of failed entries."""
    table = Table(show_header=False, box=None, padding=(0, 2))
    table.add_column("Label", style="bold")
    table.add_column("Value", justify="right")

    table.add_row("Total rows", str(summary.total_rows))
    table.add_row("New cards created", f"[green]{summary.success_count}[/]")
    table.add_row("Skipped (duplicates)", f"[yellow]{summary.skipped_count}[/]")
    table.add_row(
        "Failed", f"[red]{summary.failure_count}[/]" if summary.failure_count else "0"
    )
    table.add_row("Time", f"{summary.processing_time_ms / 1000:.2f}s")

    console.print()
    console.print(Panel(table, title="[bold]Processing complete[/]", border_style="blue"))

    failed = summary.failed_results
    if failed:
        console.print("\n[error]Failed entries:[/]")
        for result in failed:
            console.print(
                f"  - [word]{result.entry.word}[/] ({format_type(result.entry.type.value)}): "
                f"{result.error}"
            )
    console.print()
