"""Classify a saved dictionary page."""

from pathlib import Path

import typer
from rich.table import Table

from vocabcards.cli.utils.console import console, error_console, format_type
from vocabcards.services.classifier import TypeClassifier


def classify(
    html_path: Path = typer.Argument(..., help="Saved dictionary page (.html)"),
    scores: bool = typer.Option(False, "--scores", help="Also show the fallback scores"),
) -> None:
    """Print the vocabulary type of a saved dictionary page."""
    if not html_path.exists():
        error_console.print(f"[error]File not found: {html_path}[/]")
        raise typer.Exit(1)

    html = html_path.read_text(encoding="utf-8")
    classifier = TypeClassifier()
    vocabulary_type = classifier.classify(html)

    console.print(f"{html_path.name}: {format_type(vocabulary_type.value)}")

    if scores:
        table = Table(title="Fallback scores")
        table.add_column("Type", style="bold")
        table.add_column("Points", justify="right")
        for score_type, points in classifier.score(html).items():
            table.add_row(score_type.value, str(points))
        console.print(table)
