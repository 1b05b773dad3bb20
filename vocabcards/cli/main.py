"""Main CLI application entry point."""

import typer

from vocabcards.cli.commands import classify, lookup, process
from vocabcards.cli.utils.async_runner import run_async
from vocabcards.cli.utils.console import error_console
from vocabcards.config import settings
from vocabcards.database import init_db
from vocabcards.logging_config import setup_logging

app = typer.Typer(
    name="vocabcards",
    help="Create German vocabulary flashcards from a CSV word list",
    no_args_is_help=True,
    rich_markup_mode="rich",
)


@app.callback()
def startup(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log at DEBUG level"),
) -> None:
    """Initialize application on startup."""
    setup_logging("DEBUG" if verbose else None)

    # Ensure directories exist
    settings.data_dir.mkdir(parents=True, exist_ok=True)

    # Initialize database
    try:
        run_async(init_db())
    except Exception as e:
        error_console.print(f"[error]Failed to initialize database: {e}[/]")
        raise typer.Exit(1) from None


app.command(name="process", help="Create flashcards for every word of a CSV file")(
    process.process_csv
)

app.command(name="lookup", help="Fetch one word and print the extracted record")(lookup.lookup)

app.command(name="classify", help="Classify a saved dictionary HTML page")(classify.classify)


if __name__ == "__main__":
    app()
