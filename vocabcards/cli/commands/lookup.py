"""Single word lookup command."""

import json

import typer

from vocabcards.cli.utils.async_runner import run_command
from vocabcards.cli.utils.console import console, error_console, format_type
from vocabcards.cli.utils.progress import create_spinner
from vocabcards.services.classifier import TypeClassifier
from vocabcards.services.dictionary_client import DictionaryClient
from vocabcards.services.extraction.registry import ExtractorRegistry
from vocabcards.vocabulary import VocabularyRecord, VocabularyType


def lookup(
    word: str = typer.Argument(..., help="German word to look up"),
    type_: str | None = typer.Option(
        None, "--type", "-t", help="verb, noun or adjective (classified when omitted)"
    ),
) -> None:
    """Fetch one word from the dictionary and print the extracted record."""
    vocabulary_type = VocabularyType.from_string(type_)
    if vocabulary_type is None:
        error_console.print(f"[error]Invalid type: {type_}[/]")
        raise typer.Exit(1)

    record = run_command(_lookup(word, vocabulary_type))

    console.print(f"\n[word]{record.word}[/] {format_type(record.type.value)}")
    console.print_json(json.dumps(record.to_dict(), ensure_ascii=False))


async def _lookup(word: str, vocabulary_type: VocabularyType) -> VocabularyRecord:
    """Async implementation of lookup command."""
    client = DictionaryClient()

    with create_spinner() as progress:
        task = progress.add_task(f"Fetching '{word}'...")
        html = await client.fetch_word_html(word)
        progress.update(task, description="[green]Fetched[/]")

    if vocabulary_type == VocabularyType.UNSET:
        vocabulary_type = TypeClassifier().classify(html)
        console.print(f"[dim]Classified as {vocabulary_type.value}[/]")

    return ExtractorRegistry().get_extractor(vocabulary_type).parse(html)
