"""Read vocabulary entries from a CSV file."""

import asyncio
import csv
import logging
from pathlib import Path

from vocabcards.exceptions import (
    CsvFileNotFoundError,
    CsvParseError,
    InvalidCsvFormatError,
)
from vocabcards.vocabulary import VocabularyEntry, VocabularyType

logger = logging.getLogger(__name__)


def _find_column(fieldnames: list[str], name: str) -> str | None:
    """Header matching is case-insensitive and ignores surrounding whitespace."""
    for field in fieldnames:
        if field and field.strip().lower() == name:
            return field
    return None


class CsvReader:
    """
    Parse a ``word[,type]`` CSV into vocabulary entries.

    The ``word`` column is required; ``type`` is optional and every entry is
    UNSET when it is missing. The first malformed row aborts the read.
    """

    async def read(self, file_path: str | Path) -> list[VocabularyEntry]:
        path = Path(file_path)
        logger.info(f"Starting to read CSV file: {path}")
        self._validate_path(path)

        # Run file I/O in thread executor to avoid blocking
        loop = asyncio.get_running_loop()
        entries = await loop.run_in_executor(None, self._read_sync, path)

        logger.info(f"Completed reading CSV file: {path}. Processed {len(entries)} rows.")
        return entries

    def _validate_path(self, path: Path) -> None:
        if path.suffix.lower() != ".csv":
            raise CsvParseError("File must have .csv extension", str(path))
        if not path.exists():
            raise CsvFileNotFoundError(str(path))
        if not path.is_file():
            raise CsvParseError("File is not accessible: not a regular file", str(path))

    def _read_sync(self, path: Path) -> list[VocabularyEntry]:
        try:
            with path.open(newline="", encoding="utf-8-sig") as f:
                reader = csv.DictReader(f)
                fieldnames = list(reader.fieldnames or [])
                word_key = _find_column(fieldnames, "word")
                type_key = _find_column(fieldnames, "type")
                if fieldnames and word_key is None:
                    raise InvalidCsvFormatError("Missing required column: word", 1)

                entries: list[VocabularyEntry] = []
                for row_number, row in enumerate(reader, start=1):
                    entries.append(self._parse_row(row, row_number, word_key, type_key))
                return entries
        except (OSError, UnicodeDecodeError, csv.Error) as e:
            logger.error(f"Error reading CSV file: {path}: {e}")
            raise CsvParseError(str(e), str(path)) from e

    def _parse_row(
        self,
        row: dict[str, str | None],
        row_number: int,
        word_key: str,
        type_key: str | None,
    ) -> VocabularyEntry:
        word = (row.get(word_key) or "").strip()
        if not word:
            raise InvalidCsvFormatError("Word column cannot be empty", row_number)

        if type_key is None:
            return VocabularyEntry(word=word, type=VocabularyType.UNSET, row_number=row_number)

        raw_type = row.get(type_key) or ""
        vocabulary_type = VocabularyType.from_string(raw_type)
        if vocabulary_type is None:
            raise InvalidCsvFormatError(
                f"Invalid type value: '{raw_type.strip()}'. "
                "Must be one of verb, noun, adjective or empty",
                row_number,
            )
        return VocabularyEntry(word=word, type=vocabulary_type, row_number=row_number)
