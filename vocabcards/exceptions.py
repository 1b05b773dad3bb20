"""Exception hierarchy for vocabcards."""


class VocabCardsError(Exception):
    """Base class for all errors raised by vocabcards."""


class CsvParseError(VocabCardsError):
    """The CSV file cannot be read at all."""

    def __init__(self, message: str, file_path: str | None = None) -> None:
        self.file_path = file_path
        if file_path:
            super().__init__(f"Failed to parse CSV file '{file_path}': {message}")
        else:
            super().__init__(f"Failed to parse CSV file: {message}")


class CsvFileNotFoundError(CsvParseError):
    """The CSV file does not exist."""

    def __init__(self, file_path: str) -> None:
        super().__init__("file not found", file_path)


class InvalidCsvFormatError(VocabCardsError):
    """A row or the header of the CSV file is malformed."""

    def __init__(self, message: str, row_number: int | None = None) -> None:
        self.row_number = row_number
        if row_number:
            super().__init__(f"Invalid CSV format at row {row_number}: {message}")
        else:
            super().__init__(f"Invalid CSV format: {message}")


class DictionaryFetchError(VocabCardsError):
    """Dictionary HTML could not be fetched after all retries."""

    def __init__(self, word: str, attempts: int, cause: Exception | None = None) -> None:
        self.word = word
        self.attempts = attempts
        super().__init__(
            f"Failed to fetch data for word '{word}' after {attempts} attempts: {cause}"
        )


class InvariantViolation(VocabCardsError):
    """
    A programming defect, not a data problem.

    Raised when the closed set of vocabulary types is not handled somewhere.
    Never converted into a per-entry failure.
    """


class ExtractorNotFoundError(InvariantViolation):
    """No registered extractor accepts a vocabulary type."""

    def __init__(self, vocabulary_type: object) -> None:
        super().__init__(f"No extractor found for vocabulary type: {vocabulary_type}")


class UnsupportedRecordError(InvariantViolation):
    """The card mapper received a record it has no layout for."""

    def __init__(self, vocabulary_type: object) -> None:
        super().__init__(f"Unsupported vocabulary type: {vocabulary_type}")
