"""Flashcard processing pipeline: CSV rows to cards."""

import asyncio
import logging
import time
from collections.abc import Callable, Sequence
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Protocol

from vocabcards.exceptions import InvariantViolation
from vocabcards.services.card_store import CardStore, clean_german_text
from vocabcards.services.classifier import TypeClassifier
from vocabcards.services.csv_reader import CsvReader
from vocabcards.services.dictionary_client import DictionaryClient
from vocabcards.services.extraction.registry import ExtractorRegistry
from vocabcards.services.mapper import CardMapper
from vocabcards.vocabulary import VocabularyEntry, VocabularyRecord, VocabularyType

logger = logging.getLogger(__name__)

DUPLICATE_REASON = "Word already exists in deck"


class HtmlFetcher(Protocol):
    async def fetch_word_html(self, word: str) -> str: ...


@dataclass(frozen=True)
class ProcessingTarget:
    """Deck the cards of one run are created in. Passed explicitly per run."""

    deck_id: str
    deck_name: str | None = None


@dataclass(frozen=True)
class ProcessingResult:
    """Outcome of one CSV entry: created, skipped as duplicate, or failed."""

    entry: VocabularyEntry
    success: bool
    data: VocabularyRecord | None = None
    skipped: bool | None = None
    reason: str | None = None
    error: str | None = None
    card_id: str | None = None

    def to_dict(self) -> dict[str, Any]:
        result: dict[str, Any] = {
            "entry": self.entry.to_dict(),
            "success": self.success,
        }
        if self.data is not None:
            result["data"] = self.data.to_dict()
        if self.skipped is not None:
            result["skipped"] = self.skipped
        if self.reason is not None:
            result["reason"] = self.reason
        if self.error is not None:
            result["error"] = self.error
        if self.card_id is not None:
            result["cardId"] = self.card_id
        return result


@dataclass
class ProcessingSummary:
    """Counters and per-entry audit trail of one run, in CSV order."""

    total_rows: int = 0
    success_count: int = 0
    failure_count: int = 0
    skipped_count: int = 0
    results: list[ProcessingResult] = field(default_factory=list)
    processing_time_ms: int = 0

    def record(self, result: ProcessingResult) -> None:
        self.results.append(result)
        if result.skipped:
            self.skipped_count += 1
        elif result.success:
            self.success_count += 1
        else:
            self.failure_count += 1

    @property
    def failed_results(self) -> list[ProcessingResult]:
        return [r for r in self.results if not r.success and not r.skipped]

    def to_dict(self) -> dict[str, Any]:
        return {
            "totalRows": self.total_rows,
            "successCount": self.success_count,
            "failureCount": self.failure_count,
            "skippedCount": self.skipped_count,
            "results": [r.to_dict() for r in self.results],
            "processingTimeMs": self.processing_time_ms,
        }


class FlashcardProcessor:
    """
    Run every CSV entry through duplicate check, fetch, classification,
    extraction, mapping and card creation.

    A failing entry becomes a failed result and the run continues.
    InvariantViolation is a programming defect and is re-raised.
    """

    def __init__(
        self,
        fetcher: HtmlFetcher,
        card_store: CardStore,
        classifier: TypeClassifier | None = None,
        registry: ExtractorRegistry | None = None,
        mapper: CardMapper | None = None,
        csv_reader: CsvReader | None = None,
    ) -> None:
        self.fetcher = fetcher
        self.card_store = card_store
        self.classifier = classifier or TypeClassifier()
        self.registry = registry or ExtractorRegistry()
        self.mapper = mapper or CardMapper()
        self.csv_reader = csv_reader or CsvReader()
        # Card creation shares one database session, so writes are serialized
        self._store_lock = asyncio.Lock()

    async def process_file(
        self,
        csv_path: str | Path,
        target: ProcessingTarget,
        batch_size: int | None = None,
        on_result: Callable[[ProcessingResult], None] | None = None,
    ) -> ProcessingSummary:
        """
        Read ``csv_path`` and process every entry into ``target``.

        CSV errors propagate before anything is processed.
        """
        start = time.perf_counter()
        logger.info(f"Starting flashcard processing for file: {csv_path}")

        entries = await self.csv_reader.read(csv_path)
        logger.info(f"Found {len(entries)} entries to process")

        return await self.process_entries(
            entries, target, batch_size=batch_size, on_result=on_result, started_at=start
        )

    async def process_entries(
        self,
        entries: Sequence[VocabularyEntry],
        target: ProcessingTarget,
        batch_size: int | None = None,
        on_result: Callable[[ProcessingResult], None] | None = None,
        started_at: float | None = None,
    ) -> ProcessingSummary:
        start = started_at if started_at is not None else time.perf_counter()
        size = max(1, batch_size or 1)
        summary = ProcessingSummary(total_rows=len(entries))

        # Computed once per run; cards created during the run are not added
        existing_names = await self.card_store.existing_names(target.deck_id)
        logger.debug(f"Deck {target.deck_id} has {len(existing_names)} existing cards")

        for i in range(0, len(entries), size):
            batch = entries[i : i + size]
            if size == 1:
                results = [await self.process_entry(batch[0], target, existing_names)]
            else:
                results = await self._process_batch(batch, target, existing_names)

            for result in results:
                summary.record(result)
                if on_result:
                    on_result(result)
                logger.info(
                    f"Progress: {len(summary.results)}/{summary.total_rows} "
                    f"({summary.success_count} succeeded, {summary.skipped_count} skipped, "
                    f"{summary.failure_count} failed)"
                )

        summary.processing_time_ms = int((time.perf_counter() - start) * 1000)
        logger.info(
            f"Completed processing: {summary.success_count}/{summary.total_rows} succeeded "
            f"in {summary.processing_time_ms}ms"
        )
        return summary

    async def _process_batch(
        self,
        batch: Sequence[VocabularyEntry],
        target: ProcessingTarget,
        existing_names: set[str] | frozenset[str],
    ) -> list[ProcessingResult]:
        """Process a batch concurrently. An InvariantViolation cancels the rest of the batch."""
        try:
            async with asyncio.TaskGroup() as group:
                tasks = [
                    group.create_task(self.process_entry(entry, target, existing_names))
                    for entry in batch
                ]
        except ExceptionGroup as e:
            raise e.exceptions[0] from None
        return [task.result() for task in tasks]

    async def process_entry(
        self,
        entry: VocabularyEntry,
        target: ProcessingTarget,
        existing_names: set[str] | frozenset[str] = frozenset(),
    ) -> ProcessingResult:
        """Process one entry. Never raises except for InvariantViolation."""
        logger.debug(f"Processing entry: {entry.word} ({entry.type.value})")

        if clean_german_text(entry.word) in existing_names:
            logger.info(f"Skipping '{entry.word}': already exists in deck")
            return ProcessingResult(
                entry=entry, success=False, skipped=True, reason=DUPLICATE_REASON
            )

        try:
            record = await self.extract(entry.word, entry.type)
            fields = self.mapper.map_to_card(record, target.deck_id)
            async with self._store_lock:
                card_id = await self.card_store.create_card(target.deck_id, fields)
        except InvariantViolation:
            raise
        except Exception as e:
            logger.error(
                f"Failed to process entry '{entry.word}' at row {entry.row_number}: {e}",
                exc_info=True,
            )
            return ProcessingResult(entry=entry, success=False, error=str(e))

        return ProcessingResult(entry=entry, success=True, data=record, card_id=card_id)

    async def extract(
        self, word: str, vocabulary_type: VocabularyType = VocabularyType.UNSET
    ) -> VocabularyRecord:
        """Fetch the dictionary page for ``word`` and extract its record."""
        html = await self.fetcher.fetch_word_html(word)

        if vocabulary_type == VocabularyType.UNSET:
            vocabulary_type = self.classifier.classify(html)
            logger.info(f"Classified '{word}' as {vocabulary_type.value}")

        extractor = self.registry.get_extractor(vocabulary_type)
        return extractor.parse(html)


def build_processor(card_store: CardStore, fetcher: HtmlFetcher | None = None) -> FlashcardProcessor:
    """Processor wired to the live dictionary client."""
    return FlashcardProcessor(fetcher=fetcher or DictionaryClient(), card_store=card_store)
