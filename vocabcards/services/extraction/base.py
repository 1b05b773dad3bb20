"""Capability interface shared by all vocabulary extractors."""

from abc import ABC, abstractmethod

from vocabcards.vocabulary import VocabularyRecord, VocabularyType


class VocabularyExtractor(ABC):
    """
    Turns a dictionary page into a vocabulary record.

    Implementations hard-code the record type they produce, so a record's
    ``type`` always matches the extractor that built it. Shared parsing lives
    in :mod:`vocabcards.services.extraction.common`, not in this class.
    """

    @property
    @abstractmethod
    def vocabulary_type(self) -> VocabularyType:
        """The only vocabulary type this extractor accepts."""
        ...  # pragma: no cover

    def can_handle(self, vocabulary_type: VocabularyType) -> bool:
        """Return True if this extractor produces records for ``vocabulary_type``."""
        return vocabulary_type == self.vocabulary_type

    @abstractmethod
    def parse(self, html: str) -> VocabularyRecord:
        """
        Parse raw page HTML into a record.

        Args:
            html: Raw HTML of the dictionary page

        Returns:
            Record whose fields hold sentinels where the page lacked data
        """
        ...  # pragma: no cover
