"""Selection of the extractor responsible for a vocabulary type."""

import logging
from collections.abc import Sequence

from vocabcards.exceptions import ExtractorNotFoundError
from vocabcards.services.extraction.adjective import AdjectiveExtractor
from vocabcards.services.extraction.base import VocabularyExtractor
from vocabcards.services.extraction.default import DefaultExtractor
from vocabcards.services.extraction.noun import NounExtractor
from vocabcards.services.extraction.verb import VerbExtractor
from vocabcards.vocabulary import VocabularyType

logger = logging.getLogger(__name__)


def default_extractors() -> list[VocabularyExtractor]:
    """All built-in extractors; the fallback for UNSET is registered last."""
    return [VerbExtractor(), NounExtractor(), AdjectiveExtractor(), DefaultExtractor()]


class ExtractorRegistry:
    """Linear scan over registered extractors, first ``can_handle`` match wins."""

    def __init__(self, extractors: Sequence[VocabularyExtractor] | None = None) -> None:
        self.extractors = list(extractors) if extractors is not None else default_extractors()

    def get_extractor(self, vocabulary_type: VocabularyType) -> VocabularyExtractor:
        """
        Return the extractor for ``vocabulary_type``.

        Raises:
            ExtractorNotFoundError: No extractor accepts the type. This is a
                configuration defect and must not be treated as a data error.
        """
        for extractor in self.extractors:
            if extractor.can_handle(vocabulary_type):
                logger.debug(f"Selected {type(extractor).__name__} for type {vocabulary_type}")
                return extractor

        logger.error(f"No extractor found for vocabulary type: {vocabulary_type}")
        raise ExtractorNotFoundError(vocabulary_type)
