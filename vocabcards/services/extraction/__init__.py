"""HTML extractors turning dictionary pages into vocabulary records."""

from vocabcards.services.extraction.adjective import AdjectiveExtractor
from vocabcards.services.extraction.base import VocabularyExtractor
from vocabcards.services.extraction.common import extract_example, extract_translation
from vocabcards.services.extraction.default import DefaultExtractor
from vocabcards.services.extraction.noun import NounExtractor
from vocabcards.services.extraction.registry import ExtractorRegistry, default_extractors
from vocabcards.services.extraction.verb import VerbExtractor

__all__ = [
    "AdjectiveExtractor",
    "DefaultExtractor",
    "ExtractorRegistry",
    "NounExtractor",
    "VerbExtractor",
    "VocabularyExtractor",
    "default_extractors",
    "extract_example",
    "extract_translation",
]
