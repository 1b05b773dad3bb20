"""Services turning vocabulary CSV files into flashcards."""

from vocabcards.services.card_store import CardStore, LocalCardStore, clean_german_text
from vocabcards.services.classifier import TypeClassifier
from vocabcards.services.csv_reader import CsvReader
from vocabcards.services.dictionary_client import DictionaryClient
from vocabcards.services.mapper import CardFields, CardMapper
from vocabcards.services.processor import (
    FlashcardProcessor,
    ProcessingResult,
    ProcessingSummary,
    ProcessingTarget,
)

__all__ = [
    "CardFields",
    "CardMapper",
    "CardStore",
    "CsvReader",
    "DictionaryClient",
    "FlashcardProcessor",
    "LocalCardStore",
    "ProcessingResult",
    "ProcessingSummary",
    "ProcessingTarget",
    "TypeClassifier",
    "clean_german_text",
]
