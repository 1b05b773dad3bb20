"""Vocabulary types, CSV entries and the extracted vocabulary records."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any

# Sentinels used when an extraction strategy finds nothing
UNKNOWN = "unknown"
TRANSLATION_NOT_FOUND = "translation not found"
EXAMPLE_NOT_FOUND = "example not found"
ARTICLE_NOT_FOUND = "article not found"
PLURAL_NOT_FOUND = "plural not found"

# Person/number slots of a present tense table, in table order
PERSONS = ("ich", "du", "er", "wir", "ihr", "sie")


class VocabularyType(str, Enum):
    """Grammatical category of a vocabulary entry."""

    VERB = "verb"
    NOUN = "noun"
    ADJECTIVE = "adjective"
    UNSET = "unset"  # not declared, classification required

    @classmethod
    def from_string(cls, value: str | None) -> "VocabularyType | None":
        """
        Parse a type column value.

        Blank values mean "not declared" and map to UNSET.
        Returns None for anything that is not a known type.
        """
        cleaned = (value or "").strip().lower()
        if not cleaned:
            return cls.UNSET
        try:
            return cls(cleaned)
        except ValueError:
            return None


@dataclass(frozen=True)
class VocabularyEntry:
    """One row of the input CSV."""

    word: str
    type: VocabularyType = VocabularyType.UNSET
    row_number: int | None = None

    def to_dict(self) -> dict[str, Any]:
        return {"word": self.word, "type": self.type.value, "rowNumber": self.row_number}


def _not_found_example() -> list[str]:
    return [EXAMPLE_NOT_FOUND]


def _empty_conjugations() -> dict[str, str]:
    return {person: "" for person in PERSONS}


@dataclass(frozen=True)
class VerbRecord:
    """Extracted data for a verb page."""

    word: str
    conjugations: dict[str, str] = field(default_factory=_empty_conjugations)
    simple_past: str = UNKNOWN
    perfekt: str = UNKNOWN  # auxiliary + participle, e.g. "ist gelaufen"
    translation: str = TRANSLATION_NOT_FOUND
    example: list[str] = field(default_factory=_not_found_example)
    type: VocabularyType = field(default=VocabularyType.VERB, init=False)

    def to_dict(self) -> dict[str, Any]:
        return {
            "word": self.word,
            "type": self.type.value,
            "conjugations": dict(self.conjugations),
            "simplePast": self.simple_past,
            "perfekt": self.perfekt,
            "translation": self.translation,
            "example": list(self.example),
        }


@dataclass(frozen=True)
class NounRecord:
    """Extracted data for a noun page. ``word`` is the bare noun without article."""

    word: str
    article: str = ARTICLE_NOT_FOUND
    plural: str = PLURAL_NOT_FOUND
    translation: str = TRANSLATION_NOT_FOUND
    example: list[str] = field(default_factory=_not_found_example)
    type: VocabularyType = field(default=VocabularyType.NOUN, init=False)

    def to_dict(self) -> dict[str, Any]:
        return {
            "word": self.word,
            "type": self.type.value,
            "article": self.article,
            "plural": self.plural,
            "translation": self.translation,
            "example": list(self.example),
        }


@dataclass(frozen=True)
class Comparison:
    """Positive, comparative and superlative of an adjective."""

    positive: str = UNKNOWN
    comparative: str = UNKNOWN
    superlative: str = UNKNOWN


@dataclass(frozen=True)
class Declension:
    """
    Strong, weak and mixed declension tables.

    Each table maps ``"<gender>_<case>"`` (e.g. ``"masculine_dative"``) to the
    declined form. Combinations missing on the page are absent from the mapping.
    """

    strong: dict[str, str] = field(default_factory=dict)
    weak: dict[str, str] = field(default_factory=dict)
    mixed: dict[str, str] = field(default_factory=dict)


@dataclass(frozen=True)
class AdjectiveRecord:
    """Extracted data for an adjective page."""

    word: str
    comparison: Comparison = field(default_factory=Comparison)
    declension: Declension = field(default_factory=Declension)
    translation: str = TRANSLATION_NOT_FOUND
    example: list[str] = field(default_factory=_not_found_example)
    type: VocabularyType = field(default=VocabularyType.ADJECTIVE, init=False)

    def to_dict(self) -> dict[str, Any]:
        return {
            "word": self.word,
            "type": self.type.value,
            "comparison": {
                "positive": self.comparison.positive,
                "comparative": self.comparison.comparative,
                "superlative": self.comparison.superlative,
            },
            "declension": {
                "strong": dict(self.declension.strong),
                "weak": dict(self.declension.weak),
                "mixed": dict(self.declension.mixed),
            },
            "translation": self.translation,
            "example": list(self.example),
        }


@dataclass(frozen=True)
class DefaultRecord:
    """Extracted data for a page whose category could not be determined."""

    word: str
    translation: str = TRANSLATION_NOT_FOUND
    example: list[str] = field(default_factory=_not_found_example)
    type: VocabularyType = field(default=VocabularyType.UNSET, init=False)

    def to_dict(self) -> dict[str, Any]:
        return {
            "word": self.word,
            "type": self.type.value,
            "translation": self.translation,
            "example": list(self.example),
        }


VocabularyRecord = VerbRecord | NounRecord | AdjectiveRecord | DefaultRecord
