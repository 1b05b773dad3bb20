"""Map extracted vocabulary records to flashcard fields."""

from dataclasses import asdict, dataclass
from typing import Any

from vocabcards.exceptions import UnsupportedRecordError
from vocabcards.vocabulary import (
    ARTICLE_NOT_FOUND,
    AdjectiveRecord,
    DefaultRecord,
    NounRecord,
    VerbRecord,
    VocabularyRecord,
)

# (gender key, short label) and case order used by the compact declension block
DECLENSION_GENDERS = (
    ("masculine", "Masc"),
    ("feminine", "Fem"),
    ("neutral", "Neut"),
    ("plural", "Pl"),
)
DECLENSION_CASES = ("nominative", "accusative", "dative", "genitive")
MISSING_FORM = "-"


@dataclass(frozen=True)
class CardFields:
    """Question/answer/markdown fields of one flashcard."""

    deck_id: str
    name: str
    question: str
    answer: str
    prompt: str
    q_md_body: str | None = None
    q_md_clarifier: str | None = None
    q_md_footnote: str | None = None
    q_md_prompt: str | None = None
    a_md_body: str | None = None
    a_md_clarifier: str | None = None
    a_md_footnote: str | None = None
    a_md_prompt: str | None = None

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


def _noun_heading(record: NounRecord) -> str:
    if record.article == ARTICLE_NOT_FOUND:
        return record.word
    return f"{record.article} {record.word}"


def _declension_compact(title: str, forms: dict[str, str]) -> str:
    """One line per gender: ``**Masc:** schneller•schnellen•schnellem•schnellen``."""
    lines = [f"### {title}", ""]
    for gender, label in DECLENSION_GENDERS:
        cells = [forms.get(f"{gender}_{case}", MISSING_FORM) for case in DECLENSION_CASES]
        lines.append(f"**{label}:** ")
        lines.append("•".join(cells) + "  ")
    return "\n".join(lines)


def _all_declension_tables(record: AdjectiveRecord) -> str:
    return "\n\n".join(
        [
            _declension_compact("Strong", record.declension.strong),
            _declension_compact("Weak", record.declension.weak),
            _declension_compact("Mixed", record.declension.mixed),
        ]
    )


class CardMapper:
    """Build the card for a record; each record type has its own layout."""

    def map_to_card(self, record: VocabularyRecord, deck_id: str) -> CardFields:
        """
        Map a record to card fields for ``deck_id``.

        Raises:
            UnsupportedRecordError: The record is not one of the known variants.
        """
        if isinstance(record, VerbRecord):
            return self._map_verb(record, deck_id)
        if isinstance(record, NounRecord):
            return self._map_noun(record, deck_id)
        if isinstance(record, AdjectiveRecord):
            return self._map_adjective(record, deck_id)
        if isinstance(record, DefaultRecord):
            return self._map_default(record, deck_id)
        raise UnsupportedRecordError(getattr(record, "type", type(record).__name__))

    def map_many(self, records: list[VocabularyRecord], deck_id: str) -> list[CardFields]:
        return [self.map_to_card(record, deck_id) for record in records]

    def _map_verb(self, record: VerbRecord, deck_id: str) -> CardFields:
        c = record.conjugations
        answer = "\n".join(
            [
                f"Translation: {record.translation}",
                "",
                "Present:",
                f"  ich {c['ich']}",
                f"  du {c['du']}",
                f"  er/sie/es {c['er']}",
                f"  wir {c['wir']}",
                f"  ihr {c['ihr']}",
                f"  sie {c['sie']}",
                "",
                f"Simple Past: {record.simple_past}",
                f"Perfect: {record.perfekt}",
            ]
        )
        a_md_body = f"""### {record.word}

**Translation:** {record.translation}

#### Present Tense
| Person | Conjugation |
|--------|-------------|
| ich | {c['ich']} |
| du | {c['du']} |
| er/sie/es | {c['er']} |
| wir | {c['wir']} |
| ihr | {c['ihr']} |
| sie | {c['sie']} |

**Simple Past (Präteritum):** {record.simple_past}

**Perfect:** {record.perfekt}"""

        return CardFields(
            deck_id=deck_id,
            name=record.word,
            question=record.word,
            answer=answer,
            prompt="\n\n".join(record.example),
            q_md_body=f"**{record.word}**",
            q_md_clarifier="Translate and conjugate",
            a_md_body=a_md_body,
            a_md_clarifier=f"Translation: {record.translation}",
            a_md_prompt=record.example[0] if record.example else None,
        )

    def _map_noun(self, record: NounRecord, deck_id: str) -> CardFields:
        heading = _noun_heading(record)
        answer = "\n".join(
            [
                f"Translation: {record.translation}",
                f"Article: {record.article}",
                f"Plural: {record.plural}",
            ]
        )
        a_md_body = f"""### {heading}

**Translation:** {record.translation}

**Article:** {record.article}

**Plural:** {record.plural}"""

        return CardFields(
            deck_id=deck_id,
            name=record.word,
            question=heading,
            answer=answer,
            prompt="\n\n".join(record.example),
            q_md_body=f"**{heading}**",
            a_md_body=a_md_body,
            a_md_clarifier=f"Article: {record.article}",
            a_md_footnote=f"Plural: {record.plural}",
            a_md_prompt=record.example[0] if record.example else None,
        )

    def _map_adjective(self, record: AdjectiveRecord, deck_id: str) -> CardFields:
        comparison = record.comparison
        declension = _all_declension_tables(record)
        answer = "\n".join(
            [
                f"Translation: {record.translation}",
                "",
                "Comparison:",
                f"  Positive: {comparison.positive}",
                f"  Comparative: {comparison.comparative}",
                f"  Superlative: {comparison.superlative}",
                "",
                f"Declension:\n{declension}",
            ]
        )
        a_md_body = f"""### {record.word}

**Translation:** {record.translation}

#### Comparison
- **Positive:** {comparison.positive}
- **Comparative:** {comparison.comparative}
- **Superlative:** {comparison.superlative}

#### Declension Tables
(nominative, accusative, dative, genitive)
{declension}"""

        return CardFields(
            deck_id=deck_id,
            name=record.word,
            question=record.word,
            answer=answer,
            prompt="\n\n".join(record.example),
            q_md_body=f"**{record.word}**",
            q_md_clarifier="Translate and decline",
            a_md_body=a_md_body,
            a_md_clarifier=f"Translation: {record.translation}",
            a_md_prompt=record.example[0] if record.example else None,
        )

    def _map_default(self, record: DefaultRecord, deck_id: str) -> CardFields:
        return CardFields(
            deck_id=deck_id,
            name=record.word,
            question=record.word,
            answer=f"Translation: {record.translation}",
            prompt="\n\n".join(record.example),
            q_md_body=f"**{record.word}**",
            q_md_clarifier="Translate",
            a_md_body=f"### {record.word}\n\n**Translation:** {record.translation}",
            a_md_clarifier=f"Translation: {record.translation}",
            a_md_prompt=record.example[0] if record.example else None,
        )
