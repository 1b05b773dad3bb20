"""Extractor for verb conjugation pages."""

import logging

from bs4 import BeautifulSoup, Tag

from vocabcards.services.extraction.base import VocabularyExtractor
from vocabcards.services.extraction.common import (
    compact_base_form,
    extract_example,
    extract_translation,
    first_heading_token,
    parse_html,
)
from vocabcards.vocabulary import PERSONS, UNKNOWN, VerbRecord, VocabularyType

logger = logging.getLogger(__name__)


def find_tense_table(
    soup: BeautifulSoup, tense: str, case_sensitive: bool = True
) -> Tag | None:
    """
    Find the table belonging to the first ``h2``/``h3`` whose text contains ``tense``.

    The table is the first one inside the heading's parent block. Headings
    without such a table are skipped. "Perfect" must stay case-sensitive or it
    matches the "Imperfect" heading that precedes it.
    """
    needle = tense if case_sensitive else tense.lower()
    for heading in soup.find_all(["h2", "h3"]):
        text = heading.get_text()
        if needle not in (text if case_sensitive else text.lower()):
            continue
        parent = heading.parent
        table = parent.find("table") if parent is not None else None
        if table is not None:
            return table
    return None


def _cell_texts(row: Tag) -> list[str]:
    return [cell.get_text().strip() for cell in row.find_all("td")]


class VerbExtractor(VocabularyExtractor):
    """Extract infinitive, present conjugation, simple past and perfect."""

    @property
    def vocabulary_type(self) -> VocabularyType:
        return VocabularyType.VERB

    def parse(self, html: str) -> VerbRecord:
        logger.debug("Parsing HTML for verb")
        soup = parse_html(html)

        return VerbRecord(
            word=self._extract_infinitive(soup),
            conjugations=self._extract_present(soup),
            simple_past=self._extract_simple_past(soup),
            perfekt=self._extract_perfect(soup),
            translation=extract_translation(soup),
            example=extract_example(soup),
        )

    def _extract_infinitive(self, soup: BeautifulSoup) -> str:
        return compact_base_form(soup) or first_heading_token(soup)

    def _extract_present(self, soup: BeautifulSoup) -> dict[str, str]:
        """Map each person label of the present table to its form; missing slots stay empty."""
        conjugations = {person: "" for person in PERSONS}
        table = find_tense_table(soup, "Present", case_sensitive=False)
        if table is None:
            logger.debug("No present tense table found")
            return conjugations

        for row in table.find_all("tr"):
            cells = _cell_texts(row)
            if len(cells) < 2:
                continue
            person, form = cells[0], cells[1]
            if person in conjugations and form:
                conjugations[person] = form
        return conjugations

    def _extract_simple_past(self, soup: BeautifulSoup) -> str:
        table = find_tense_table(soup, "Imperfect")
        first_row = table.find("tr") if table is not None else None
        if first_row is None:
            return UNKNOWN
        cells = _cell_texts(first_row)
        if len(cells) < 2 or not cells[1]:
            return UNKNOWN
        return cells[1]

    def _extract_perfect(self, soup: BeautifulSoup) -> str:
        """Auxiliary and participle from the first row, e.g. ``"bin gelaufen"``."""
        table = find_tense_table(soup, "Perfect")
        first_row = table.find("tr") if table is not None else None
        if first_row is None:
            return UNKNOWN
        forms = " ".join(_cell_texts(first_row)[1:]).strip()
        return forms or UNKNOWN
