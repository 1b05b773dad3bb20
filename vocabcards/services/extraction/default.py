"""Fallback extractor for pages whose category could not be determined."""

import logging
import re

from bs4 import BeautifulSoup

from vocabcards.services.extraction.base import VocabularyExtractor
from vocabcards.services.extraction.common import (
    compact_base_form,
    extract_example,
    extract_translation,
    parse_html,
)
from vocabcards.vocabulary import UNKNOWN, DefaultRecord, VocabularyType

logger = logging.getLogger(__name__)

_QUOTED = re.compile(r"[„“\"]([^„“”\"]+)[“”\"]")
_GERMAN_WORD = re.compile(r"\b[a-zäöüß]+\b", re.IGNORECASE)


class DefaultExtractor(VocabularyExtractor):
    """Extract only the headword, translation and examples."""

    @property
    def vocabulary_type(self) -> VocabularyType:
        return VocabularyType.UNSET

    def parse(self, html: str) -> DefaultRecord:
        logger.debug("Parsing HTML with default extractor")
        soup = parse_html(html)

        return DefaultRecord(
            word=self._extract_word(soup),
            translation=extract_translation(soup),
            example=extract_example(soup),
        )

    def _extract_word(self, soup: BeautifulSoup) -> str:
        """Try each headword location in turn, most specific first."""
        base_form = compact_base_form(soup)
        if base_form:
            return base_form

        stem_bold = soup.select_one(".vGrnd b, .vStm b")
        if stem_bold is not None and stem_bold.get_text().strip():
            return stem_bold.get_text().strip()

        title = "".join(element.get_text() for element in soup.find_all("title"))
        title_match = _QUOTED.search(title)
        if title_match and title_match.group(1).strip():
            return title_match.group(1).strip()

        heading = soup.find("h1")
        heading_match = _GERMAN_WORD.search(heading.get_text()) if heading else None
        if heading_match:
            return heading_match.group(0)

        search_input = soup.select_one('input[name="w"]')
        value = search_input.get("value") if search_input is not None else None
        if isinstance(value, str) and value.strip():
            return value.strip()

        return UNKNOWN
