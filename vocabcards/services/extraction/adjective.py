"""Extractor for adjective declension pages."""

import logging
import re

from bs4 import BeautifulSoup, Tag

from vocabcards.services.extraction.base import VocabularyExtractor
from vocabcards.services.extraction.common import (
    compact_base_form,
    extract_example,
    extract_translation,
    first_heading_token,
    parse_html,
)
from vocabcards.vocabulary import (
    UNKNOWN,
    AdjectiveRecord,
    Comparison,
    Declension,
    VocabularyType,
)

logger = logging.getLogger(__name__)

STEM_SEPARATOR = "·"

# Substring of the block heading -> gender key. Checked in order.
GENDER_MARKERS = (
    ("masc", "masculine"),
    ("fem", "feminine"),
    ("neut", "neutral"),
    ("plural", "plural"),
)

# Substring of the row header -> case key. Checked in order.
CASE_MARKERS = (
    ("nom", "nominative"),
    ("gen", "genitive"),
    ("dat", "dative"),
    ("acc", "accusative"),
)


def _match_marker(label: str, markers: tuple[tuple[str, str], ...]) -> str | None:
    for marker, key in markers:
        if marker in label:
            return key
    return None


def parse_declension_block(block: Tag | None) -> dict[str, str]:
    """
    Read one declension block into ``{"<gender>_<case>": form}``.

    The block holds one ``.vTbl`` per gender. Each row's header cell names the
    case (``title`` attribute preferred), and the adjective form is the row's
    last data cell: weak and mixed rows put the article in front of it.
    """
    forms: dict[str, str] = {}
    if block is None:
        return forms

    for gender_table in block.select(".vTbl"):
        heading = gender_table.find(["h2", "h3"])
        if heading is None:
            continue
        gender = _match_marker(heading.get_text().strip().lower(), GENDER_MARKERS)
        if gender is None:
            continue

        for row in gender_table.select("table tr"):
            header = row.find("th")
            cells = row.find_all("td")
            if header is None or not cells:
                continue
            label = (header.get("title") or header.get_text()).strip().lower()
            case = _match_marker(label, CASE_MARKERS)
            value = cells[-1].get_text().strip()
            if case and value:
                forms[f"{gender}_{case}"] = value

    return forms


class AdjectiveExtractor(VocabularyExtractor):
    """Extract comparison forms and the strong/weak/mixed declension tables."""

    @property
    def vocabulary_type(self) -> VocabularyType:
        return VocabularyType.ADJECTIVE

    def parse(self, html: str) -> AdjectiveRecord:
        logger.debug("Parsing HTML for adjective")
        soup = parse_html(html)

        return AdjectiveRecord(
            word=self._extract_word(soup),
            comparison=self._extract_comparison(soup),
            declension=self._extract_declension(soup),
            translation=extract_translation(soup),
            example=extract_example(soup),
        )

    def _extract_word(self, soup: BeautifulSoup) -> str:
        base_form = compact_base_form(soup)
        if base_form:
            return base_form

        bold = soup.select_one(".vStm b")
        stem_word = bold.get_text().strip() if bold else ""
        return stem_word or first_heading_token(soup)

    def _extract_comparison(self, soup: BeautifulSoup) -> Comparison:
        """
        Split the stem forms line ``schnell · schneller · am schnellsten``.

        With fewer than three segments, read the bold elements positionally.
        """
        stem_section = soup.select_one(".vStm")
        if stem_section is None:
            return Comparison()

        parts = [part.strip() for part in stem_section.get_text().split(STEM_SEPARATOR)]
        if len(parts) >= 3:
            return Comparison(
                positive=parts[0],
                comparative=parts[1],
                superlative=re.sub(r"^am\s+", "", parts[2]).strip(),
            )

        bold_forms = [bold.get_text().strip() for bold in stem_section.find_all("b")[:3]]
        bold_forms += [""] * (3 - len(bold_forms))
        positive, comparative, superlative = (form or UNKNOWN for form in bold_forms)
        return Comparison(positive=positive, comparative=comparative, superlative=superlative)

    def _extract_declension(self, soup: BeautifulSoup) -> Declension:
        # Block order on the page is strong, weak, mixed
        blocks: list[Tag | None] = list(soup.select(".rBox.rBoxWht .vDkl")[:3])
        blocks += [None] * (3 - len(blocks))
        strong, weak, mixed = (parse_declension_block(block) for block in blocks)
        return Declension(strong=strong, weak=weak, mixed=mixed)
