"""Extractor for noun declension pages."""

import logging
import re

from bs4 import BeautifulSoup

from vocabcards.services.extraction.base import VocabularyExtractor
from vocabcards.services.extraction.common import (
    base_form_text,
    extract_example,
    extract_translation,
    first_heading_token,
    parse_html,
)
from vocabcards.vocabulary import (
    ARTICLE_NOT_FOUND,
    PLURAL_NOT_FOUND,
    NounRecord,
    VocabularyType,
)

logger = logging.getLogger(__name__)


def split_article(base_form: str) -> tuple[str, str]:
    """Split ``"der Hund"`` into ``("der", "Hund")``; no space means no article."""
    if " " not in base_form:
        return ARTICLE_NOT_FOUND, base_form
    article, word = base_form.split(" ", 1)
    return article, word


class NounExtractor(VocabularyExtractor):
    """Extract article, bare noun and plural."""

    @property
    def vocabulary_type(self) -> VocabularyType:
        return VocabularyType.NOUN

    def parse(self, html: str) -> NounRecord:
        logger.debug("Parsing HTML for noun")
        soup = parse_html(html)

        # Keep the space between article and noun, only normalise runs of whitespace
        base_form = re.sub(r"\s+", " ", base_form_text(soup)) or first_heading_token(soup)
        article, word = split_article(base_form)

        return NounRecord(
            word=word,
            article=article,
            plural=self._extract_plural(soup),
            translation=extract_translation(soup),
            example=extract_example(soup),
        )

    def _extract_plural(self, soup: BeautifulSoup) -> str:
        paragraph = soup.select_one("p.vStm.rCntr")
        text = paragraph.get_text().replace("\n", " ").strip() if paragraph else ""
        return text or PLURAL_NOT_FOUND
