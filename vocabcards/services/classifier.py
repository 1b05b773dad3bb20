"""Guess the grammatical category of a dictionary page."""

import logging
import re

from bs4 import BeautifulSoup

from vocabcards.services.extraction.common import joined_text, parse_html
from vocabcards.vocabulary import VocabularyType

logger = logging.getLogger(__name__)

# Scoring windows (characters from the start of the raw HTML)
HEAD_WINDOW = 3000
BODY_WINDOW = 5000

# (pattern, points) per category, tested against the first HEAD_WINDOW characters.
# Values mirror the page conventions of the dictionary site; do not re-tune.
HEAD_SIGNALS: dict[VocabularyType, tuple[tuple[re.Pattern[str], int], ...]] = {
    VocabularyType.ADJECTIVE: (
        (re.compile(r"Declension.*adjective", re.I), 10),
        (re.compile(r"/declension/adjectives/", re.I), 8),
        (re.compile(r"adjective.*·.*irregular.*·.*comparable", re.I), 6),
    ),
    VocabularyType.NOUN: (
        (re.compile(r"Declension.*noun", re.I), 10),
        (re.compile(r"/declension/nouns/", re.I), 8),
        (re.compile(r"noun.*·.*neutral.*·.*irregular", re.I), 6),
    ),
    VocabularyType.VERB: (
        (re.compile(r"Conjugation.*verb", re.I), 10),
        (re.compile(r"/conjugation/", re.I), 8),
        (re.compile(r"verb.*·.*irregular.*·.*(sein|haben)", re.I), 6),
    ),
}

# Grammar terms, tested against the first BODY_WINDOW characters
BODY_SIGNALS: dict[VocabularyType, tuple[re.Pattern[str], int]] = {
    VocabularyType.VERB: (re.compile(r"imperative|infinitive|participle", re.I), 3),
    VocabularyType.ADJECTIVE: (
        re.compile(r"comparative.*superlative|positive.*comparative", re.I),
        4,
    ),
    VocabularyType.NOUN: (re.compile(r"(der|die|das).*plural.*singular", re.I), 3),
}

CASE_TERMS = re.compile(r"nominative.*genitive.*dative.*accusative", re.I)
ADJECTIVE_DECLENSION_TERMS = re.compile(r"weak.*strong.*mixed.*declension", re.I)
CASE_TERMS_POINTS = 2

DECLARATION = re.compile(r"A1\s*·\s*(adjective|verb|noun)\s*·", re.I)

# Checked in this order; keep explicit when adding categories
BREADCRUMB_MARKERS = (
    ("Adjectives", VocabularyType.ADJECTIVE),
    ("Nouns", VocabularyType.NOUN),
    ("Conjugation", VocabularyType.VERB),
)
TITLE_MARKERS = (
    (("declension", "adjective"), VocabularyType.ADJECTIVE),
    (("declension", "noun"), VocabularyType.NOUN),
    (("conjugation", "verb"), VocabularyType.VERB),
)
HEADING_MARKERS = (
    ("adjective", VocabularyType.ADJECTIVE),
    ("noun", VocabularyType.NOUN),
    ("verb", VocabularyType.VERB),
)


class TypeClassifier:
    """
    Determine whether a page describes a verb, noun or adjective.

    Reliable page markers are tried first, in strict order; the first match
    wins. Only when none of them matches is the weighted scoring fallback run.
    Never raises: UNSET is returned when there is no signal.
    """

    def classify(self, html: str) -> VocabularyType:
        soup = parse_html(html)

        for method in (
            self._from_breadcrumb,
            self._from_title,
            self._from_heading,
            self._from_declaration,
        ):
            vocabulary_type = method(soup)
            if vocabulary_type is not None:
                logger.debug(f"Classified as {vocabulary_type.value} by {method.__name__}")
                return vocabulary_type

        vocabulary_type = self.weighted_fallback(html)
        logger.debug(f"Classified as {vocabulary_type.value} by weighted fallback")
        return vocabulary_type

    def _from_breadcrumb(self, soup: BeautifulSoup) -> VocabularyType | None:
        breadcrumb = joined_text(soup, "nav.rKrml")
        if not breadcrumb:
            return None
        for marker, vocabulary_type in BREADCRUMB_MARKERS:
            if marker in breadcrumb:
                return vocabulary_type
        return None

    def _from_title(self, soup: BeautifulSoup) -> VocabularyType | None:
        # Both tokens are required; "declension" alone appears on noun and adjective pages
        title = "".join(element.get_text() for element in soup.find_all("title")).lower()
        for tokens, vocabulary_type in TITLE_MARKERS:
            if all(token in title for token in tokens):
                return vocabulary_type
        return None

    def _from_heading(self, soup: BeautifulSoup) -> VocabularyType | None:
        heading = soup.find("h1")
        text = heading.get_text().lower() if heading else ""
        for marker, vocabulary_type in HEADING_MARKERS:
            if marker in text:
                return vocabulary_type
        return None

    def _from_declaration(self, soup: BeautifulSoup) -> VocabularyType | None:
        body = soup.body if soup.body is not None else soup
        match = DECLARATION.search(body.get_text())
        if match:
            return VocabularyType(match.group(1).lower())
        return None

    def score(self, html: str) -> dict[VocabularyType, int]:
        """Points per category from the fixed signal list."""
        head = html[:HEAD_WINDOW]
        body = html[:BODY_WINDOW]
        scores = {vocabulary_type: 0 for vocabulary_type in HEAD_SIGNALS}

        for vocabulary_type, signals in HEAD_SIGNALS.items():
            for pattern, points in signals:
                if pattern.search(head):
                    scores[vocabulary_type] += points

        for vocabulary_type, (pattern, points) in BODY_SIGNALS.items():
            if pattern.search(body):
                scores[vocabulary_type] += points

        # Case names appear on noun and adjective pages alike
        if CASE_TERMS.search(body):
            if ADJECTIVE_DECLENSION_TERMS.search(body):
                scores[VocabularyType.ADJECTIVE] += CASE_TERMS_POINTS
            else:
                scores[VocabularyType.NOUN] += CASE_TERMS_POINTS

        return scores

    def weighted_fallback(self, html: str) -> VocabularyType:
        """The category with the strictly highest non-zero score, else UNSET."""
        scores = self.score(html)
        best = max(scores.values())
        if best == 0:
            return VocabularyType.UNSET

        leaders = [vocabulary_type for vocabulary_type, points in scores.items() if points == best]
        if len(leaders) > 1:
            logger.debug(f"Weighted fallback tie between {[t.value for t in leaders]}")
            return VocabularyType.UNSET
        return leaders[0]
