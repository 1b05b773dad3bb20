"""Word-type-agnostic extraction helpers shared by every extractor.

All functions are pure functions of the parsed document: calling them twice on
the same soup yields the same result, and two extractors given the same page
report the same translation and examples.
"""

import re

from bs4 import BeautifulSoup

from vocabcards.vocabulary import EXAMPLE_NOT_FOUND, TRANSLATION_NOT_FOUND, UNKNOWN

HTML_PARSER = "html.parser"

GB_FLAG = "\U0001f1ec\U0001f1e7"
# First code point of the German flag, which ends the English segment
DE_FLAG_START = "\U0001f1e9"

# Example list items shorter/longer than this are navigation or paragraphs
EXAMPLE_MIN_LENGTH = 10
EXAMPLE_MAX_LENGTH = 200
# Example items rendered with an inline translation contain this gap
TRANSLATION_GAP = "\n" * 5

_ENGLISH_SEGMENT = re.compile(GB_FLAG + r"\s*([^" + DE_FLAG_START + r"]+)")
_EXAMPLE_SPLIT = re.compile(GB_FLAG + r"|English:")
_NOTE_SENTENCE = re.compile(r"»\s*([^.!?]+[.!?])")
_WORD_TOKEN = re.compile(r"\w+")
_WHITESPACE = re.compile(r"\s+")


def parse_html(html: str) -> BeautifulSoup:
    """Parse a dictionary page."""
    return BeautifulSoup(html, HTML_PARSER)


def joined_text(soup: BeautifulSoup, selector: str) -> str:
    """Concatenated text of every element matching ``selector``."""
    return "".join(element.get_text() for element in soup.select(selector))


def base_form_text(soup: BeautifulSoup) -> str:
    """
    Text of the page's base form element, stripped.

    Verb and adjective pages mark it ``#grundform``, noun pages ``span.vGrnd``.
    Returns an empty string when neither exists.
    """
    for selector in ("#grundform", "span.vGrnd"):
        element = soup.select_one(selector)
        if element is not None:
            text = element.get_text().strip()
            if text:
                return text
    return ""


def compact_base_form(soup: BeautifulSoup) -> str:
    """Base form with all interior whitespace removed (``"lau fen"`` -> ``"laufen"``)."""
    return _WHITESPACE.sub("", base_form_text(soup))


def first_heading_token(soup: BeautifulSoup) -> str:
    """First word-like token of the first ``h1``, or ``"unknown"``."""
    heading = soup.find("h1")
    if heading is None:
        return UNKNOWN
    match = _WORD_TOKEN.search(heading.get_text())
    return match.group(0) if match else UNKNOWN


def extract_translation(soup: BeautifulSoup) -> str:
    """
    Extract the English translation of the headword.

    Order of strategies:
    1. the first non-empty ``span[lang="en"]``
    2. the English segment after the GB flag in the definition info box
    3. ``"translation not found"``
    """
    for span in soup.select('span[lang="en"]'):
        text = span.get_text().strip()
        if text:
            return text

    definition_text = joined_text(soup, ".vStckInf, #vStckInf")
    match = _ENGLISH_SEGMENT.search(definition_text)
    if match:
        return match.group(1).strip()

    return TRANSLATION_NOT_FOUND


def extract_example(soup: BeautifulSoup) -> list[str]:
    """
    Extract German example sentences.

    Candidates come from the example list (``ul.rLstGt li``): trimmed, length
    between 10 and 200 characters exclusive, cut before the GB flag or an
    ``English:`` marker. Only candidates still containing the inline
    translation gap are genuine examples; their newlines collapse to spaces.

    Falls back to the first sentence quoted with » in the note box, then to
    ``["example not found"]``. Never returns an empty list.
    """
    candidates: list[str] = []
    for item in soup.select("ul.rLstGt li"):
        text = item.get_text().strip()
        if not text or not EXAMPLE_MIN_LENGTH < len(text) < EXAMPLE_MAX_LENGTH:
            continue
        german = _EXAMPLE_SPLIT.split(text, maxsplit=1)[0]
        if german:
            candidates.append(german.strip())

    examples = [
        re.sub(r"\n+", " ", candidate).strip()
        for candidate in candidates
        if TRANSLATION_GAP in candidate
    ]
    if examples:
        return examples

    note_text = joined_text(soup, ".rInf.rNt")
    if "»" in note_text:
        match = _NOTE_SENTENCE.search(note_text)
        if match:
            return [match.group(1).strip()]

    return [EXAMPLE_NOT_FOUND]
