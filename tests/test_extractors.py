"""Contract tests for the per-type extractors against frozen dictionary pages."""

import pytest

from vocabcards.exceptions import ExtractorNotFoundError, InvariantViolation
from vocabcards.services.extraction import (
    AdjectiveExtractor,
    DefaultExtractor,
    ExtractorRegistry,
    NounExtractor,
    VerbExtractor,
    default_extractors,
)
from vocabcards.services.extraction.adjective import parse_declension_block
from vocabcards.services.extraction.common import parse_html
from vocabcards.services.extraction.noun import split_article
from vocabcards.vocabulary import (
    AdjectiveRecord,
    DefaultRecord,
    NounRecord,
    VerbRecord,
    VocabularyType,
)


class TestVerbExtractor:
    """Tests for VerbExtractor."""

    def test_can_handle(self):
        """Should accept only verbs."""
        extractor = VerbExtractor()
        assert extractor.can_handle(VocabularyType.VERB)
        assert not extractor.can_handle(VocabularyType.NOUN)
        assert not extractor.can_handle(VocabularyType.UNSET)

    def test_parse_fixture(self, verb_html):
        """Should extract every field of the laufen page."""
        record = VerbExtractor().parse(verb_html)

        assert isinstance(record, VerbRecord)
        assert record.word == "laufen"
        assert record.conjugations == {
            "ich": "laufe",
            "du": "läufst",
            "er": "läuft",
            "wir": "laufen",
            "ihr": "lauft",
            "sie": "laufen",
        }
        assert record.simple_past == "lief"
        assert record.perfekt == "bin gelaufen"
        assert record.translation == "run, walk, go"
        assert record.example == ["Er läuft jeden Morgen durch den Park."]

    def test_all_present_slots_filled(self, verb_html):
        """A complete present table fills all six slots."""
        record = VerbExtractor().parse(verb_html)
        assert len(record.conjugations) == 6
        assert all(form != "" for form in record.conjugations.values())

    def test_unknown_person_labels_ignored(self):
        """Rows whose label is not a person key are skipped."""
        html = """
        <div><h2>present tense</h2><table>
        <tr><td>ich</td><td>gehe</td></tr>
        <tr><td>es</td><td>geht</td></tr>
        </table></div>
        """
        record = VerbExtractor().parse(html)
        assert record.conjugations["ich"] == "gehe"
        assert record.conjugations["er"] == ""
        assert "es" not in record.conjugations

    def test_perfect_does_not_match_imperfect(self):
        """Perfect must not be read from the Imperfect table."""
        html = """
        <div><h2>Imperfect</h2><table><tr><td>ich</td><td>ging</td></tr></table></div>
        """
        record = VerbExtractor().parse(html)
        assert record.simple_past == "ging"
        assert record.perfekt == "unknown"

    def test_missing_tables(self):
        """Should leave sentinels when no tables exist."""
        record = VerbExtractor().parse("<h1>gehen</h1>")
        assert record.word == "gehen"
        assert record.simple_past == "unknown"
        assert record.perfekt == "unknown"
        assert set(record.conjugations.values()) == {""}


class TestNounExtractor:
    """Tests for NounExtractor."""

    def test_parse_fixture(self, noun_html):
        """Should split article and noun and read the plural."""
        record = NounExtractor().parse(noun_html)

        assert isinstance(record, NounRecord)
        assert record.article == "das"
        assert record.word == "Haus"
        assert record.plural == "die Häuser"
        assert record.translation == "house, home"
        assert record.example == ["Das Haus steht am Ende der Straße."]

    def test_split_article(self):
        """Should split on the first space only."""
        assert split_article("der Hund") == ("der", "Hund")
        assert split_article("die Vereinigten Staaten") == ("die", "Vereinigten Staaten")

    def test_no_article(self):
        """A base form without space has no article."""
        record = NounExtractor().parse('<span class="vGrnd">Eltern</span>')
        assert record.article == "article not found"
        assert record.word == "Eltern"
        assert record.plural == "plural not found"

    def test_heading_fallback(self):
        """Should fall back to the heading token without a base form."""
        record = NounExtractor().parse("<h1>Haus declension</h1>")
        assert record.word == "Haus"


class TestAdjectiveExtractor:
    """Tests for AdjectiveExtractor."""

    def test_parse_fixture(self, adjective_html):
        """Should extract comparison forms and all declension tables."""
        record = AdjectiveExtractor().parse(adjective_html)

        assert isinstance(record, AdjectiveRecord)
        assert record.word == "schnell"
        assert record.comparison.positive == "schnell"
        assert record.comparison.comparative == "schneller"
        assert record.comparison.superlative == "schnellsten"
        assert record.translation == "fast, quick, rapid"
        assert record.example == ["Das Auto fährt sehr schnell."]

    def test_declension_order_and_last_cell(self, adjective_html):
        """Blocks are strong, weak, mixed; weak and mixed forms come from the last cell."""
        declension = AdjectiveExtractor().parse(adjective_html).declension

        assert len(declension.strong) == 16
        assert declension.strong["masculine_nominative"] == "schneller"
        assert declension.strong["neutral_dative"] == "schnellem"
        assert declension.weak["masculine_nominative"] == "schnelle"
        assert declension.weak["plural_genitive"] == "schnellen"
        assert declension.mixed["neutral_nominative"] == "schnelles"
        assert declension.mixed["feminine_accusative"] == "schnelle"

    def test_superlative_falls_back_to_bold(self):
        """With only two segments the bold elements are read positionally."""
        html = '<p class="vStm"><b>gut</b> · <b>besser</b> am <b>besten</b></p>'
        comparison = AdjectiveExtractor().parse(html).comparison
        assert comparison.positive == "gut"
        assert comparison.comparative == "besser"
        assert comparison.superlative == "besten"

    def test_missing_bold_is_unknown(self):
        """Missing bold elements leave the unknown sentinel."""
        html = '<p class="vStm"><b>lila</b></p>'
        comparison = AdjectiveExtractor().parse(html).comparison
        assert comparison.positive == "lila"
        assert comparison.comparative == "unknown"
        assert comparison.superlative == "unknown"

    def test_word_from_stem_bold(self):
        """Should fall back to the bold stem form without a base form."""
        html = '<p class="vStm"><b>klein</b> · <b>kleiner</b> · am <b>kleinsten</b></p>'
        assert AdjectiveExtractor().parse(html).word == "klein"

    def test_missing_blocks_are_empty(self):
        """Absent weak and mixed blocks give empty tables, not zero-filled ones."""
        html = """
        <div class="rBox rBoxWht"><div class="vDkl">
          <div class="vTbl"><h2>Masculine</h2><table>
            <tr><th title="Nominative">N</th><td>guter</td></tr>
          </table></div>
        </div></div>
        """
        declension = AdjectiveExtractor().parse(html).declension
        assert declension.strong == {"masculine_nominative": "guter"}
        assert declension.weak == {}
        assert declension.mixed == {}

    def test_unrecognised_case_row_skipped(self):
        """Rows whose header names no case are ignored."""
        block = parse_html(
            """
            <div class="vDkl"><div class="vTbl"><h3>Feminine</h3><table>
              <tr><th>Dat.</th><td>der</td><td>guten</td></tr>
              <tr><th>Instr.</th><td>gutem</td></tr>
            </table></div></div>
            """
        ).select_one(".vDkl")
        assert parse_declension_block(block) == {"feminine_dative": "guten"}


class TestDefaultExtractor:
    """Tests for DefaultExtractor word strategies."""

    def test_parse_fixture(self, unknown_html):
        """Should read the quoted title word, translation and note example."""
        record = DefaultExtractor().parse(unknown_html)

        assert isinstance(record, DefaultRecord)
        assert record.type == VocabularyType.UNSET
        assert record.word == "Tschüss"
        assert record.translation == "bye, see you"
        assert record.example == ["Tschüss, bis morgen!"]

    @pytest.mark.parametrize(
        "html,expected",
        [
            ('<b id="grundform">hal lo</b><h1>other</h1>', "hallo"),
            ('<p class="vGrnd"><b>servus</b></p><h1>other</h1>', "servus"),
            ('<title>Word "moin" explained</title><h1>other</h1>', "moin"),
            ('<title>Word " " x</title><h1>hallo</h1>', "hallo"),
            ("<h1>Grüß Gott</h1>", "Grüß"),
            ('<input name="w" value=" ade ">', "ade"),
            ("<p>nothing</p>", "unknown"),
        ],
    )
    def test_word_strategies(self, html, expected):
        """Should try each headword location in order."""
        assert DefaultExtractor().parse(html).word == expected


class TestExtractorRegistry:
    """Tests for extractor dispatch."""

    @pytest.mark.parametrize(
        "vocabulary_type,extractor_class",
        [
            (VocabularyType.VERB, VerbExtractor),
            (VocabularyType.NOUN, NounExtractor),
            (VocabularyType.ADJECTIVE, AdjectiveExtractor),
            (VocabularyType.UNSET, DefaultExtractor),
        ],
    )
    def test_get_extractor(self, vocabulary_type, extractor_class):
        """Every vocabulary type has exactly one extractor."""
        assert isinstance(ExtractorRegistry().get_extractor(vocabulary_type), extractor_class)

    def test_default_registered_last(self):
        """The fallback extractor is registered last."""
        assert isinstance(default_extractors()[-1], DefaultExtractor)

    def test_missing_extractor_is_invariant_violation(self):
        """Dispatch without a matching extractor is a configuration defect."""
        registry = ExtractorRegistry([VerbExtractor()])
        with pytest.raises(ExtractorNotFoundError) as exc_info:
            registry.get_extractor(VocabularyType.NOUN)
        assert isinstance(exc_info.value, InvariantViolation)
        assert "No extractor found for vocabulary type" in str(exc_info.value)


class TestRecordIntegrity:
    """Properties holding for every extractor and page."""

    @pytest.mark.parametrize(
        "fixture_name", ["verb_html", "noun_html", "adjective_html", "unknown_html"]
    )
    def test_type_matches_extractor_and_word_not_empty(self, fixture_name, request):
        """Each record carries its extractor's type and a non-empty word."""
        html = request.getfixturevalue(fixture_name)
        for extractor in default_extractors():
            record = extractor.parse(html)
            assert extractor.can_handle(record.type)
            assert record.word
            assert record.example

    def test_translation_identical_across_extractors(self, noun_html):
        """All extractors report the same translation and example for one page."""
        records = [extractor.parse(noun_html) for extractor in default_extractors()]
        assert len({record.translation for record in records}) == 1
        assert len({tuple(record.example) for record in records}) == 1
