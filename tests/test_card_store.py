"""Tests for the local card store and ORM models."""

import pytest
from sqlalchemy import select

from vocabcards.models import Card, Deck
from vocabcards.services.card_store import LocalCardStore, clean_german_text
from vocabcards.services.mapper import CardFields


def make_fields(deck_id: str, name: str) -> CardFields:
    return CardFields(
        deck_id=deck_id,
        name=name,
        question=name,
        answer=f"Translation: {name}",
        prompt="example not found",
        q_md_body=f"**{name}**",
    )


class TestCleanGermanText:
    """Tests for clean_german_text."""

    def test_keeps_german_letters(self):
        assert clean_german_text("Straße-Übergang") == "Straße-Übergang"

    def test_drops_other_characters(self):
        assert clean_german_text("Haus!") == "Haus"
        assert clean_german_text("das Haus (n.)") == "das Haus n"
        assert clean_german_text("café") == "caf"

    def test_empty(self):
        assert clean_german_text("") == ""
        assert clean_german_text(None) == ""


class TestLocalCardStore:
    """Tests for LocalCardStore."""

    @pytest.mark.asyncio
    async def test_get_or_create_deck(self, async_session):
        """Should create a deck once and return it afterwards."""
        store = LocalCardStore(async_session)

        deck = await store.get_or_create_deck("German Vocabulary", "A1 words")
        again = await store.get_or_create_deck("German Vocabulary")

        assert deck.id == again.id
        assert deck.description == "A1 words"
        result = await async_session.execute(select(Deck))
        assert len(result.scalars().all()) == 1

    @pytest.mark.asyncio
    async def test_create_card(self, async_session):
        """Should persist every field and return the new id."""
        store = LocalCardStore(async_session)
        deck = await store.get_or_create_deck("Deck")

        card_id = await store.create_card(deck.id, make_fields(deck.id, "Haus"))

        card = await async_session.get(Card, card_id)
        assert card is not None
        assert card.deck_id == deck.id
        assert card.name == "Haus"
        assert card.q_md_body == "**Haus**"
        assert card.a_md_body is None
        result = await async_session.execute(select(Card).where(Card.deck_id == deck.id))
        assert len(result.scalars().all()) == 1

    @pytest.mark.asyncio
    async def test_existing_names_cleaned(self, async_session):
        """Names are returned cleaned to the German alphabet."""
        store = LocalCardStore(async_session)
        deck = await store.get_or_create_deck("Deck")
        await store.create_card(deck.id, make_fields(deck.id, "Haus!"))
        await store.create_card(deck.id, make_fields(deck.id, "laufen"))

        assert await store.existing_names(deck.id) == {"Haus", "laufen"}

    @pytest.mark.asyncio
    async def test_existing_names_per_deck(self, async_session):
        """Cards of other decks are not duplicates."""
        store = LocalCardStore(async_session)
        first = await store.get_or_create_deck("First")
        second = await store.get_or_create_deck("Second")
        await store.create_card(first.id, make_fields(first.id, "Haus"))

        assert await store.existing_names(second.id) == set()
