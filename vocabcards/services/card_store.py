"""Card storage: duplicate lookup and card creation."""

import logging
import re
from typing import Protocol

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from vocabcards.models import Card, Deck
from vocabcards.services.mapper import CardFields

logger = logging.getLogger(__name__)

# Letters, umlauts, ß, whitespace and hyphens
_GERMAN_CHAR = re.compile(r"[a-zA-ZäöüÄÖÜß\s-]")


def clean_german_text(text: str | None) -> str:
    """Keep only characters of the German alphabet, spaces and hyphens."""
    if not text:
        return ""
    return "".join(_GERMAN_CHAR.findall(text))


class CardStore(Protocol):
    """Where cards of a deck are looked up and created."""

    async def existing_names(self, deck_id: str) -> set[str]:
        """Names of the deck's cards, cleaned with :func:`clean_german_text`."""
        ...  # pragma: no cover

    async def create_card(self, deck_id: str, fields: CardFields) -> str:
        """Create a card and return its id."""
        ...  # pragma: no cover


class LocalCardStore:
    """Card store backed by the local SQLite mirror."""

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def get_or_create_deck(self, name: str, description: str | None = None) -> Deck:
        """Return the deck called ``name``, creating it if needed."""
        result = await self.session.execute(select(Deck).where(Deck.name == name))
        deck = result.scalar_one_or_none()
        if deck is not None:
            return deck

        deck = Deck(name=name, description=description)
        self.session.add(deck)
        await self.session.commit()
        await self.session.refresh(deck)
        logger.info(f"Created deck '{name}' ({deck.id})")
        return deck

    async def existing_names(self, deck_id: str) -> set[str]:
        result = await self.session.execute(select(Card.name).where(Card.deck_id == deck_id))
        return {clean_german_text(name) for name in result.scalars().all()}

    async def create_card(self, deck_id: str, fields: CardFields) -> str:
        card = Card(
            deck_id=deck_id,
            name=fields.name,
            question=fields.question,
            answer=fields.answer,
            prompt=fields.prompt,
            q_md_body=fields.q_md_body,
            q_md_clarifier=fields.q_md_clarifier,
            q_md_footnote=fields.q_md_footnote,
            q_md_prompt=fields.q_md_prompt,
            a_md_body=fields.a_md_body,
            a_md_clarifier=fields.a_md_clarifier,
            a_md_footnote=fields.a_md_footnote,
            a_md_prompt=fields.a_md_prompt,
        )
        self.session.add(card)
        # Commit per card so a crash mid-run keeps every card created so far
        try:
            await self.session.commit()
        except Exception:
            await self.session.rollback()
            raise
        logger.debug(f"Stored card '{card.name}' ({card.id}) in deck {deck_id}")
        return card.id
