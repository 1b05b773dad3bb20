"""SQLAlchemy ORM models."""

import uuid
from datetime import datetime, timezone

from sqlalchemy import ForeignKey, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from vocabcards.database import Base


def _new_id() -> str:
    return str(uuid.uuid4())


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


class Deck(Base):
    """A collection of cards; the target of one processing run."""

    __tablename__ = "decks"

    id: Mapped[str] = mapped_column(Text, primary_key=True, default=_new_id)
    name: Mapped[str] = mapped_column(Text, unique=True)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    created_at: Mapped[datetime] = mapped_column(default=_utc_now)

    cards: Mapped[list["Card"]] = relationship(
        back_populates="deck",
        cascade="all, delete-orphan",
    )


class Card(Base):
    """A flashcard created from one vocabulary record."""

    __tablename__ = "cards"

    id: Mapped[str] = mapped_column(Text, primary_key=True, default=_new_id)
    deck_id: Mapped[str] = mapped_column(ForeignKey("decks.id", ondelete="CASCADE"), index=True)
    name: Mapped[str] = mapped_column(Text, index=True)  # German word, used for duplicates
    question: Mapped[str] = mapped_column(Text)
    answer: Mapped[str] = mapped_column(Text)
    prompt: Mapped[str] = mapped_column(Text)

    # Markdown fields for the question side
    q_md_body: Mapped[str | None] = mapped_column(Text, nullable=True)
    q_md_clarifier: Mapped[str | None] = mapped_column(Text, nullable=True)
    q_md_footnote: Mapped[str | None] = mapped_column(Text, nullable=True)
    q_md_prompt: Mapped[str | None] = mapped_column(Text, nullable=True)

    # Markdown fields for the answer side
    a_md_body: Mapped[str | None] = mapped_column(Text, nullable=True)
    a_md_clarifier: Mapped[str | None] = mapped_column(Text, nullable=True)
    a_md_footnote: Mapped[str | None] = mapped_column(Text, nullable=True)
    a_md_prompt: Mapped[str | None] = mapped_column(Text, nullable=True)

    created_at: Mapped[datetime] = mapped_column(default=_utc_now)

    deck: Mapped["Deck"] = relationship(back_populates="cards")
