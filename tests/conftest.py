"""Pytest configuration and fixtures."""

from collections.abc import AsyncGenerator, Callable
from pathlib import Path

import pytest
from fastapi import FastAPI
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine

from vocabcards.database import Base, get_session
from vocabcards.main import app
from vocabcards.routes.process import get_fetcher

FIXTURES_DIR = Path(__file__).parent / "fixtures"


def load_fixture(name: str) -> str:
    """Read a frozen dictionary page from tests/fixtures."""
    return (FIXTURES_DIR / name).read_text(encoding="utf-8")


class FixtureFetcher:
    """Serves frozen dictionary pages instead of the live site."""

    def __init__(self, pages: dict[str, str]) -> None:
        self.pages = pages
        self.requested: list[str] = []

    async def fetch_word_html(self, word: str) -> str:
        self.requested.append(word)
        if word not in self.pages:
            raise RuntimeError(f"No fixture page for '{word}'")
        return self.pages[word]


@pytest.fixture
def verb_html() -> str:
    return load_fixture("verb_laufen.html")


@pytest.fixture
def noun_html() -> str:
    return load_fixture("noun_haus.html")


@pytest.fixture
def adjective_html() -> str:
    return load_fixture("adjective_schnell.html")


@pytest.fixture
def unknown_html() -> str:
    return load_fixture("unknown.html")


@pytest.fixture
def fixture_fetcher(verb_html: str, noun_html: str, adjective_html: str) -> FixtureFetcher:
    """Fetcher knowing laufen, Haus and schnell."""
    return FixtureFetcher({"laufen": verb_html, "Haus": noun_html, "schnell": adjective_html})


@pytest.fixture
def write_csv(tmp_path: Path) -> Callable[[str, str], Path]:
    """Write CSV content to a temporary file and return its path."""

    def _write(content: str, name: str = "words.csv") -> Path:
        path = tmp_path / name
        path.write_text(content, encoding="utf-8")
        return path

    return _write


@pytest.fixture
async def async_engine():
    """Create a test database engine."""
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:",
        echo=False,
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    await engine.dispose()


@pytest.fixture
async def async_session(async_engine) -> AsyncGenerator[AsyncSession, None]:
    """Create a test database session."""
    async_session_maker = async_sessionmaker(
        async_engine,
        class_=AsyncSession,
        expire_on_commit=False,
    )
    async with async_session_maker() as session:
        yield session


@pytest.fixture
def test_app(async_session: AsyncSession, fixture_fetcher: FixtureFetcher) -> FastAPI:
    """Create a test FastAPI application."""

    async def override_get_session() -> AsyncGenerator[AsyncSession, None]:
        yield async_session

    app.dependency_overrides[get_session] = override_get_session
    app.dependency_overrides[get_fetcher] = lambda: fixture_fetcher
    yield app
    app.dependency_overrides.clear()


@pytest.fixture
async def async_client(test_app: FastAPI) -> AsyncGenerator[AsyncClient, None]:
    """Create an asynchronous test client."""
    async with AsyncClient(
        transport=ASGITransport(app=test_app),
        base_url="http://test",
    ) as client:
        yield client
