"""CSV processing API routes."""

import logging
import re
from typing import Any
from urllib.parse import unquote

from fastapi import APIRouter, Depends, HTTPException, Query
from fastapi.responses import JSONResponse
from sqlalchemy.ext.asyncio import AsyncSession

from vocabcards.config import settings
from vocabcards.database import get_session
from vocabcards.exceptions import CsvFileNotFoundError, CsvParseError, InvalidCsvFormatError
from vocabcards.services.card_store import LocalCardStore
from vocabcards.services.dictionary_client import DictionaryClient
from vocabcards.services.processor import (
    FlashcardProcessor,
    HtmlFetcher,
    ProcessingSummary,
    ProcessingTarget,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["process"])

SUSPICIOUS_CHARACTERS = re.compile(r"[;<>|&$`]")


def get_fetcher() -> HtmlFetcher:
    """Dictionary fetcher for dependency injection."""
    return DictionaryClient()


def validate_csv_path(raw_path: str) -> str:
    """
    Decode and check a CSV location taken from the URL.

    Raises:
        HTTPException: 400 for traversal, relative paths or shell metacharacters.
    """
    path = unquote(raw_path)

    if ".." in path:
        raise HTTPException(status_code=400, detail="Invalid path: Path traversal is not allowed")
    if not path.startswith("/"):
        raise HTTPException(
            status_code=400, detail="Invalid path: Path must be absolute (start with /)"
        )
    if SUSPICIOUS_CHARACTERS.search(path):
        raise HTTPException(
            status_code=400, detail="Invalid path: Path contains suspicious characters"
        )
    return path


def build_response(summary: ProcessingSummary) -> dict[str, Any]:
    """Response body for a finished run."""
    if summary.failure_count == 0:
        message = f"Successfully processed all {summary.total_rows} entries"
    else:
        message = (
            f"Processed {summary.total_rows} entries: {summary.success_count} succeeded, "
            f"{summary.skipped_count} skipped, {summary.failure_count} failed"
        )

    body = summary.to_dict()
    results = body.pop("results")
    return {
        "success": summary.failure_count == 0,
        "message": message,
        "summary": body,
        "results": results,
    }


@router.get("/process/{csv_location:path}", response_class=JSONResponse)
async def process_csv(
    csv_location: str,
    deck: str | None = Query(None, description="Deck name, created if missing"),
    session: AsyncSession = Depends(get_session),
    fetcher: HtmlFetcher = Depends(get_fetcher),
) -> dict[str, Any]:
    """Process a CSV file on the server and create its cards."""
    logger.info(f"Received request to process CSV: {csv_location}")
    path = validate_csv_path(csv_location)

    store = LocalCardStore(session)
    try:
        target_deck = await store.get_or_create_deck(deck or settings.default_deck)
        processor = FlashcardProcessor(fetcher=fetcher, card_store=store)
        summary = await processor.process_file(
            path,
            ProcessingTarget(deck_id=target_deck.id, deck_name=target_deck.name),
            batch_size=settings.batch_size,
        )
    except CsvFileNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e)) from None
    except (CsvParseError, InvalidCsvFormatError) as e:
        raise HTTPException(status_code=400, detail=str(e)) from None
    except Exception as e:
        logger.error(f"Error processing CSV: {e}", exc_info=True)
        raise HTTPException(
            status_code=500,
            detail={
                "success": False,
                "message": f"Failed to process CSV file: {e}",
                "error": str(e),
            },
        ) from None

    logger.info(f"Request completed: {summary.success_count}/{summary.total_rows} succeeded")
    return build_response(summary)
