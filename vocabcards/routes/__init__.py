"""Route handlers for vocabcards."""

from vocabcards.routes.process import router as process_router

__all__ = ["process_router"]
