"""View invalidation adapter.

Rendering happens outside this service; after a successful mutation the
affected paths are announced as stale through a structured log event.
"""

from typing import Literal

import structlog

logger = structlog.get_logger(__name__)

DASHBOARD_PATH = "/dashboard"
# Route pattern matching every deck page, used when the owning deck is unknown
ALL_DECK_PAGES = "/decks/[deckId]"


def deck_page_path(deck_id: int) -> str:
    return f"/decks/{deck_id}"


class LoggingViewInvalidator:
    """Emits one ``view_invalidated`` event per stale path."""

    def __init__(self) -> None:
        self.invalidated_paths: list[str] = []

    def invalidate(self, path: str, scope: Literal["page", "layout"] = "page") -> None:
        self.invalidated_paths.append(path)
        logger.info("view_invalidated", path=path, scope=scope)
