"""Capacity-bounded scoring history.

The history is a single list stored newest-first under one key. Appends
prepend and truncate to the capacity, so the oldest entries fall off.
Reads validate the whole list: if any entry is malformed the read returns
an empty list rather than a partial one.
"""

import logging
import uuid
from datetime import datetime, timezone

from jaucp_scorer.scoring.errors import PersistenceError
from jaucp_scorer.scoring.schemas import ScoringResult
from jaucp_scorer.scoring.validation import validate
from jaucp_scorer.storage.backend import StoreRegistry
from jaucp_scorer.storage.schemas import HistoryItem

logger = logging.getLogger(__name__)

HISTORY_KEY = "history"
TITLE_MAX_LENGTH = 30
UNTITLED_PLACEHOLDER = "Untitled article"


def derive_title(text: str) -> str:
    """First non-blank line of ``text``, stripped and cut to 30 characters."""
    for line in text.split("\n"):
        stripped = line.strip()
        if stripped:
            return stripped[:TITLE_MAX_LENGTH]
    return UNTITLED_PLACEHOLDER


class HistoryStore:
    """Append-only log of past scoring results.

    Args:
        registry: Store handle cache shared with other stores.
        path: Logical store path. Defaults to ``config.history_store_path``.
        capacity: Maximum number of entries kept. Defaults to
            ``config.history_capacity``.
    """

    def __init__(
        self,
        registry: StoreRegistry,
        path: str | None = None,
        capacity: int | None = None,
    ) -> None:
        self._registry = registry
        self._path = path or registry.config.history_store_path
        self._capacity = capacity or registry.config.history_capacity

    @property
    def capacity(self) -> int:
        return self._capacity

    async def append(self, result: ScoringResult, source_text: str) -> HistoryItem:
        """Record a successful scoring result.

        Args:
            result: The validated result.
            source_text: The scored article, used to derive the title.

        Returns:
            The stored HistoryItem.

        Raises:
            PersistenceError: The history could not be read back or written.
        """
        item = HistoryItem(
            id=uuid.uuid4().hex,
            timestamp=datetime.now(timezone.utc),
            title=derive_title(source_text),
            category=result.category,
            total=result.total,
            result=result,
        )
        try:
            store = await self._registry.get_store(self._path)
            existing = await store.get(HISTORY_KEY)
            if not isinstance(existing, list):
                existing = []
            entries = [item.model_dump(mode="json"), *existing][: self._capacity]
            await store.set(HISTORY_KEY, entries)
            await store.save()
        except Exception as e:
            raise PersistenceError(f"Failed to save history: {e}") from e
        return item

    async def list(self) -> list[HistoryItem]:
        """All entries, newest first. Degrades to ``[]`` on any read problem."""
        try:
            store = await self._registry.get_store(self._path)
            stored = await store.get(HISTORY_KEY)
        except Exception as e:
            logger.warning("Failed to read history: %s", e)
            return []

        if not stored:
            return []

        result = validate(stored, list[HistoryItem])
        if not result.ok:
            logger.warning("Stored history is partly invalid, ignoring it: %s", result.error)
            return []
        return result.value

    async def clear(self) -> None:
        """Remove every entry. Other keys in the same store are left alone.

        Raises:
            PersistenceError: The store could not be written.
        """
        try:
            store = await self._registry.get_store(self._path)
            await store.set(HISTORY_KEY, [])
            await store.save()
        except Exception as e:
            raise PersistenceError(f"Failed to clear history: {e}") from e
