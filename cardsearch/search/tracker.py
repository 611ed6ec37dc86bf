"""Search tracker: recent queries and trending counts for one engine.

State is in-memory and lives as long as the owning engine. Queries are
recorded raw, so "Design" and "design" count separately.
"""

import logging
import threading

logger = logging.getLogger(__name__)


class SearchTracker:
    """Records issued queries behind a lock so an engine can be shared.

    Usage::

        tracker = SearchTracker(max_recent=10)
        tracker.track("web designer")
        tracker.recent_queries()   # ["web designer"]
        tracker.trending(limit=5)  # ["web designer"]
    """

    def __init__(self, max_recent: int = 10) -> None:
        self._max_recent = max_recent
        self._recent: list[str] = []
        # dicts keep insertion order, which is the trending tie-break.
        self._counts: dict[str, int] = {}
        self._lock = threading.Lock()

    def track(self, query: str) -> None:
        """Prepend the query to the recent list and bump its count."""
        with self._lock:
            self._recent = [query, *self._recent[: self._max_recent - 1]]
            self._counts[query] = self._counts.get(query, 0) + 1
            count = self._counts[query]
        logger.debug("Tracked query %r (count=%d)", query, count)

    def recent_queries(self) -> list[str]:
        """Return recent queries, most recent first."""
        with self._lock:
            return list(self._recent)

    def counts(self) -> dict[str, int]:
        """Return a copy of the per-query counts, in first-seen order."""
        with self._lock:
            return dict(self._counts)

    def trending(self, limit: int = 5) -> list[str]:
        """Return up to limit queries by count desc; ties keep first-seen order."""
        with self._lock:
            entries = list(self._counts.items())
        entries.sort(key=lambda item: item[1], reverse=True)
        return [query for query, _ in entries[:limit]]
