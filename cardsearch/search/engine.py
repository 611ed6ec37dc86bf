"""SearchEngine: ranks a snapshot of profiles against free-text queries.

Ranking tiers for a non-empty query:
  1. Weighted field scoring (plus synonym and top-ranked bonuses)
  2. Fuzzy match on name, title and username, when tier 1 is empty
  3. First top-ranked profiles, when tier 2 is empty too
"""

import logging
from collections.abc import Iterable

from cardsearch.core.config import EngineSettings
from cardsearch.core.schemas import CandidateProfile
from cardsearch.search.scorer import fuzzy_score_profiles, score_profiles
from cardsearch.search.text import optimize_query
from cardsearch.search.tracker import SearchTracker

logger = logging.getLogger(__name__)


class SearchEngine:
    """In-memory search over a caller-supplied snapshot of profiles.

    The snapshot is never refreshed on its own; call reseed() or build a new
    engine when the underlying data changes.
    """

    def __init__(
        self,
        candidates: Iterable[CandidateProfile],
        settings: EngineSettings | None = None,
    ) -> None:
        self._settings = settings or EngineSettings()
        self._candidates: tuple[CandidateProfile, ...] = tuple(candidates)
        self._tracker = SearchTracker(max_recent=self._settings.limits.recent_queries)

    @property
    def candidates(self) -> tuple[CandidateProfile, ...]:
        return self._candidates

    @property
    def settings(self) -> EngineSettings:
        return self._settings

    def reseed(self, candidates: Iterable[CandidateProfile]) -> None:
        """Replace the snapshot. Recent and trending queries are kept."""
        self._candidates = tuple(candidates)
        logger.debug("Engine reseeded with %d candidates", len(self._candidates))

    def search(self, query: str) -> list[CandidateProfile]:
        """Return profiles ranked for query, falling back rather than coming up empty."""
        limits = self._settings.limits
        if not query:
            return self._top_ranked(limits.default_results)

        tokens = optimize_query(query, self._settings.stop_words)
        self._tracker.track(query)

        ranked = score_profiles(
            self._candidates, tokens, self._settings.weights, self._settings.synonyms
        )
        if ranked:
            return [s.profile for s in ranked]

        fuzzy = fuzzy_score_profiles(self._candidates, tokens, limits)
        if fuzzy:
            logger.debug("No weighted hits for %r, using fuzzy results", query)
            return [s.profile for s in fuzzy]

        logger.debug("No matches for %r, returning top-ranked profiles", query)
        return self._top_ranked(limits.fallback_results)

    def get_suggestions(self, partial: str) -> list[str]:
        """Return distinct names, usernames and titles starting with partial."""
        limits = self._settings.limits
        if len(partial) < limits.min_suggestion_length:
            return []
        prefix = partial.lower()
        # dict as an insertion-ordered set
        suggestions: dict[str, None] = {}
        for profile in self._candidates:
            for value in (profile.display_name, profile.username, profile.title):
                if value and value.lower().startswith(prefix):
                    suggestions.setdefault(value, None)
        return list(suggestions)[: limits.suggestions]

    def get_trending(self) -> list[str]:
        """Return the most-searched raw queries, most searched first."""
        return self._tracker.trending(self._settings.limits.trending)

    def trending_counts(self) -> dict[str, int]:
        """Return how often each raw query was searched, in first-seen order."""
        return self._tracker.counts()

    def recent_queries(self) -> list[str]:
        """Return the last raw queries searched, most recent first."""
        return self._tracker.recent_queries()

    def _top_ranked(self, limit: int) -> list[CandidateProfile]:
        return [p for p in self._candidates if p.is_top_ranked][:limit]
