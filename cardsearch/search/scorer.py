"""Rule-based relevance scoring for candidate profiles.

Weighted score: every token is tested against each field independently and
all hits add up. Synonym bonuses come on top, and matched top-ranked
profiles get a flat boost. Fuzzy score is a coarser +1-per-token measure
used only when the weighted pass finds nothing.
"""

import logging
from collections.abc import Iterable, Mapping, Sequence

from cardsearch.core.config import (
    DEFAULT_SYNONYMS,
    LimitsConfig,
    ScoringWeights,
)
from cardsearch.core.schemas import CandidateProfile, ScoredProfile
from cardsearch.search.text import is_fuzzy_match

logger = logging.getLogger(__name__)


def score_profile(
    profile: CandidateProfile,
    tokens: Sequence[str],
    weights: ScoringWeights | None = None,
    synonyms: Mapping[str, Sequence[str]] = DEFAULT_SYNONYMS,
) -> ScoredProfile:
    """Score a single profile against the query tokens.

    Args:
        profile: The candidate to score.
        tokens: Cleaned, stop-word-filtered query tokens.
        weights: Per-field points; defaults to ScoringWeights().
        synonyms: Canonical keyword -> synonym words.

    Returns:
        ScoredProfile wrapping the original profile with a non-negative score.
    """
    weights = weights or ScoringWeights()
    display_name = profile.display_name.lower()
    username = profile.username.lower()
    title = (profile.title or "").lower()
    bio = profile.bio.lower()
    skills = " ".join(profile.skills).lower()
    services = " ".join(profile.services).lower()
    company = profile.company_name.lower()

    score = 0
    for token in tokens:
        if token in display_name:
            score += weights.display_name
        if username == token:
            score += weights.username_exact
        if token in title:
            score += weights.title
        if token in skills:
            score += weights.skills
        if token in services:
            score += weights.services
        if token in company:
            score += weights.company
        if token in bio:
            score += weights.bio

        for key, words in synonyms.items():
            if token == key or token in words:
                if key in title:
                    score += weights.synonym_bonus
                if key in skills:
                    score += weights.synonym_bonus

    # The boost ranks matches; it never turns a non-match into one.
    if score and profile.is_top_ranked:
        score += weights.top_ranked_bonus

    return ScoredProfile(profile=profile, score=score)


def fuzzy_score(
    profile: CandidateProfile,
    tokens: Sequence[str],
    limits: LimitsConfig | None = None,
) -> ScoredProfile:
    """Count tokens that approximately match the profile's name, title and username."""
    limits = limits or LimitsConfig()
    searchable = " ".join(
        [profile.display_name, profile.title or "", profile.username]
    ).lower()
    score = sum(
        1
        for token in tokens
        if is_fuzzy_match(
            token,
            searchable,
            min_length=limits.fuzzy_min_token_length,
            max_distance=limits.fuzzy_max_distance,
        )
    )
    return ScoredProfile(profile=profile, score=score)


def rank(scored: Iterable[ScoredProfile]) -> list[ScoredProfile]:
    """Drop zero scores and sort descending.

    list.sort is stable, so equal scores keep their snapshot order.
    """
    ranked = [s for s in scored if s.score > 0]
    ranked.sort(key=lambda s: s.score, reverse=True)
    return ranked


def score_profiles(
    profiles: Iterable[CandidateProfile],
    tokens: Sequence[str],
    weights: ScoringWeights | None = None,
    synonyms: Mapping[str, Sequence[str]] = DEFAULT_SYNONYMS,
) -> list[ScoredProfile]:
    """Score a batch of profiles, returning the positive ones sorted by score desc."""
    ranked = rank(score_profile(p, tokens, weights, synonyms) for p in profiles)
    logger.debug("Weighted pass: %d matches for %s", len(ranked), tokens)
    return ranked


def fuzzy_score_profiles(
    profiles: Iterable[CandidateProfile],
    tokens: Sequence[str],
    limits: LimitsConfig | None = None,
) -> list[ScoredProfile]:
    """Fuzzy-score a batch of profiles, returning the positive ones sorted by score desc."""
    ranked = rank(fuzzy_score(p, tokens, limits) for p in profiles)
    logger.debug("Fuzzy pass: %d matches for %s", len(ranked), tokens)
    return ranked
