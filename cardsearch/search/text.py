"""Query normalization, tokenization and approximate matching.

All functions are pure; the stop-word set is passed in so settings can
override it.
"""

import re
from collections.abc import Iterable

from cardsearch.core.config import DEFAULT_STOP_WORDS

_SPECIAL_CHARS = re.compile(r'[!@#$%^&*(),.?":{}|<>]')
_WHITESPACE = re.compile(r"\s+")


def clean_query(query: str) -> str:
    """Lowercase, blank out punctuation, collapse whitespace and trim."""
    cleaned = _SPECIAL_CHARS.sub(" ", query.lower())
    return _WHITESPACE.sub(" ", cleaned).strip()


def optimize_query(
    query: str,
    stop_words: Iterable[str] = DEFAULT_STOP_WORDS,
) -> list[str]:
    """Split a cleaned query into tokens, dropping stop words.

    An empty query (or one made only of punctuation) yields no tokens.
    """
    cleaned = clean_query(query)
    if not cleaned:
        return []
    stop = stop_words if isinstance(stop_words, (set, frozenset)) else set(stop_words)
    return [word for word in cleaned.split(" ") if word not in stop]


def is_fuzzy_match(
    word: str,
    target: str,
    min_length: int = 3,
    max_distance: int = 1,
) -> bool:
    """Return True if word is in target or differs from its prefix by few characters.

    The distance is a position-wise mismatch count over the shorter of the
    two strings, so only typos near aligned positions are tolerated.
    """
    if word in target:
        return True
    if len(word) < min_length:
        return False
    distance = sum(1 for a, b in zip(word, target) if a != b)
    return distance <= max_distance
