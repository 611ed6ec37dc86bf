"""Snapshot loader: turns a store export into CandidateProfile records.

The store keeps cards at accounts/{uid}/cards/{cardId}. An export is either
that accounts mapping, the whole tree with an "accounts" key, or a flat list
of card documents.
"""

import json
import logging
from pathlib import Path
from typing import Any

from cardsearch.core.schemas import CandidateProfile

logger = logging.getLogger(__name__)


def _validate_cards(cards: list[Any]) -> list[CandidateProfile]:
    return [CandidateProfile.model_validate(card) for card in cards if card]


def collect_candidates(snapshot: dict[str, Any] | list[Any]) -> list[CandidateProfile]:
    """Flatten accounts (or a card list) into profiles, in document order.

    An account's cards may be a mapping keyed by card id or, for numeric
    keys, an array; null entries in either are skipped. Accounts without
    cards are skipped. A card that does not fit the CandidateProfile shape
    raises pydantic.ValidationError.
    """
    if isinstance(snapshot, list):
        return _validate_cards(snapshot)

    if not isinstance(snapshot, dict):
        msg = f"Unsupported snapshot type: {type(snapshot).__name__}"
        raise ValueError(msg)

    candidates: list[CandidateProfile] = []
    for uid, account in snapshot.items():
        cards = account.get("cards") if isinstance(account, dict) else None
        if not cards:
            logger.debug("Account %s has no cards - skipping", uid)
            continue
        if isinstance(cards, dict):
            cards = list(cards.values())
        if not isinstance(cards, list):
            msg = f"Unsupported cards type for account {uid}: {type(cards).__name__}"
            raise ValueError(msg)
        candidates.extend(_validate_cards(cards))
    return candidates


def load_snapshot(path: str | Path) -> list[CandidateProfile]:
    """Load candidates from a JSON export file."""
    path = Path(path)
    if not path.exists():
        msg = f"Snapshot file not found: {path}"
        raise FileNotFoundError(msg)
    try:
        raw = json.loads(path.read_text())
    except json.JSONDecodeError as e:
        msg = f"Invalid JSON in snapshot {path}: {e}"
        raise ValueError(msg) from e

    if isinstance(raw, dict) and "accounts" in raw:
        raw = raw["accounts"] or {}
    candidates = collect_candidates(raw)
    logger.info("Loaded %d candidates from %s", len(candidates), path)
    return candidates
