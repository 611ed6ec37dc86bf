"""JSON export of ranked search results."""

import json

from cardsearch.core.config import DEFAULT_PROFILE_BASE_URL
from cardsearch.core.schemas import CandidateProfile


def export_results_json(
    query: str,
    profiles: list[CandidateProfile],
    base_url: str = DEFAULT_PROFILE_BASE_URL,
) -> str:
    """Serialize ranked profiles to a JSON string with public profile links."""
    data = {
        "query": query,
        "count": len(profiles),
        "results": [
            {
                "id": p.id,
                "uid": p.uid,
                "username": p.username,
                "displayName": p.display_name,
                "title": p.title,
                "profileUrl": f"{base_url.rstrip('/')}/{p.username}",
            }
            for p in profiles
        ],
    }
    return json.dumps(data, indent=2)
