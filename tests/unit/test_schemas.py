"""Tests for core schemas: CandidateProfile, BusinessInfo, ScoredProfile."""

import pytest
from pydantic import ValidationError

from cardsearch.core.schemas import BusinessInfo, CandidateProfile, ScoredProfile


def _card(**overrides: object) -> dict[str, object]:
    card: dict[str, object] = {
        "id": "card-1",
        "uid": "user-1",
        "username": "alex",
        "displayName": "Alex Morgan",
        "title": "Web Designer",
        "bio": "I design websites",
        "theme": "modern",
        "links": [],
        "business": {
            "companyName": "Morgan Studio",
            "skills": ["Figma", "CSS"],
            "services": ["Landing pages"],
            "experience": 5,
        },
        "isTopRanked": True,
    }
    card.update(overrides)
    return card


class TestCandidateProfile:
    def test_from_store_document(self) -> None:
        p = CandidateProfile.model_validate(_card())
        assert p.display_name == "Alex Morgan"
        assert p.is_top_ranked is True
        assert p.company_name == "Morgan Studio"
        assert p.skills == ["Figma", "CSS"]
        assert p.services == ["Landing pages"]

    def test_field_names_accepted(self) -> None:
        p = CandidateProfile(display_name="Alex", is_top_ranked=False)
        assert p.display_name == "Alex"
        assert p.is_top_ranked is False

    def test_all_fields_optional(self) -> None:
        p = CandidateProfile()
        assert p.display_name == ""
        assert p.title is None
        assert p.business is None
        assert p.company_name == ""
        assert p.skills == []
        assert p.services == []

    def test_nulls_become_empty(self) -> None:
        p = CandidateProfile.model_validate(
            _card(displayName=None, bio=None, username=None, business={"skills": None})
        )
        assert p.display_name == ""
        assert p.bio == ""
        assert p.username == ""
        assert p.skills == []

    def test_malformed_name_rejected(self) -> None:
        with pytest.raises(ValidationError):
            CandidateProfile.model_validate(_card(displayName=42))

    def test_frozen_model(self) -> None:
        p = CandidateProfile(display_name="Alex")
        with pytest.raises(ValidationError):
            p.display_name = "Sam"  # type: ignore[misc]


class TestBusinessInfo:
    def test_defaults(self) -> None:
        b = BusinessInfo()
        assert b.company_name is None
        assert b.skills is None


class TestScoredProfile:
    def test_wraps_profile(self) -> None:
        p = CandidateProfile(username="alex")
        s = ScoredProfile(profile=p, score=15)
        assert s.profile is p
        assert s.score == 15

    def test_negative_score_rejected(self) -> None:
        with pytest.raises(ValidationError):
            ScoredProfile(profile=CandidateProfile(), score=-1)
