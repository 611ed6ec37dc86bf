"""Core data models for the profile search engine."""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

_CARD_CONFIG = ConfigDict(
    frozen=True,
    alias_generator=to_camel,
    populate_by_name=True,
    extra="ignore",
)


class BusinessInfo(BaseModel):
    """Business section of a card. Every field is optional in the store."""

    model_config = _CARD_CONFIG

    company_name: str | None = None
    skills: list[str] | None = None
    services: list[str] | None = None


class CandidateProfile(BaseModel):
    """A published card eligible to appear in search results.

    Frozen: the engine treats its snapshot as read-only. Keys are accepted in
    the store's camelCase (``displayName``) or as field names.
    """

    model_config = _CARD_CONFIG

    id: str = ""
    uid: str = ""
    display_name: str = ""
    username: str = ""
    title: str | None = None
    bio: str = ""
    business: BusinessInfo | None = None
    is_top_ranked: bool | None = None

    @field_validator("id", "uid", "display_name", "username", "bio", mode="before")
    @classmethod
    def none_as_empty(cls, v: Any) -> Any:
        return "" if v is None else v

    @property
    def company_name(self) -> str:
        return (self.business.company_name if self.business else None) or ""

    @property
    def skills(self) -> list[str]:
        return (self.business.skills if self.business else None) or []

    @property
    def services(self) -> list[str]:
        return (self.business.services if self.business else None) or []


class ScoredProfile(BaseModel):
    """Wrapper that pairs a frozen CandidateProfile with a relevance score."""

    model_config = ConfigDict(frozen=True)

    profile: CandidateProfile
    score: int = Field(default=0, ge=0)
