"""Configuration models and YAML loader for the profile search engine."""

from pathlib import Path
from types import MappingProxyType
from typing import Any

import yaml
from pydantic import BaseModel, Field, field_validator

DEFAULT_STOP_WORDS = frozenset(
    {"the", "and", "for", "with", "from", "that", "this", "your", "about"}
)

# Canonical keyword -> words that should also reach profiles mentioning it.
DEFAULT_SYNONYMS: MappingProxyType[str, tuple[str, ...]] = MappingProxyType({
    "website": ("web", "site", "template", "theme", "ui"),
    "developer": ("coder", "engineer", "programmer", "dev"),
    "designer": ("artist", "creative", "ui", "ux"),
    "business": ("company", "corporate", "agency", "office"),
})

DEFAULT_PROFILE_BASE_URL = "https://exposeid.vercel.app"


class ScoringWeights(BaseModel):
    """Points awarded per token for each field test."""

    display_name: int = Field(default=10, ge=0)
    username_exact: int = Field(default=15, ge=0)
    title: int = Field(default=8, ge=0)
    skills: int = Field(default=7, ge=0)
    services: int = Field(default=5, ge=0)
    company: int = Field(default=4, ge=0)
    bio: int = Field(default=3, ge=0)
    synonym_bonus: int = Field(default=2, ge=0)
    top_ranked_bonus: int = Field(default=5, ge=0)


class LimitsConfig(BaseModel):
    """Result sizes and thresholds."""

    default_results: int = Field(default=10, ge=0)
    fallback_results: int = Field(default=5, ge=0)
    suggestions: int = Field(default=5, ge=0)
    min_suggestion_length: int = Field(default=2, ge=1)
    trending: int = Field(default=5, ge=0)
    recent_queries: int = Field(default=10, ge=1)
    fuzzy_min_token_length: int = Field(default=3, ge=1)
    fuzzy_max_distance: int = Field(default=1, ge=0)


class EngineSettings(BaseModel):
    """Top-level engine settings, optionally loaded from YAML."""

    weights: ScoringWeights = Field(default_factory=ScoringWeights)
    limits: LimitsConfig = Field(default_factory=LimitsConfig)
    stop_words: frozenset[str] = DEFAULT_STOP_WORDS
    synonyms: dict[str, tuple[str, ...]] = Field(
        default_factory=lambda: dict(DEFAULT_SYNONYMS)
    )
    profile_base_url: str = DEFAULT_PROFILE_BASE_URL

    @field_validator("stop_words")
    @classmethod
    def normalize_stop_words(cls, v: frozenset[str]) -> frozenset[str]:
        return frozenset(w.lower().strip() for w in v if w.strip())

    @field_validator("synonyms")
    @classmethod
    def normalize_synonyms(
        cls, v: dict[str, tuple[str, ...]]
    ) -> dict[str, tuple[str, ...]]:
        normalized: dict[str, tuple[str, ...]] = {}
        for key, words in v.items():
            key = key.lower().strip()
            if not key:
                msg = "synonym keys must not be empty"
                raise ValueError(msg)
            normalized[key] = tuple(w.lower().strip() for w in words if w.strip())
        return normalized

    @field_validator("profile_base_url")
    @classmethod
    def strip_trailing_slash(cls, v: str) -> str:
        return v.rstrip("/")

    @classmethod
    def from_yaml(cls, path: str | Path) -> "EngineSettings":
        """Load settings from a YAML file."""
        path = Path(path)
        if not path.exists():
            msg = f"Config file not found: {path}"
            raise FileNotFoundError(msg)
        raw: dict[str, Any] = yaml.safe_load(path.read_text()) or {}
        return cls.model_validate(raw)
