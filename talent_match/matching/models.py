"""Data models for skill-based matching.

Queries are pydantic models forming a closed tagged union on ``mode``;
results are plain dataclasses computed per call and never persisted.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Annotated, Literal

from pydantic import BaseModel, Field, TypeAdapter, field_validator

from talent_match.directory.models import Profile


class _QueryBase(BaseModel):
    """Constraints shared by both query modes."""

    location: str | None = Field(default=None, description="Exact location match")
    min_experience: int | None = Field(
        default=None, description="Minimum total experience (5-year tolerance)"
    )

    @field_validator("location", mode="before")
    @classmethod
    def normalize_location(cls, v: object) -> object:
        """Treat a blank location as no location constraint."""
        if isinstance(v, str) and not v.strip():
            return None
        return v


class AnySkillQuery(_QueryBase):
    """Match profiles holding at least one of ``skill_names``.

    An empty ``skill_names`` list disables the skill filter. Results are
    paged by ``page`` (1-based) and ``page_size``; missing or non-positive
    values fall back to the configured defaults.
    """

    mode: Literal["any_skill"] = "any_skill"
    skill_names: list[str] = Field(default_factory=list, description="Requested skills")
    page: int | None = Field(default=None, description="1-based page number")
    page_size: int | None = Field(default=None, description="Results per page")


class PrimarySecondaryQuery(_QueryBase):
    """Match profiles holding every primary skill, scored with secondary skills.

    ``skill_experience`` maps a skill name (primary or secondary) to the
    minimum years a profile must have on that skill. Any page parameters
    are ignored: every surviving profile is returned on one page.
    """

    mode: Literal["primary_secondary"] = "primary_secondary"
    primary_skills: list[str] = Field(
        default_factory=list, description="Required skills (all must be present)"
    )
    secondary_skills: list[str] = Field(
        default_factory=list, description="Nice-to-have skills (score only)"
    )
    skill_experience: dict[str, int] = Field(
        default_factory=dict, description="Minimum years per named skill"
    )
    page: int | None = Field(default=None, description="Ignored")
    page_size: int | None = Field(default=None, description="Ignored")


SkillQuery = Annotated[
    AnySkillQuery | PrimarySecondaryQuery, Field(discriminator="mode")
]

_query_adapter: TypeAdapter[AnySkillQuery | PrimarySecondaryQuery] = TypeAdapter(
    SkillQuery
)


def parse_query(data: dict) -> AnySkillQuery | PrimarySecondaryQuery:
    """Validate a raw mapping into the matching query variant."""
    return _query_adapter.validate_python(data)


@dataclass(frozen=True)
class ScoredProfile:
    """A candidate profile with its authoritative match score."""

    profile: Profile
    score: int


@dataclass(frozen=True)
class MatchResult:
    """A ranked match."""

    profile: Profile
    score: int
    rank: int

    def __post_init__(self) -> None:
        if self.score < 0:
            raise ValueError(f"score must be non-negative (got {self.score})")
        if self.rank < 1:
            raise ValueError(f"rank must be 1 or greater (got {self.rank})")

    def to_dict(self) -> dict:
        """Serialize to a dictionary."""
        return {
            "profile": self.profile.to_dict(),
            "score": self.score,
            "rank": self.rank,
        }


@dataclass(frozen=True)
class Pagination:
    """Pagination metadata for a page of matches."""

    current_page: int
    total_pages: int
    total_items: int
    items_per_page: int

    def to_dict(self) -> dict:
        """Serialize to a dictionary."""
        return {
            "current_page": self.current_page,
            "total_pages": self.total_pages,
            "total_items": self.total_items,
            "items_per_page": self.items_per_page,
        }


@dataclass
class MatchPage:
    """Ordered matches plus pagination metadata."""

    results: list[MatchResult] = field(default_factory=list)
    pagination: Pagination = field(
        default_factory=lambda: Pagination(
            current_page=1, total_pages=0, total_items=0, items_per_page=1
        )
    )

    def to_dict(self) -> dict:
        """Serialize to a dictionary."""
        return {
            "data": [result.to_dict() for result in self.results],
            "pagination": self.pagination.to_dict(),
        }
