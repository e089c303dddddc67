"""Data models for the profile directory."""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, Field


class SkillCategory(str, Enum):
    """Whether a skill is a profile's primary or secondary skill."""

    PRIMARY = "PRIMARY"
    SECONDARY = "SECONDARY"


class SkillLevel(str, Enum):
    """Self-reported proficiency. Not used for matching."""

    BEGINNER = "BEGINNER"
    INTERMEDIATE = "INTERMEDIATE"
    ADVANCED = "ADVANCED"
    EXPERT = "EXPERT"


class ProfileStatus(str, Enum):
    """Placement status of a profile."""

    ATP = "ATP"
    DEPLOYED = "DEPLOYED"
    SOFT_BLOCKED = "SOFT_BLOCKED"
    NOTICE = "NOTICE"
    LEAVE = "LEAVE"
    TRAINEE = "TRAINEE"
    INTERVIEW_SCHEDULED = "INTERVIEW_SCHEDULED"


class Skill(BaseModel):
    """A single skill record on a profile.

    Names are compared exactly (case-sensitive) during matching.
    """

    name: str = Field(..., min_length=1, description="Skill name")
    category: SkillCategory = Field(
        default=SkillCategory.PRIMARY, description="Primary or secondary skill"
    )
    level: SkillLevel = Field(
        default=SkillLevel.INTERMEDIATE, description="Proficiency level"
    )
    years_of_experience: int | None = Field(
        default=None, ge=0, description="Years of experience with this skill"
    )

    def to_dict(self) -> dict:
        """Serialize to a dictionary."""
        return self.model_dump(mode="json")

    @classmethod
    def from_dict(cls, data: dict) -> Skill:
        """Deserialize from a dictionary."""
        return cls.model_validate(data)


class Profile(BaseModel):
    """A candidate profile in the directory."""

    # Identity
    id: str = Field(..., min_length=1, description="Stable external identifier")
    name: str = Field(..., description="Full name")
    email: str | None = Field(default=None, description="Contact email")
    designation: str | None = Field(default=None, description="Current designation")

    # Matching inputs
    location: str | None = Field(default=None, description="Base location")
    total_experience: int | None = Field(
        default=None, ge=0, description="Total years of experience"
    )
    skills: list[Skill] = Field(
        default_factory=list, description="Skill records, duplicates allowed"
    )

    # Directory metadata
    status: ProfileStatus = Field(
        default=ProfileStatus.ATP, description="Placement status"
    )
    account_ids: list[str] = Field(
        default_factory=list,
        description="Identifiers of accounts holding a soft block on this profile",
    )

    def skill_names(self) -> frozenset[str]:
        """Return the distinct skill names on this profile."""
        return frozenset(skill.name for skill in self.skills)

    def to_dict(self) -> dict:
        """Serialize to a dictionary."""
        return self.model_dump(mode="json")

    @classmethod
    def from_dict(cls, data: dict) -> Profile:
        """Deserialize from a dictionary."""
        return cls.model_validate(data)
