"""Pytest configuration and shared fixtures."""

from collections.abc import Callable

import pytest

from talent_match.directory.models import Profile, Skill, SkillCategory


@pytest.fixture(autouse=True)
def _reset_singletons():
    """Reset cached configuration between tests."""
    from talent_match.config.settings import reset_settings
    from talent_match.matching.config import reset_matching_config
    from talent_match.utils.logging import reset_logging

    yield
    reset_settings()
    reset_matching_config()
    reset_logging()


@pytest.fixture
def make_skill() -> Callable[..., Skill]:
    """Factory for skill records."""

    def _make(
        name: str,
        years: int | None = None,
        category: SkillCategory = SkillCategory.PRIMARY,
    ) -> Skill:
        return Skill(name=name, category=category, years_of_experience=years)

    return _make


@pytest.fixture
def make_profile() -> Callable[..., Profile]:
    """Factory for profiles with sensible defaults."""

    def _make(
        profile_id: str,
        name: str | None = None,
        *,
        location: str | None = "Pune",
        total_experience: int | None = 8,
        skills: list[Skill] | None = None,
    ) -> Profile:
        return Profile(
            id=profile_id,
            name=name or f"Person {profile_id}",
            location=location,
            total_experience=total_experience,
            skills=skills or [],
        )

    return _make
