"""Per-skill experience filter applied after coarse filtering and scoring."""

from __future__ import annotations

from collections.abc import Iterable, Mapping

from talent_match.directory.models import Profile
from talent_match.matching.models import ScoredProfile


def has_skill_experience(profile: Profile, skill_name: str, min_years: int) -> bool:
    """Return True if some record named ``skill_name`` has at least ``min_years``.

    Records with no recorded years never satisfy a threshold. The skill's
    category is not considered.
    """
    return any(
        skill.name == skill_name
        and skill.years_of_experience is not None
        and skill.years_of_experience >= min_years
        for skill in profile.skills
    )


def meets_skill_experience(profile: Profile, requirements: Mapping[str, int]) -> bool:
    """Every entry of ``requirements`` must be satisfied."""
    return all(
        has_skill_experience(profile, name, min_years)
        for name, min_years in requirements.items()
    )


def apply_fine_filter(
    scored: Iterable[ScoredProfile], requirements: Mapping[str, int] | None
) -> list[ScoredProfile]:
    """Drop candidates failing any per-skill experience requirement.

    A threshold on a secondary skill makes that skill mandatory. With no
    requirements the candidates pass through unchanged.
    """
    if not requirements:
        return list(scored)
    return [
        candidate
        for candidate in scored
        if meets_skill_experience(candidate.profile, requirements)
    ]
