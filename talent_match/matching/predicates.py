"""Coarse-filter predicates evaluated against a single profile."""

from __future__ import annotations

from talent_match.directory.models import Profile
from talent_match.directory.store import CoarseCriteria, SkillConstraint, SkillPolicy

# A floor F is met by any total experience >= F - 5.
EXPERIENCE_TOLERANCE_YEARS = 5


def matches_location(profile: Profile, location: str | None) -> bool:
    """Exact, case-sensitive location equality; None matches everything."""
    if location is None:
        return True
    return profile.location == location


def meets_experience_floor(profile: Profile, floor: int | None) -> bool:
    """Return True if the profile's total experience clears ``floor`` within tolerance.

    Profiles without a recorded total experience fail whenever a floor is set.
    """
    if floor is None:
        return True
    if profile.total_experience is None:
        return False
    return profile.total_experience >= floor - EXPERIENCE_TOLERANCE_YEARS


def satisfies_skill_constraint(profile: Profile, constraint: SkillConstraint) -> bool:
    """Apply the ANY_OF / ALL_OF presence test on distinct skill names."""
    if not constraint.names:
        return True
    names = profile.skill_names()
    if constraint.policy is SkillPolicy.ALL_OF:
        return constraint.names <= names
    return not names.isdisjoint(constraint.names)


def provisional_match_count(profile: Profile, constraint: SkillConstraint) -> int:
    """Distinct gating names present plus distinct bonus names present."""
    names = profile.skill_names()
    return len(names & constraint.names) + len(names & constraint.bonus_names)


def passes_coarse_filter(profile: Profile, criteria: CoarseCriteria) -> bool:
    return (
        matches_location(profile, criteria.location)
        and meets_experience_floor(profile, criteria.experience_floor)
        and satisfies_skill_constraint(profile, criteria.skill_constraint)
    )
