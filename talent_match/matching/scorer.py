"""Authoritative skill-match scoring.

Names are compared by exact, case-sensitive equality and counted once
each, however many skill records share a name.
"""

from __future__ import annotations

from collections.abc import Iterable

from talent_match.directory.models import Profile
from talent_match.matching.models import AnySkillQuery, PrimarySecondaryQuery


def matched_names(profile: Profile, requested: Iterable[str]) -> frozenset[str]:
    """Return the distinct requested names present on ``profile``."""
    return profile.skill_names() & frozenset(requested)


def score_any_skill(profile: Profile, skill_names: Iterable[str]) -> int:
    return len(matched_names(profile, skill_names))


def score_primary_secondary(
    profile: Profile,
    primary_skills: Iterable[str],
    secondary_skills: Iterable[str],
) -> int:
    """Distinct matched primary names plus distinct matched secondary names.

    When every primary name is required the primary term equals the number
    of distinct primary names; it is still counted from the profile. A name
    listed as both primary and secondary counts once, as primary.
    """
    primary = frozenset(primary_skills)
    secondary = frozenset(secondary_skills) - primary
    return len(matched_names(profile, primary)) + len(matched_names(profile, secondary))


def score_profile(profile: Profile, query: AnySkillQuery | PrimarySecondaryQuery) -> int:
    """Score ``profile`` against either query mode."""
    if isinstance(query, PrimarySecondaryQuery):
        return score_primary_secondary(
            profile, query.primary_skills, query.secondary_skills
        )
    return score_any_skill(profile, query.skill_names)


def max_score(query: AnySkillQuery | PrimarySecondaryQuery) -> int:
    """Upper bound on ``score_profile`` for ``query``."""
    if isinstance(query, PrimarySecondaryQuery):
        return len(set(query.primary_skills) | set(query.secondary_skills))
    return len(set(query.skill_names))
