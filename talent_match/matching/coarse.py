"""In-memory coarse filter: predicates, provisional count and coarse order."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

from talent_match.directory.models import Profile
from talent_match.directory.store import CoarseCriteria
from talent_match.matching.predicates import (
    passes_coarse_filter,
    provisional_match_count,
)


@dataclass(frozen=True)
class Candidate:
    """A profile that passed the coarse filter, with its provisional count."""

    profile: Profile
    provisional_count: int


def coarse_sort_key(candidate: Candidate) -> tuple[int, str, str]:
    return (
        -candidate.provisional_count,
        candidate.profile.name,
        candidate.profile.id,
    )


def coarse_filter(profiles: Iterable[Profile], criteria: CoarseCriteria) -> list[Candidate]:
    """Return every profile passing ``criteria``, in coarse order.

    The window in ``criteria`` is not applied here; see ``window``.
    """
    constraint = criteria.skill_constraint
    candidates = [
        Candidate(profile, provisional_match_count(profile, constraint))
        for profile in profiles
        if passes_coarse_filter(profile, criteria)
    ]
    candidates.sort(key=coarse_sort_key)
    return candidates


def window(candidates: list[Candidate], offset: int, limit: int | None) -> list[Candidate]:
    """Slice ``candidates`` to the requested window."""
    start = max(0, offset)
    if limit is None:
        return candidates[start:]
    return candidates[start : start + max(0, limit)]
