"""Profile store contract consumed by the matching engine.

A store may evaluate every coarse predicate itself (the SQLite repository
pushes them into SQL) or run them in memory over a snapshot. Either way
``fetch_filtered`` must return exactly the profiles that satisfy
``CoarseCriteria``, ordered by provisional match count descending, then
name ascending, then id ascending, windowed by ``offset``/``limit``.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Protocol

from talent_match.directory.models import Profile


class SkillPolicy(str, Enum):
    """How requested skill names gate inclusion."""

    ANY_OF = "any_of"
    ALL_OF = "all_of"


@dataclass(frozen=True)
class SkillConstraint:
    """Skill presence constraint.

    Attributes:
        policy: ANY_OF passes profiles holding at least one of ``names``;
            ALL_OF passes profiles holding every name in ``names``. An empty
            ``names`` set passes every profile under either policy.
        names: Skill names that gate inclusion.
        bonus_names: Skill names that only add to the provisional match
            count (secondary skills).
    """

    policy: SkillPolicy
    names: frozenset[str] = field(default_factory=frozenset)
    bonus_names: frozenset[str] = field(default_factory=frozenset)


@dataclass(frozen=True)
class CoarseCriteria:
    """First-pass constraints plus the requested window."""

    skill_constraint: SkillConstraint
    location: str | None = None
    experience_floor: int | None = None
    offset: int = 0
    limit: int | None = None


@dataclass
class FilteredPage:
    """A window of coarse-filtered profiles and the unwindowed total."""

    profiles: list[Profile]
    total: int


class ProfileStore(Protocol):
    """Read access the matching engine needs from a profile store."""

    async def fetch_all(self) -> list[Profile]:
        """Return every profile in the store."""
        ...

    async def fetch_filtered(self, criteria: CoarseCriteria) -> FilteredPage:
        """Return the window of profiles passing ``criteria``."""
        ...
