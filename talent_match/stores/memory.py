"""In-memory profile store.

Runs the coarse filter in Python over the stored snapshot. Useful for
tests and for pools loaded from files.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable

from talent_match.directory.errors import DuplicateProfileError, ProfileNotFoundError
from talent_match.directory.models import Profile
from talent_match.directory.store import CoarseCriteria, FilteredPage
from talent_match.matching.coarse import coarse_filter, window

logger = logging.getLogger(__name__)


class InMemoryProfileStore:
    """Profile store holding profiles in a dict keyed by id."""

    def __init__(self, profiles: Iterable[Profile] = ()) -> None:
        self._profiles: dict[str, Profile] = {}
        for profile in profiles:
            if profile.id in self._profiles:
                raise DuplicateProfileError(profile.id)
            self._profiles[profile.id] = profile.model_copy(deep=True)

    def __len__(self) -> int:
        return len(self._profiles)

    async def insert_profile(self, profile: Profile) -> None:
        """Add a new profile.

        Raises:
            DuplicateProfileError: A profile with the same id exists.
        """
        if profile.id in self._profiles:
            raise DuplicateProfileError(profile.id)
        self._profiles[profile.id] = profile.model_copy(deep=True)

    async def upsert_profile(self, profile: Profile) -> None:
        """Insert or replace a profile."""
        self._profiles[profile.id] = profile.model_copy(deep=True)

    async def get_profile(self, profile_id: str) -> Profile | None:
        """Return the profile with ``profile_id``, or None."""
        profile = self._profiles.get(profile_id)
        return profile.model_copy(deep=True) if profile is not None else None

    async def delete_profile(self, profile_id: str) -> None:
        """Remove a profile.

        Raises:
            ProfileNotFoundError: No profile has ``profile_id``.
        """
        if self._profiles.pop(profile_id, None) is None:
            raise ProfileNotFoundError(profile_id)

    async def fetch_all(self) -> list[Profile]:
        return list(self._profiles.values())

    async def fetch_filtered(self, criteria: CoarseCriteria) -> FilteredPage:
        candidates = coarse_filter(self._profiles.values(), criteria)
        selected = window(candidates, criteria.offset, criteria.limit)
        logger.debug(
            "Coarse filter kept %d of %d profiles, returning %d",
            len(candidates),
            len(self._profiles),
            len(selected),
        )
        return FilteredPage(
            profiles=[candidate.profile for candidate in selected],
            total=len(candidates),
        )
