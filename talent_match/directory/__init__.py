"""Profile directory: models, store contract and loading.

Public API:
- Profile, Skill: Directory data models
- ProfileStore: Read contract consumed by the matching engine
- ProfileLoader: Load profile pools from YAML/JSON
"""

from talent_match.directory.errors import (
    DirectoryError,
    DuplicateProfileError,
    ProfileNotFoundError,
)
from talent_match.directory.loader import ProfileLoader
from talent_match.directory.models import (
    Profile,
    ProfileStatus,
    Skill,
    SkillCategory,
    SkillLevel,
)
from talent_match.directory.store import (
    CoarseCriteria,
    FilteredPage,
    ProfileStore,
    SkillConstraint,
    SkillPolicy,
)

__all__ = [
    "CoarseCriteria",
    "DirectoryError",
    "DuplicateProfileError",
    "FilteredPage",
    "Profile",
    "ProfileLoader",
    "ProfileNotFoundError",
    "ProfileStatus",
    "ProfileStore",
    "Skill",
    "SkillCategory",
    "SkillConstraint",
    "SkillLevel",
    "SkillPolicy",
]
