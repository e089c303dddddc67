"""Profile store backings.

Public API:
- InMemoryProfileStore: Snapshot store evaluating the coarse filter in Python
- ProfileRepository: SQLite store evaluating the coarse filter in SQL
"""

from talent_match.stores.memory import InMemoryProfileStore
from talent_match.stores.repository import ProfileRepository

__all__ = ["InMemoryProfileStore", "ProfileRepository"]
