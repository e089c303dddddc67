"""Exceptions raised by profile stores."""


class DirectoryError(Exception):
    """Base class for profile directory errors."""


class ProfileNotFoundError(DirectoryError, KeyError):
    """Raised when a profile id is not present in the store."""

    def __init__(self, profile_id: str):
        super().__init__(f"Profile not found: {profile_id}")
        self.profile_id = profile_id

    def __str__(self) -> str:
        return self.args[0]


class DuplicateProfileError(DirectoryError):
    """Raised when inserting a profile whose id already exists."""

    def __init__(self, profile_id: str):
        super().__init__(f"Profile already exists: {profile_id}")
        self.profile_id = profile_id
