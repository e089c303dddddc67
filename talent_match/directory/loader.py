"""Profile pool loading and validation utilities."""

from __future__ import annotations

import json
from pathlib import Path

import yaml

from talent_match.config.settings import Settings, get_settings
from talent_match.directory.models import Profile


class ProfileLoader:
    """Load a pool of profiles from YAML or JSON.

    The file holds either a list of profile mappings or a mapping with a
    ``profiles`` key containing that list.
    """

    def __init__(self, settings: Settings | None = None) -> None:
        self.settings = settings or get_settings()

    def load_profiles(self, path: Path | str | None = None) -> list[Profile]:
        """Load and validate every profile in ``path``.

        Raises:
            FileNotFoundError: The file does not exist.
            ValueError: No path was given or configured, the file cannot be
                parsed, or it has the wrong shape.
            pydantic.ValidationError: A profile entry is invalid.
        """
        if path is None:
            path = self.settings.profiles_path
        if path is None:
            raise ValueError("No profiles path given and PROFILES_PATH is not set")

        profiles_path = Path(path)
        if not profiles_path.exists():
            raise FileNotFoundError(f"Profiles file not found: {profiles_path}")

        suffix = profiles_path.suffix.lower()
        if suffix == ".json":
            data = self._load_json(profiles_path)
        else:
            data = self._load_yaml(profiles_path)

        entries = self._extract_entries(data, profiles_path)
        profiles = [Profile.model_validate(entry) for entry in entries]

        seen: set[str] = set()
        for profile in profiles:
            if profile.id in seen:
                raise ValueError(f"Duplicate profile id {profile.id!r} in {profiles_path}")
            seen.add(profile.id)
        return profiles

    def _load_yaml(self, path: Path) -> object:
        try:
            with path.open("r", encoding="utf-8") as f:
                return yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ValueError(f"Invalid YAML profiles file: {path}") from e

    def _load_json(self, path: Path) -> object:
        try:
            with path.open("r", encoding="utf-8") as f:
                return json.load(f)
        except json.JSONDecodeError as e:
            raise ValueError(f"Invalid JSON profiles file: {path}") from e

    def _extract_entries(self, data: object, path: Path) -> list:
        if data is None:
            return []
        if isinstance(data, dict):
            data = data.get("profiles", [])
        if not isinstance(data, list):
            raise ValueError(f"Profiles must be a list or a 'profiles' mapping: {path}")
        return data
