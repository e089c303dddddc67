"""SQLite repository for directory profiles.

This module provides async SQLite database operations for storing
profiles and evaluating the coarse matching filter inside SQL.
"""

import asyncio
import json
import logging
import sqlite3
from collections.abc import AsyncGenerator, Iterable, Sequence
from contextlib import asynccontextmanager
from pathlib import Path

import aiosqlite

from talent_match.config.settings import get_settings
from talent_match.directory.errors import DuplicateProfileError, ProfileNotFoundError
from talent_match.directory.models import (
    Profile,
    ProfileStatus,
    Skill,
    SkillCategory,
    SkillLevel,
)
from talent_match.directory.store import CoarseCriteria, FilteredPage, SkillPolicy
from talent_match.matching.predicates import EXPERIENCE_TOLERANCE_YEARS

logger = logging.getLogger(__name__)

# SQL schema for the directory tables
CREATE_PROFILES_SQL = """
CREATE TABLE IF NOT EXISTS profiles (
    id TEXT PRIMARY KEY,
    name TEXT NOT NULL,
    email TEXT,
    designation TEXT,
    location TEXT,
    total_experience INTEGER,
    status TEXT NOT NULL,
    account_ids TEXT NOT NULL DEFAULT '[]'
)
"""

CREATE_SKILLS_SQL = """
CREATE TABLE IF NOT EXISTS profile_skills (
    profile_id TEXT NOT NULL,
    position INTEGER NOT NULL,
    name TEXT NOT NULL,
    category TEXT NOT NULL,
    level TEXT NOT NULL,
    years_of_experience INTEGER,
    PRIMARY KEY (profile_id, position)
)
"""

CREATE_INDEX_SQL = """
CREATE INDEX IF NOT EXISTS idx_profiles_location ON profiles(location);
CREATE INDEX IF NOT EXISTS idx_profiles_status ON profiles(status);
CREATE INDEX IF NOT EXISTS idx_profile_skills_name ON profile_skills(name, profile_id);
"""

# Stay well under SQLITE_MAX_VARIABLE_NUMBER on older builds.
_ID_CHUNK_SIZE = 500


def _placeholders(count: int) -> str:
    return ", ".join("?" for _ in range(count))


def _distinct_match_sql(names: Sequence[str]) -> tuple[str, list]:
    """SQL counting the distinct ``names`` held by profile ``p``."""
    if not names:
        return "0", []
    sql = (
        "(SELECT COUNT(DISTINCT s.name) FROM profile_skills s "
        f"WHERE s.profile_id = p.id AND s.name IN ({_placeholders(len(names))}))"
    )
    return sql, list(names)


def _where_clause(criteria: CoarseCriteria) -> tuple[str, list]:
    """Translate coarse criteria into a WHERE clause over ``profiles p``."""
    clauses: list[str] = []
    params: list = []

    if criteria.location is not None:
        clauses.append("p.location = ?")
        params.append(criteria.location)

    if criteria.experience_floor is not None:
        clauses.append("p.total_experience IS NOT NULL AND p.total_experience >= ?")
        params.append(criteria.experience_floor - EXPERIENCE_TOLERANCE_YEARS)

    constraint = criteria.skill_constraint
    names = sorted(constraint.names)
    if names:
        if constraint.policy is SkillPolicy.ALL_OF:
            count_sql, count_params = _distinct_match_sql(names)
            clauses.append(f"{count_sql} = ?")
            params.extend(count_params)
            params.append(len(names))
        else:
            clauses.append(
                "EXISTS (SELECT 1 FROM profile_skills s "
                f"WHERE s.profile_id = p.id AND s.name IN ({_placeholders(len(names))}))"
            )
            params.extend(names)

    if not clauses:
        return "1 = 1", params
    return " AND ".join(f"({clause})" for clause in clauses), params


class ProfileRepository:
    """Async SQLite repository for directory profiles.

    Implements the ``ProfileStore`` contract by pushing every coarse
    predicate and the coarse ordering into SQL, plus plain CRUD and
    directory listings.
    """

    def __init__(self, db_path: Path | str | None = None):
        """Initialize the repository.

        Args:
            db_path: Path to the SQLite database file. Defaults to
                ``Settings.directory_db_path``.
        """
        if db_path is None:
            db_path = get_settings().directory_db_path
        self.db_path = Path(db_path)
        self._connection: aiosqlite.Connection | None = None
        self._connect_lock = asyncio.Lock()
        # All coroutines share one connection, so a transaction owns it
        # from its first statement until commit or rollback.
        self._transaction_lock = asyncio.Lock()

    @asynccontextmanager
    async def _get_connection(self) -> AsyncGenerator[aiosqlite.Connection, None]:
        """Get a database connection.

        Yields:
            An aiosqlite connection.
        """
        async with self._connect_lock:
            if self._connection is None:
                self._connection = await aiosqlite.connect(self.db_path)
                self._connection.row_factory = aiosqlite.Row
        yield self._connection

    @asynccontextmanager
    async def _transaction(self) -> AsyncGenerator[aiosqlite.Connection, None]:
        """Run statements as one transaction on the shared connection.

        Commits when the block exits normally and rolls back when it raises.
        No other transaction can interleave statements in between.

        Yields:
            An aiosqlite connection.
        """
        async with self._transaction_lock:
            async with self._get_connection() as conn:
                try:
                    yield conn
                except BaseException:
                    await conn.rollback()
                    raise
                await conn.commit()

    async def initialize(self) -> None:
        """Initialize the database, creating tables if needed."""
        self.db_path.parent.mkdir(parents=True, exist_ok=True)

        async with self._transaction() as conn:
            await conn.execute(CREATE_PROFILES_SQL)
            await conn.execute(CREATE_SKILLS_SQL)
            await conn.executescript(CREATE_INDEX_SQL)

    async def close(self) -> None:
        """Close the database connection."""
        if self._connection is not None:
            await self._connection.close()
            self._connection = None

    async def insert_profile(self, profile: Profile) -> None:
        """Insert a new profile with its skills.

        Raises:
            DuplicateProfileError: A profile with the same id exists.
        """
        try:
            async with self._transaction() as conn:
                await conn.execute(
                    """
                    INSERT INTO profiles (
                        id, name, email, designation, location,
                        total_experience, status, account_ids
                    ) VALUES (?, ?, ?, ?, ?, ?, ?, ?)
                    """,
                    self._profile_params(profile),
                )
                await self._write_skills(conn, profile)
        except sqlite3.IntegrityError as e:
            raise DuplicateProfileError(profile.id) from e

    async def upsert_profile(self, profile: Profile) -> None:
        """Insert a profile, replacing any existing profile with the same id."""
        async with self._transaction() as conn:
            await conn.execute(
                """
                INSERT OR REPLACE INTO profiles (
                    id, name, email, designation, location,
                    total_experience, status, account_ids
                ) VALUES (?, ?, ?, ?, ?, ?, ?, ?)
                """,
                self._profile_params(profile),
            )
            await conn.execute(
                "DELETE FROM profile_skills WHERE profile_id = ?", (profile.id,)
            )
            await self._write_skills(conn, profile)

    async def insert_many(self, profiles: Iterable[Profile]) -> int:
        """Upsert every profile in ``profiles`` and return how many were written."""
        count = 0
        for profile in profiles:
            await self.upsert_profile(profile)
            count += 1
        logger.debug("Wrote %d profiles to %s", count, self.db_path)
        return count

    async def get_profile(self, profile_id: str) -> Profile | None:
        """Get a profile by id.

        Returns:
            The profile if found, None otherwise.
        """
        async with self._transaction_lock:
            async with self._get_connection() as conn:
                cursor = await conn.execute(
                    "SELECT * FROM profiles WHERE id = ?", (profile_id,)
                )
                row = await cursor.fetchone()

            if row is None:
                return None

            skills = await self._load_skills([profile_id])
        return self._row_to_profile(row, skills.get(profile_id, []))

    async def delete_profile(self, profile_id: str) -> None:
        """Delete a profile and its skills.

        Raises:
            ProfileNotFoundError: No profile has ``profile_id``.
        """
        async with self._transaction() as conn:
            cursor = await conn.execute(
                "DELETE FROM profiles WHERE id = ?", (profile_id,)
            )
            if cursor.rowcount == 0:
                raise ProfileNotFoundError(profile_id)
            await conn.execute(
                "DELETE FROM profile_skills WHERE profile_id = ?", (profile_id,)
            )

    async def list_locations(self) -> list[str]:
        """Return distinct non-null profile locations, sorted."""
        async with self._get_connection() as conn:
            cursor = await conn.execute(
                """
                SELECT DISTINCT location FROM profiles
                WHERE location IS NOT NULL
                ORDER BY location
                """
            )
            rows = await cursor.fetchall()
        return [row["location"] for row in rows]

    async def list_skill_names(self) -> list[str]:
        """Return distinct skill names across all profiles, sorted."""
        async with self._get_connection() as conn:
            cursor = await conn.execute(
                "SELECT DISTINCT name FROM profile_skills ORDER BY name"
            )
            rows = await cursor.fetchall()
        return [row["name"] for row in rows]

    async def count_by_status(self) -> dict[ProfileStatus, int]:
        """Return profile counts grouped by status."""
        async with self._get_connection() as conn:
            cursor = await conn.execute(
                "SELECT status, COUNT(*) AS count FROM profiles GROUP BY status"
            )
            rows = await cursor.fetchall()

        counts: dict[ProfileStatus, int] = {}
        for row in rows:
            try:
                status = ProfileStatus(row["status"])
            except ValueError:
                logger.warning("Skipping unknown profile status %r", row["status"])
                continue
            counts[status] = int(row["count"])
        return counts

    async def fetch_all(self) -> list[Profile]:
        """Return every profile, ordered by name then id."""
        async with self._transaction_lock:
            async with self._get_connection() as conn:
                cursor = await conn.execute("SELECT * FROM profiles ORDER BY name, id")
                rows = await cursor.fetchall()

            skills = await self._load_skills([row["id"] for row in rows])
        return [self._row_to_profile(row, skills.get(row["id"], [])) for row in rows]

    async def fetch_filtered(self, criteria: CoarseCriteria) -> FilteredPage:
        """Evaluate the coarse filter in SQL and return the requested window."""
        where_sql, where_params = _where_clause(criteria)
        constraint = criteria.skill_constraint
        names_sql, names_params = _distinct_match_sql(sorted(constraint.names))
        bonus_sql, bonus_params = _distinct_match_sql(sorted(constraint.bonus_names))
        limit = criteria.limit if criteria.limit is not None else -1

        # No write may land between the page query and the count.
        async with self._transaction_lock:
            async with self._get_connection() as conn:
                cursor = await conn.execute(
                    f"""
                    SELECT p.*, {names_sql} + {bonus_sql} AS match_count
                    FROM profiles p
                    WHERE {where_sql}
                    ORDER BY match_count DESC, p.name ASC, p.id ASC
                    LIMIT ? OFFSET ?
                    """,
                    [
                        *names_params,
                        *bonus_params,
                        *where_params,
                        limit,
                        max(0, criteria.offset),
                    ],
                )
                rows = await cursor.fetchall()

                cursor = await conn.execute(
                    f"SELECT COUNT(*) AS total FROM profiles p WHERE {where_sql}",
                    where_params,
                )
                total_row = await cursor.fetchone()

            skills = await self._load_skills([row["id"] for row in rows])

        total = int(total_row["total"]) if total_row is not None else 0
        profiles = [self._row_to_profile(row, skills.get(row["id"], [])) for row in rows]
        logger.debug(
            "Coarse filter matched %d profiles, returning %d", total, len(profiles)
        )
        return FilteredPage(profiles=profiles, total=total)

    async def _load_skills(self, profile_ids: Sequence[str]) -> dict[str, list[Skill]]:
        """Load skills for ``profile_ids`` keyed by profile id, in stored order."""
        skills: dict[str, list[Skill]] = {}
        if not profile_ids:
            return skills

        async with self._get_connection() as conn:
            for start in range(0, len(profile_ids), _ID_CHUNK_SIZE):
                chunk = list(profile_ids[start : start + _ID_CHUNK_SIZE])
                cursor = await conn.execute(
                    f"""
                    SELECT * FROM profile_skills
                    WHERE profile_id IN ({_placeholders(len(chunk))})
                    ORDER BY profile_id, position
                    """,
                    chunk,
                )
                for row in await cursor.fetchall():
                    skills.setdefault(row["profile_id"], []).append(
                        Skill(
                            name=row["name"],
                            category=SkillCategory(row["category"]),
                            level=SkillLevel(row["level"]),
                            years_of_experience=row["years_of_experience"],
                        )
                    )
        return skills

    async def _write_skills(self, conn: aiosqlite.Connection, profile: Profile) -> None:
        await conn.executemany(
            """
            INSERT INTO profile_skills (
                profile_id, position, name, category, level, years_of_experience
            ) VALUES (?, ?, ?, ?, ?, ?)
            """,
            [
                (
                    profile.id,
                    position,
                    skill.name,
                    skill.category.value,
                    skill.level.value,
                    skill.years_of_experience,
                )
                for position, skill in enumerate(profile.skills)
            ],
        )

    def _profile_params(self, profile: Profile) -> tuple:
        return (
            profile.id,
            profile.name,
            profile.email,
            profile.designation,
            profile.location,
            profile.total_experience,
            profile.status.value,
            json.dumps(profile.account_ids),
        )

    def _row_to_profile(self, row: aiosqlite.Row, skills: list[Skill]) -> Profile:
        """Convert a database row and its skills to a Profile."""
        return Profile(
            id=row["id"],
            name=row["name"],
            email=row["email"],
            designation=row["designation"],
            location=row["location"],
            total_experience=row["total_experience"],
            status=ProfileStatus(row["status"]),
            account_ids=json.loads(row["account_ids"] or "[]"),
            skills=skills,
        )
