"""Translate matching queries into coarse-filter criteria for a store."""

from __future__ import annotations

from talent_match.directory.store import CoarseCriteria, SkillConstraint, SkillPolicy
from talent_match.matching.config import MatchingConfig
from talent_match.matching.errors import QueryValidationError
from talent_match.matching.models import AnySkillQuery, PrimarySecondaryQuery


def validate_query(query: AnySkillQuery | PrimarySecondaryQuery) -> None:
    """Reject queries that cannot be evaluated.

    Raises:
        QueryValidationError: A primary/secondary query names no primary skill.
    """
    if isinstance(query, PrimarySecondaryQuery) and not query.primary_skills:
        raise QueryValidationError("Primary skills are required")


def resolve_page(query: AnySkillQuery, config: MatchingConfig) -> tuple[int, int]:
    """Return ``(page, page_size)``, replacing missing or non-positive values."""
    page = query.page if query.page is not None and query.page > 0 else config.default_page
    page_size = (
        query.page_size
        if query.page_size is not None and query.page_size > 0
        else config.default_page_size
    )
    return page, page_size


def skill_constraint_for(query: AnySkillQuery | PrimarySecondaryQuery) -> SkillConstraint:
    if isinstance(query, PrimarySecondaryQuery):
        primary = frozenset(query.primary_skills)
        return SkillConstraint(
            policy=SkillPolicy.ALL_OF,
            names=primary,
            bonus_names=frozenset(query.secondary_skills) - primary,
        )
    return SkillConstraint(policy=SkillPolicy.ANY_OF, names=frozenset(query.skill_names))


def to_coarse_criteria(
    query: AnySkillQuery | PrimarySecondaryQuery, config: MatchingConfig
) -> CoarseCriteria:
    """Build the store criteria for ``query``.

    Any-skill queries push their page window down to the store. Primary/
    secondary queries request the first ``config.prefetch_ceiling``
    candidates in coarse order.
    """
    constraint = skill_constraint_for(query)
    if isinstance(query, PrimarySecondaryQuery):
        offset, limit = 0, config.prefetch_ceiling
    else:
        page, page_size = resolve_page(query, config)
        offset, limit = (page - 1) * page_size, page_size

    return CoarseCriteria(
        skill_constraint=constraint,
        location=query.location,
        experience_floor=query.min_experience,
        offset=offset,
        limit=limit,
    )
