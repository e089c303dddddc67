"""Pure matching pipeline over an in-memory snapshot of profiles.

Each call depends only on its arguments: coarse filter, score, optional
fine filter, then rank and paginate.
"""

from __future__ import annotations

from collections.abc import Iterable

from talent_match.directory.models import Profile
from talent_match.matching.coarse import coarse_filter, window
from talent_match.matching.config import MatchingConfig, get_matching_config
from talent_match.matching.fine import apply_fine_filter
from talent_match.matching.models import (
    AnySkillQuery,
    MatchPage,
    PrimarySecondaryQuery,
    ScoredProfile,
)
from talent_match.matching.ranker import single_page, windowed_page
from talent_match.matching.scorer import score_profile
from talent_match.matching.translate import (
    resolve_page,
    to_coarse_criteria,
    validate_query,
)


def score_candidates(
    profiles: Iterable[Profile], query: AnySkillQuery | PrimarySecondaryQuery
) -> list[ScoredProfile]:
    return [ScoredProfile(profile, score_profile(profile, query)) for profile in profiles]


def finalize(
    query: AnySkillQuery | PrimarySecondaryQuery,
    candidates: Iterable[Profile],
    total: int,
    config: MatchingConfig,
) -> MatchPage:
    """Score, fine-filter and rank coarse-filtered ``candidates``.

    For any-skill queries ``candidates`` is already the requested window
    and ``total`` counts every coarse match. For primary/secondary queries
    ``candidates`` is the bounded prefetch and ``total`` is not used.
    """
    scored = score_candidates(candidates, query)
    if isinstance(query, PrimarySecondaryQuery):
        return single_page(apply_fine_filter(scored, query.skill_experience))

    page, page_size = resolve_page(query, config)
    return windowed_page(scored, total=total, page=page, page_size=page_size)


def match_profiles(
    pool: Iterable[Profile],
    query: AnySkillQuery | PrimarySecondaryQuery,
    config: MatchingConfig | None = None,
) -> MatchPage:
    """Match and rank ``pool`` against ``query``.

    Raises:
        QueryValidationError: The query is rejected before any filtering.
    """
    config = config or get_matching_config()
    validate_query(query)

    criteria = to_coarse_criteria(query, config)
    candidates = coarse_filter(pool, criteria)
    selected = window(candidates, criteria.offset, criteria.limit)
    return finalize(query, [c.profile for c in selected], len(candidates), config)
