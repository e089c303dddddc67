"""Final ordering and pagination of scored candidates."""

from __future__ import annotations

import math
from collections.abc import Iterable

from talent_match.matching.models import (
    MatchPage,
    MatchResult,
    Pagination,
    ScoredProfile,
)


def ranking_key(candidate: ScoredProfile) -> tuple[int, str, str]:
    # Score desc, name asc; id keeps equal names deterministic.
    return (-candidate.score, candidate.profile.name, candidate.profile.id)


def rank(scored: Iterable[ScoredProfile], start: int = 1) -> list[MatchResult]:
    """Sort ``scored`` and assign consecutive ranks beginning at ``start``."""
    ordered = sorted(scored, key=ranking_key)
    return [
        MatchResult(profile=item.profile, score=item.score, rank=position)
        for position, item in enumerate(ordered, start=start)
    ]


def windowed_page(
    scored: Iterable[ScoredProfile], *, total: int, page: int, page_size: int
) -> MatchPage:
    """Build one window of a fully ranked result set.

    ``scored`` is the window itself; ranks continue from the window offset.
    """
    offset = (page - 1) * page_size
    results = rank(scored, start=offset + 1)
    pagination = Pagination(
        current_page=page,
        total_pages=math.ceil(total / page_size),
        total_items=total,
        items_per_page=page_size,
    )
    return MatchPage(results=results, pagination=pagination)


def single_page(scored: Iterable[ScoredProfile]) -> MatchPage:
    """Return every candidate on one synthetic page."""
    results = rank(scored)
    total = len(results)
    pagination = Pagination(
        current_page=1,
        total_pages=1,
        total_items=total,
        items_per_page=total if total > 0 else 1,
    )
    return MatchPage(results=results, pagination=pagination)
