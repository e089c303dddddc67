"""Matching service backed by a profile store."""

from __future__ import annotations

import logging

from talent_match.directory.store import ProfileStore
from talent_match.matching.config import MatchingConfig, get_matching_config
from talent_match.matching.engine import finalize
from talent_match.matching.models import (
    AnySkillQuery,
    MatchPage,
    PrimarySecondaryQuery,
    parse_query,
)
from talent_match.matching.translate import to_coarse_criteria, validate_query

logger = logging.getLogger(__name__)


class MatchingService:
    """Run skill-based searches against a ``ProfileStore``.

    The service keeps no per-search state, so one instance may serve
    concurrent searches. Store errors propagate unchanged.
    """

    def __init__(
        self, store: ProfileStore, config: MatchingConfig | None = None
    ) -> None:
        self.store = store
        self.config = config or get_matching_config()

    async def search(
        self, query: AnySkillQuery | PrimarySecondaryQuery | dict
    ) -> MatchPage:
        """Return ranked matches for ``query``.

        Args:
            query: A query model, or a mapping validated with ``parse_query``.

        Raises:
            QueryValidationError: The query is rejected; the store is not read.
            pydantic.ValidationError: A mapping does not describe a valid query.
        """
        if isinstance(query, dict):
            query = parse_query(query)
        validate_query(query)

        criteria = to_coarse_criteria(query, self.config)
        fetched = await self.store.fetch_filtered(criteria)

        if (
            isinstance(query, PrimarySecondaryQuery)
            and fetched.total > len(fetched.profiles)
        ):
            logger.warning(
                "Prefetch ceiling of %d reached; %d coarse matches were not evaluated",
                self.config.prefetch_ceiling,
                fetched.total - len(fetched.profiles),
            )

        page = finalize(query, fetched.profiles, fetched.total, self.config)
        logger.info(
            "%s search returned %d of %d matches (page %d/%d)",
            query.mode,
            len(page.results),
            page.pagination.total_items,
            page.pagination.current_page,
            page.pagination.total_pages,
        )
        return page
