"""Application wiring for talent-match.

Builds a ``MatchingService`` over the SQLite directory from ``Settings``.
"""

from __future__ import annotations

import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from talent_match.config.settings import Settings, get_settings
from talent_match.directory.loader import ProfileLoader
from talent_match.matching.config import MatchingConfig
from talent_match.matching.service import MatchingService
from talent_match.stores.repository import ProfileRepository
from talent_match.utils.logging import configure_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def open_matching_service(
    settings: Settings | None = None,
    config: MatchingConfig | None = None,
) -> AsyncGenerator[MatchingService, None]:
    """Yield a matching service backed by the configured directory database.

    Logging is configured at ``settings.log_level``. When
    ``settings.profiles_path`` is set, its profiles are upserted into the
    database before the service is yielded. The database is closed on exit.
    """
    settings = settings or get_settings()
    configure_logging(level=settings.log_level)

    repository = ProfileRepository(settings.directory_db_path)
    await repository.initialize()
    try:
        if settings.profiles_path is not None:
            profiles = ProfileLoader(settings).load_profiles()
            count = await repository.insert_many(profiles)
            logger.info("Loaded %d profiles from %s", count, settings.profiles_path)
        yield MatchingService(repository, config)
    finally:
        await repository.close()
