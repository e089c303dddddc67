"""Skill-based profile matching and ranking.

This module filters a profile pool against a hiring requirement and
ranks the survivors by skill-match score.

Public API:
    - MatchingService: Store-backed async search
    - match_profiles: Pure matching over an in-memory snapshot
    - AnySkillQuery / PrimarySecondaryQuery: Query variants
    - MatchPage / MatchResult / Pagination: Result models
    - MatchingConfig: Configuration settings
"""

from talent_match.matching.config import (
    MatchingConfig,
    get_matching_config,
    reset_matching_config,
)
from talent_match.matching.engine import match_profiles
from talent_match.matching.errors import MatchingError, QueryValidationError
from talent_match.matching.models import (
    AnySkillQuery,
    MatchPage,
    MatchResult,
    Pagination,
    PrimarySecondaryQuery,
    SkillQuery,
    parse_query,
)
from talent_match.matching.service import MatchingService

__all__ = [
    "MatchingService",
    "match_profiles",
    "AnySkillQuery",
    "PrimarySecondaryQuery",
    "SkillQuery",
    "parse_query",
    "MatchPage",
    "MatchResult",
    "Pagination",
    "MatchingError",
    "QueryValidationError",
    "MatchingConfig",
    "get_matching_config",
    "reset_matching_config",
]
