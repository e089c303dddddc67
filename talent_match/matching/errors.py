"""Exceptions raised by the matching engine."""


class MatchingError(Exception):
    """Base class for matching engine errors."""


class QueryValidationError(MatchingError, ValueError):
    """Raised when a query is rejected before any computation."""
