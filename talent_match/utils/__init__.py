"""Shared utilities."""

from talent_match.utils.logging import configure_logging, reset_logging

__all__ = ["configure_logging", "reset_logging"]
