"""Talent directory matching and ranking."""

__version__ = "0.1.0"
