"""Data models for candidate verification."""

from typing import NamedTuple


class Match(NamedTuple):
    """A dictionary word found inside a candidate, as a half-open span."""
    start: int
    end: int
    word: str
