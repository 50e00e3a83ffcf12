"""
Coverage check for dictionary matches over a candidate string.

A candidate is covered when the union of its match spans is the whole
string: overlapping, nested and touching words all merge into one run,
and any uncovered position makes the merged length fall short.
"""

from typing import Iterable

from .models import Match
from ..keypad.mapping import NUMBER_LENGTH


def covered_span(matches: Iterable[Match], legacy: bool = False) -> int:
    """
    Total length of the merged match intervals.

    Args:
        matches: Matches for one candidate
        legacy: Use the legacy merge, which drops the length
            of an interval left behind by a gap and ignores a match that
            starts inside the current interval. Expects matches in
            non-decreasing start order.

    Returns:
        Sum of merged interval lengths
    """
    if legacy:
        return _legacy_span(matches)

    low = high = span = 0
    for m in sorted(matches, key=lambda m: (m.start, m.end)):
        if m.start > high:
            span += high - low
            low, high = m.start, m.end
        elif m.end > high:
            high = m.end
    return span + (high - low)


def _legacy_span(matches: Iterable[Match]) -> int:
    low = high = span = 0
    for m in matches:
        if m.start > high:
            # Previous interval is not committed here
            low, high = m.start, m.end
        elif m.start == high:
            span += high - low
            low, high = m.start, m.end
        elif m.start <= low:
            low = m.start
            if m.end > high:
                high = m.end
    return span + (high - low)


def is_fully_covered(
    matches: Iterable[Match],
    length: int = NUMBER_LENGTH,
    legacy: bool = False
) -> bool:
    """True if the matches tile all `length` positions with no gaps."""
    return covered_span(matches, legacy=legacy) == length
