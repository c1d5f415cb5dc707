"""
Span bookkeeping shared by the exact, fuzzy and partial passes.

Each pass consults the same ClaimedSpans before recording a match and claims
the span of every match it keeps, so earlier (stricter) passes win overlaps.
"""
from bisect import bisect_left, insort
from typing import List, Tuple

from src.config import CONTEXT_WINDOW
from src.models import BusinessMatch, MatchType


class ClaimedSpans:
    """Ordered set of disjoint half-open [start, end) intervals."""

    def __init__(self):
        self._spans: List[Tuple[int, int]] = []

    def __len__(self) -> int:
        return len(self._spans)

    def overlaps(self, start: int, end: int) -> bool:
        idx = bisect_left(self._spans, (start, end))
        # Only the neighbours on either side can intersect a disjoint ordered set
        if idx > 0 and self._spans[idx - 1][1] > start:
            return True
        if idx < len(self._spans) and self._spans[idx][0] < end:
            return True
        return False

    def claim(self, start: int, end: int) -> bool:
        """Record a span. Returns False (and records nothing) if it overlaps an existing one."""
        if self.overlaps(start, end):
            return False
        insort(self._spans, (start, end))
        return True


def line_number_at(text: str, position: int) -> int:
    """1-based line on which `position` falls."""
    return text.count("\n", 0, position) + 1


def context_around(text: str, start: int, end: int, window: int = CONTEXT_WINDOW) -> Tuple[str, str]:
    """Up to `window` characters either side of [start, end), clipped to the text."""
    return text[max(0, start - window):start], text[end:end + window]


def build_match(
    text: str,
    start: int,
    matched_text: str,
    confidence: int,
    match_type: MatchType,
) -> BusinessMatch:
    """Create a BusinessMatch with its line number and surrounding context filled in."""
    end = start + len(matched_text)
    before, after = context_around(text, start, end)
    return BusinessMatch(
        matched_text=matched_text,
        line_number=line_number_at(text, start),
        character_position=start,
        confidence=confidence,
        match_type=match_type,
        context_before=before,
        context_after=after,
    )
