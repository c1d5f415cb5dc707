# src/matchers/matching_orchestrator.py

from collections import Counter
from typing import List
from loguru import logger

from src.config import MAX_TEXT_LENGTH
from src.models import AnalysisResult, BusinessMatch, MatchType
from src.matchers.claimed_spans import ClaimedSpans
from src.matchers.exact_matcher import find_exact_matches
from src.matchers.fuzzy_matcher import find_fuzzy_matches
from src.matchers.partial_matcher import find_partial_matches
from src.matchers.similarity import round_half_up


def analyze(text: str, business_name: str) -> AnalysisResult:
    """
    Determine whether, where and how confidently a business is mentioned in a text.

    The exact, fuzzy and partial passes run in that order over one shared set of
    claimed spans, so no two reported matches overlap and stricter passes win.

    Args:
        text (str): Free-form text, typically an AI chatbot's answer.
        business_name (str): Business to look for.

    Returns:
        AnalysisResult: Matches sorted by position plus aggregate statistics.
            Empty inputs give an empty result rather than an error.
    """
    if not business_name or not business_name.strip() or not text:
        return AnalysisResult(business_name=business_name)

    if MAX_TEXT_LENGTH and len(text) > MAX_TEXT_LENGTH:
        logger.warning(
            f"Text for '{business_name}' is {len(text)} characters; analysing the first {MAX_TEXT_LENGTH}"
        )
        text = text[:MAX_TEXT_LENGTH]

    claimed = ClaimedSpans()
    matches: List[BusinessMatch] = []
    matches.extend(find_exact_matches(text, business_name, claimed))
    matches.extend(find_fuzzy_matches(text, business_name, claimed))
    matches.extend(find_partial_matches(text, business_name, claimed))

    return summarize_matches(business_name, matches)


def summarize_matches(business_name: str, matches: List[BusinessMatch]) -> AnalysisResult:
    """Order matches by position and compute the aggregate statistics."""
    ordered = sorted(matches, key=lambda m: m.character_position)
    if not ordered:
        return AnalysisResult(business_name=business_name)

    counts = Counter(m.match_type for m in ordered)
    average = sum(m.confidence for m in ordered) / len(ordered)

    return AnalysisResult(
        business_name=business_name,
        matches=tuple(ordered),
        total_matches=len(ordered),
        # max() keeps the first of equal confidences
        highest_confidence_match=max(ordered, key=lambda m: m.confidence),
        average_confidence=round_half_up(average),
        match_type_counts={t: counts.get(t, 0) for t in MatchType},
    )


analyze_business_presence = analyze
