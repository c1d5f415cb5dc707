import re
from typing import List
from loguru import logger

from src.config import FUZZY_THRESHOLD
from src.models import BusinessMatch, MatchType
from src.matchers.claimed_spans import ClaimedSpans, build_match
from src.matchers.name_variations import (
    extract_meaningful_words,
    generate_name_variations,
    strip_corporate_suffix,
    whole_word_pattern,
)
from src.matchers.similarity import round_half_up, similarity

CASE_INSENSITIVE_EQUAL_CONFIDENCE = 95
SUFFIX_STRIPPED_EQUAL_CONFIDENCE = 90


def _similarity_score(business_name: str, candidate: str) -> int:
    return round_half_up(100 * similarity(business_name, candidate))


def fuzzy_confidence(business_name: str, candidate: str) -> int:
    """
    Score a variation hit against the full business name.

    Args:
        business_name (str): The queried name, e.g. "McDonald's Corporation".
        candidate (str): Text found in the response, e.g. "McDonald's".

    Returns:
        int: 95 for a case-insensitive equal, 90 for an equal once the corporate
            suffix is dropped, otherwise the similarity percentage floored at 70.
    """
    if candidate.lower() == business_name.lower():
        return CASE_INSENSITIVE_EQUAL_CONFIDENCE
    if candidate.lower() == strip_corporate_suffix(business_name).lower():
        return SUFFIX_STRIPPED_EQUAL_CONFIDENCE
    return max(FUZZY_THRESHOLD, _similarity_score(business_name, candidate))


def _left_for_partial_pass(text: str, start: int, end: int, candidate: str, word_patterns: dict) -> bool:
    """True when the hit is a whole-word occurrence of one of the name's meaningful words."""
    pattern = word_patterns.get(candidate.lower())
    if pattern is None:
        return False
    m = pattern.match(text, start)
    return m is not None and m.end() == end


def find_fuzzy_matches(text: str, business_name: str, claimed: ClaimedSpans) -> List[BusinessMatch]:
    """
    Search for spelling variations of the name (suffix dropped, spacing changed,
    single words of a two-word name) outside spans already claimed.
    """
    matches: List[BusinessMatch] = []
    word_patterns = {w.lower(): whole_word_pattern(w) for w in extract_meaningful_words(business_name)}

    for variation in generate_name_variations(business_name):
        pattern = re.compile(re.escape(variation), re.IGNORECASE)
        for m in pattern.finditer(text):
            if claimed.overlaps(m.start(), m.end()):
                continue

            candidate = m.group(0)
            confidence = fuzzy_confidence(business_name, candidate)
            # A floored score for a standalone brand word ("Chase" for "JPMorgan Chase")
            # is scored by the partial pass instead.
            if (
                confidence == FUZZY_THRESHOLD
                and _similarity_score(business_name, candidate) < FUZZY_THRESHOLD
                and _left_for_partial_pass(text, m.start(), m.end(), candidate, word_patterns)
            ):
                continue

            claimed.claim(m.start(), m.end())
            matches.append(build_match(text, m.start(), candidate, confidence, MatchType.FUZZY))

    logger.debug(f"Fuzzy pass for '{business_name}': {len(matches)} match(es)")
    return matches
