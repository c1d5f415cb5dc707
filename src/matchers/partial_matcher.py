from typing import List
from loguru import logger

from src.config import PARTIAL_MAX_CONFIDENCE, PARTIAL_THRESHOLD
from src.models import BusinessMatch, MatchType
from src.matchers.claimed_spans import ClaimedSpans, build_match
from src.matchers.name_variations import extract_meaningful_words, looks_like_brand, whole_word_pattern
from src.matchers.similarity import round_half_up, similarity


def partial_confidence(word: str, matched_text: str, meaningful_word_count: int) -> int:
    """
    Score a single brand word found on its own.

    Args:
        word (str): Meaningful word from the business name, e.g. "Chase".
        matched_text (str): Text found in the response.
        meaningful_word_count (int): How many meaningful words the name has.

    Returns:
        int: Confidence clamped to [60, 95].
    """
    base = 60

    # Longer words are more distinctive
    if len(word) >= 6:
        base += 15
    elif len(word) >= 4:
        base += 10

    # The word is effectively the whole brand
    if meaningful_word_count == 1:
        base += 20

    if looks_like_brand(word):
        base += 15

    confidence = round_half_up(base * similarity(word, matched_text))
    return min(PARTIAL_MAX_CONFIDENCE, max(PARTIAL_THRESHOLD, confidence))


def find_partial_matches(text: str, business_name: str, claimed: ClaimedSpans) -> List[BusinessMatch]:
    """
    Search for whole-word occurrences of each meaningful word of the name,
    outside spans already claimed by the exact and fuzzy passes.
    """
    matches: List[BusinessMatch] = []
    words = extract_meaningful_words(business_name)

    for word in words:
        pattern = whole_word_pattern(word)
        for m in pattern.finditer(text):
            if claimed.overlaps(m.start(), m.end()):
                continue

            confidence = partial_confidence(word, m.group(0), len(words))
            if confidence < PARTIAL_THRESHOLD:
                continue

            claimed.claim(m.start(), m.end())
            matches.append(build_match(text, m.start(), m.group(0), confidence, MatchType.PARTIAL))

    logger.debug(f"Partial pass for '{business_name}' over {words}: {len(matches)} match(es)")
    return matches
