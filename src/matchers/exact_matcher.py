import re
from typing import List
from loguru import logger

from src.config import EXACT_CONFIDENCE
from src.models import BusinessMatch, MatchType
from src.matchers.claimed_spans import ClaimedSpans, build_match


def find_exact_matches(text: str, business_name: str, claimed: ClaimedSpans) -> List[BusinessMatch]:
    """
    Find every case-insensitive literal occurrence of the business name.

    Args:
        text (str): Text to scan.
        business_name (str): Name to look for; treated literally, never as a pattern.
        claimed (ClaimedSpans): Spans already taken; extended with every match found.

    Returns:
        List[BusinessMatch]: Exact matches, confidence fixed at 100.
    """
    matches: List[BusinessMatch] = []
    pattern = re.compile(re.escape(business_name), re.IGNORECASE)

    for m in pattern.finditer(text):
        if not claimed.claim(m.start(), m.end()):
            continue
        matches.append(build_match(text, m.start(), m.group(0), EXACT_CONFIDENCE, MatchType.EXACT))

    logger.debug(f"Exact pass for '{business_name}': {len(matches)} match(es)")
    return matches
