import re
from typing import List

# Trailing corporate designator, optionally followed by a period
CORPORATE_SUFFIX = re.compile(
    r"\s+(Inc|LLC|Corp|Corporation|Company|Co|Ltd|Limited|Group|Services|Systems|Solutions)\.?\Z",
    re.IGNORECASE,
)

GENERIC_WORDS = frozenset({
    "the", "and", "a", "an", "of", "in", "on", "at", "to", "for", "with", "by", "from",
    "bank", "company", "corporation", "inc", "llc", "group", "services", "systems",
    "solutions", "business", "enterprise", "enterprises", "international", "global",
    "co", "corp", "ltd", "limited", "usa", "america", "united", "states",
})

MIN_VARIATION_LENGTH = 3
MIN_WORD_LENGTH = 3

_CAMEL_CASE = re.compile(r"^[A-Z][a-z]*[A-Z]")
_ACRONYM = re.compile(r"^[A-Z]{2,}$")
_NUMBER = re.compile(r"[0-9]+")


def strip_corporate_suffix(business_name: str) -> str:
    """Drop one trailing corporate suffix such as 'Inc.' or 'Corporation'."""
    return CORPORATE_SUFFIX.sub("", business_name).strip()


def generate_name_variations(business_name: str) -> List[str]:
    """
    Build the alternative spellings searched for by the fuzzy pass.

    For "JPMorgan Chase" this yields
    ["JPMorganChase", "JPMorgan-Chase", "JPMorgan_Chase", "JPMorgan", "Chase"].

    Args:
        business_name (str): Name as supplied by the caller.

    Returns:
        List[str]: Unique variations in search order, none shorter than three characters.
    """
    variations: List[str] = []

    without_suffix = strip_corporate_suffix(business_name)
    if without_suffix != business_name:
        variations.append(without_suffix)

    # Spacing variations
    variations.append(re.sub(r"\s+", "", business_name))
    variations.append(re.sub(r"\s+", "-", business_name))
    variations.append(re.sub(r"\s+", "_", business_name))

    # Two-word names: each word on its own
    words = business_name.split()
    if len(words) == 2:
        variations.extend(words)

    unique = dict.fromkeys(v for v in variations if len(v) >= MIN_VARIATION_LENGTH)
    return list(unique)


def extract_meaningful_words(business_name: str) -> List[str]:
    """
    Pick out the brand-bearing words of a name.

    Generic words, short tokens and bare numbers are dropped; the survivors
    come back capitalised ("jpmorgan" -> "Jpmorgan").
    """
    words = []
    for token in business_name.lower().split():
        if len(token) < MIN_WORD_LENGTH or token in GENERIC_WORDS or _NUMBER.fullmatch(token):
            continue
        word = token[0].upper() + token[1:]
        if word not in words:
            words.append(word)
    return words


def looks_like_brand(word: str) -> bool:
    return (
        len(word) >= 5
        or bool(_CAMEL_CASE.match(word))
        or "'" in word
        or bool(_ACRONYM.match(word))
    )


def whole_word_pattern(word: str) -> re.Pattern:
    """Case-insensitive pattern matching `word` only between word boundaries."""
    return re.compile(rf"\b{re.escape(word)}\b", re.IGNORECASE)
