import math
from rapidfuzz.distance import Levenshtein


def similarity(a: str, b: str) -> float:
    """
    Case-insensitive edit-distance similarity.

    Args:
        a (str): First string.
        b (str): Second string.

    Returns:
        float: 1 - (Levenshtein distance / length of the longer string), in [0, 1].
    """
    a, b = a.lower(), b.lower()
    if not a and not b:
        return 1.0
    return Levenshtein.normalized_similarity(a, b)


def round_half_up(value: float) -> int:
    """Round halves upwards (2.5 -> 3), unlike the builtin round()."""
    return int(math.floor(value + 0.5))
