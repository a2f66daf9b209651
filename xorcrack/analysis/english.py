"""
English letter-frequency scoring.

Scores a byte buffer with a chi-square-like divergence from the expected
distribution of lowercase letters and spaces in English prose. Lower is
more English-like; 0 would be a perfect statistical match.
"""

from collections import Counter
from types import MappingProxyType
from typing import List, Mapping, Tuple


# Relative frequency of each lowercase letter and the space in English text
ENGLISH_FREQUENCIES: Mapping[int, float] = MappingProxyType({
    ord(char): freq for char, freq in {
        ' ': 0.120861, 'e': 0.094498, 't': 0.069873, 'a': 0.060733,
        'o': 0.057409, 'i': 0.054841, 'n': 0.053557, 's': 0.049402,
        'r': 0.046229, 'h': 0.041470, 'l': 0.031273, 'd': 0.030140,
        'c': 0.023115, 'u': 0.020471, 'm': 0.019111, 'f': 0.017374,
        'p': 0.015108, 'g': 0.014805, 'w': 0.014503, 'y': 0.013068,
        'b': 0.011633, 'v': 0.007478, 'k': 0.005061, 'x': 0.001435,
        'j': 0.001209, 'q': 0.000831, 'z': 0.000680,
    }.items()
})

# Expected frequency for punctuation, digits, control and non-ASCII bytes.
# Changing it shifts the ranking between near-tied candidates.
OTHER_BYTE_FREQUENCY = 0.0005

# Added to (observed - expected) for uppercase letters so that case-flipped
# text scores worse than the same text in lowercase
UPPERCASE_PENALTY = 1.0


def _build_byte_model() -> Tuple[Tuple[float, float], ...]:
    """Map every byte value to (expected frequency, difference penalty)."""
    model: List[Tuple[float, float]] = []
    for value in range(256):
        if value in ENGLISH_FREQUENCIES:
            model.append((ENGLISH_FREQUENCIES[value], 0.0))
        elif ord('A') <= value <= ord('Z'):
            model.append((ENGLISH_FREQUENCIES[value + 0x20], UPPERCASE_PENALTY))
        else:
            model.append((OTHER_BYTE_FREQUENCY, 0.0))
    return tuple(model)


BYTE_MODEL = _build_byte_model()


def english_score(data: bytes) -> float:
    """
    Score how far data is from English letter frequencies.

    For each distinct byte observed, expected = frequency * len(data) and
    the term (observed - expected + penalty)^2 / expected is accumulated.
    Uppercase letters use the frequency of their lowercase counterpart plus
    a penalty of 1; every other byte outside the table uses a small flat
    frequency so the expected count is never zero.

    Args:
        data: Candidate plaintext

    Returns:
        Non-negative divergence; 0.0 for empty input
    """
    length = len(data)
    if not length:
        return 0.0

    score = 0.0
    model = BYTE_MODEL
    for value, observed in Counter(data).items():
        frequency, penalty = model[value]
        expected = frequency * length
        difference = observed - expected + penalty
        score += difference * difference / expected
    return score
