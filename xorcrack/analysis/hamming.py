"""
Bitwise Hamming distance between byte sequences.

This is the innermost loop of key length estimation, so the population
count of every XOR byte comes from a precomputed 256-entry table.
"""

from typing import List

from xorcrack.error_handling import ErrorContext, LengthMismatchError


# POPCOUNT[b] == number of set bits in byte b
POPCOUNT: List[int] = [bin(value).count('1') for value in range(256)]


def hamming_distance(a: bytes, b: bytes) -> int:
    """
    Count the bit positions that differ between two equal-length buffers.

    Args:
        a: First byte sequence
        b: Second byte sequence

    Returns:
        Number of differing bits, in [0, 8 * len(a)]

    Raises:
        LengthMismatchError: If the buffers have different lengths
    """
    if len(a) != len(b):
        raise LengthMismatchError(
            f"Cannot compare buffers of different lengths ({len(a)} != {len(b)})",
            context=ErrorContext(
                function="hamming_distance",
                additional_info={"left_length": len(a), "right_length": len(b)},
            ),
        )
    table = POPCOUNT
    return sum(table[x ^ y] for x, y in zip(a, b))
