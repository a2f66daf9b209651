"""
Single-byte XOR brute force.

Every key byte in the configured sweep is tried; the one whose decryption
has the lowest English score wins. Scores are not monotonic in the key
value, so the sweep never stops early.
"""

import logging
from typing import Iterable, Optional, Tuple

from xorcrack.analysis.english import english_score
from xorcrack.config import FULL_KEY_RANGE, validate_key_range
from xorcrack.error_handling import EmptyInputError, ErrorContext
from xorcrack.models import DetectionResult, SingleByteResult
from xorcrack.utils.xor_tools import single_byte_xor

logger = logging.getLogger(__name__)


class SingleByteBreaker:
    """
    Recovers the key of a stream XORed with one repeated byte.

    Features:
    - Exhaustive sweep of an inclusive key byte range (default 0x00-0xFF)
    - Chi-square-like English scoring of each candidate plaintext
    - First-found key wins ties
    """

    def __init__(self, key_range: Tuple[int, int] = FULL_KEY_RANGE):
        """
        Initialize the breaker.

        Args:
            key_range: Inclusive (low, high) bounds of the key sweep
        """
        validate_key_range(key_range)
        self.key_range = tuple(key_range)

    def break_stream(self, stream: bytes) -> SingleByteResult:
        """
        Find the single key byte that makes stream most English-like.

        Args:
            stream: Bytes all encrypted with the same key byte

        Returns:
            SingleByteResult with the key, decoded stream and its score

        Raises:
            EmptyInputError: If stream is empty
        """
        if not stream:
            raise EmptyInputError(
                "Cannot brute force a single-byte key for an empty stream",
                context=ErrorContext(function="SingleByteBreaker.break_stream", input_length=0),
            )

        low, high = self.key_range
        best: Optional[SingleByteResult] = None
        for key in range(low, high + 1):
            plaintext = single_byte_xor(stream, key)
            score = english_score(plaintext)
            if best is None or score < best.score:
                best = SingleByteResult(key=key, plaintext=plaintext, score=score)

        logger.debug(f"Best single-byte key 0x{best.key:02x} (score {best.score:.2f}) for {len(stream)} bytes")
        return best


def detect_single_byte_xor(ciphertexts: Iterable[bytes], key_range: Tuple[int, int] = FULL_KEY_RANGE) -> DetectionResult:
    """
    Find which of many ciphertexts was encrypted with a single-byte key.

    Each ciphertext is broken independently; the one whose best decryption
    scores lowest wins, first found on ties. Empty ciphertexts are skipped.

    Args:
        ciphertexts: Candidate ciphertexts, e.g. one per input line
        key_range: Inclusive key sweep passed to SingleByteBreaker

    Returns:
        DetectionResult naming the winning index, ciphertext and decryption

    Raises:
        EmptyInputError: If no non-empty ciphertext was given
    """
    breaker = SingleByteBreaker(key_range)
    best: Optional[DetectionResult] = None

    for index, ciphertext in enumerate(ciphertexts):
        if not ciphertext:
            continue
        result = breaker.break_stream(ciphertext)
        if best is None or result.score < best.result.score:
            best = DetectionResult(index=index, ciphertext=bytes(ciphertext), result=result)

    if best is None:
        raise EmptyInputError(
            "No non-empty ciphertexts to search",
            context=ErrorContext(function="detect_single_byte_xor"),
        )

    logger.info(f"Ciphertext {best.index} decrypts best with key 0x{best.result.key:02x}")
    return best
