"""
Key length estimation for repeating-key XOR.

Blocks encrypted under the same key bytes differ, bit for bit, about as
much as the underlying plaintext blocks do, which for English is far less
than random data. The key length whose blocks are most similar to each
other, normalized per byte, is the most likely one.
"""

import logging
from typing import List, Optional, Sequence, Tuple

from xorcrack.analysis.blocking import split_blocks
from xorcrack.analysis.hamming import hamming_distance
from xorcrack.config import DEFAULT_SAMPLE_COUNT, validate_length_range
from xorcrack.error_handling import ConfigurationError, EmptyInputError, ErrorContext
from xorcrack.models import KeyLengthCandidate, KeyLengthEstimate

logger = logging.getLogger(__name__)


def sample_pairs(block_count: int, sample_count: int) -> List[Tuple[int, int]]:
    """
    Deterministic, evenly spaced block index pairs.

    For i in 1..sample_count the pair is (i*spread mod n, (i+1)*spread mod n)
    with spread = n // sample_count, raised to 1 when there are fewer blocks
    than samples so neighbouring blocks are still compared. A single block
    pairs with itself.
    """
    spread = max(block_count // sample_count, 1)
    return [((i * spread) % block_count, ((i + 1) * spread) % block_count)
            for i in range(1, sample_count + 1)]


def average_distance(blocks: Sequence[bytes], sample_count: int = DEFAULT_SAMPLE_COUNT) -> float:
    """
    Mean Hamming distance over sample_count strided block pairs.

    Args:
        blocks: Equal-length blocks of one partition
        sample_count: Number of pairs to sample

    Returns:
        Average number of differing bits per sampled pair
    """
    if not blocks:
        return 0.0
    pairs = sample_pairs(len(blocks), sample_count)
    total = sum(hamming_distance(blocks[first], blocks[second]) for first, second in pairs)
    return total / len(pairs)


class KeyLengthEstimator:
    """
    Ranks candidate key lengths by normalized average Hamming distance.

    Candidates are examined from shortest to longest; a later candidate
    only replaces the current best when its score is strictly lower.
    """

    def __init__(self, sample_count: int = DEFAULT_SAMPLE_COUNT):
        """
        Initialize the estimator.

        Args:
            sample_count: Block pairs sampled per candidate length
        """
        if sample_count < 1:
            raise ConfigurationError(f"sample_count must be positive, got {sample_count}")
        self.sample_count = sample_count

    def estimate(self, ciphertext: bytes, min_length: int, max_length: int) -> KeyLengthEstimate:
        """
        Pick the most likely key length in [min_length, max_length].

        Args:
            ciphertext: Raw ciphertext bytes
            min_length: Smallest candidate length
            max_length: Largest candidate length (inclusive)

        Returns:
            KeyLengthEstimate with the chosen length, its block partition and
            every evaluated candidate

        Raises:
            InvalidRangeError: If min_length < 1 or max_length < min_length
            EmptyInputError: If ciphertext is empty
        """
        validate_length_range(min_length, max_length)
        if not ciphertext:
            raise EmptyInputError(
                "Cannot estimate a key length for empty ciphertext",
                context=ErrorContext(function="KeyLengthEstimator.estimate", input_length=0),
            )

        candidates: List[KeyLengthCandidate] = []
        best: Optional[KeyLengthCandidate] = None
        best_blocks: List[bytes] = []

        for length in range(min_length, max_length + 1):
            blocks = split_blocks(ciphertext, length)
            candidate = KeyLengthCandidate(length, average_distance(blocks, self.sample_count) / length)
            candidates.append(candidate)
            logger.debug(f"Key length {length}: {len(blocks)} blocks, normalized distance {candidate.score:.4f}")

            if best is None or candidate.score < best.score:
                best = candidate
                best_blocks = blocks

        if len(best_blocks) < 2:
            logger.debug(f"Key length {best.length} leaves fewer than two blocks; estimate is unreliable")
        logger.info(f"Selected key length {best.length} (normalized distance {best.score:.4f})")
        return KeyLengthEstimate(length=best.length, blocks=best_blocks, candidates=candidates)

    def rank(self, ciphertext: bytes, min_length: int, max_length: int, top_n: Optional[int] = None) -> List[KeyLengthCandidate]:
        """
        Candidate key lengths sorted from most to least likely.

        Args:
            ciphertext: Raw ciphertext bytes
            min_length: Smallest candidate length
            max_length: Largest candidate length (inclusive)
            top_n: Truncate to the best top_n candidates

        Returns:
            List of KeyLengthCandidate, lowest score first
        """
        ranked = self.estimate(ciphertext, min_length, max_length).ranked()
        return ranked if top_n is None else ranked[:top_n]
