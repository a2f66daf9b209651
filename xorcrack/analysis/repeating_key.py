"""
Repeating-key XOR breaker.

Pipeline:
1. Estimate the key length and its block partition
2. Transpose the blocks into one stream per key position
3. Break every stream as single-byte XOR (independent, optionally threaded)
4. Un-transpose the decoded streams and trim the block padding
"""

import logging
from dataclasses import replace
from concurrent.futures import ThreadPoolExecutor
from typing import List, Optional

from xorcrack.analysis.blocking import transpose_blocks, untranspose_streams
from xorcrack.analysis.key_length import KeyLengthEstimator
from xorcrack.analysis.single_byte import SingleByteBreaker
from xorcrack.config import BreakerConfig
from xorcrack.error_handling import EmptyInputError, ErrorContext
from xorcrack.models import SingleByteResult, Solution

logger = logging.getLogger(__name__)


class RepeatingKeyBreaker:
    """
    Recovers the key and plaintext of repeating-key XOR ciphertext.

    Key positions are solved independently, so with workers > 1 they are
    fanned out to a thread pool. Results are collected in key-position
    order and are identical to a sequential run.
    """

    def __init__(self, config: Optional[BreakerConfig] = None, **overrides):
        """
        Initialize the breaker.

        Args:
            config: Breaker configuration (defaults to BreakerConfig())
            **overrides: BreakerConfig fields that replace those of config
        """
        config = config or BreakerConfig()
        self.config = replace(config, **overrides) if overrides else config
        self.estimator = KeyLengthEstimator(self.config.sample_count)
        self.single_byte = SingleByteBreaker(self.config.key_range)

    def break_ciphertext(self, ciphertext: bytes, min_length: Optional[int] = None,
                         max_length: Optional[int] = None) -> Solution:
        """
        Break repeating-key XOR.

        Args:
            ciphertext: Raw ciphertext bytes
            min_length: Override of config.min_key_length
            max_length: Override of config.max_key_length

        Returns:
            Solution with the key and the plaintext trimmed to len(ciphertext)

        Raises:
            EmptyInputError: If ciphertext is empty
            InvalidRangeError: If the key length range is empty or inverted
        """
        if not ciphertext:
            raise EmptyInputError(
                "Cannot break empty ciphertext",
                context=ErrorContext(function="RepeatingKeyBreaker.break_ciphertext", input_length=0),
            )

        min_length = self.config.min_key_length if min_length is None else min_length
        max_length = self.config.max_key_length if max_length is None else max_length

        estimate = self.estimator.estimate(ciphertext, min_length, max_length)
        streams = transpose_blocks(estimate.blocks)
        results = self._break_streams(streams)

        key = bytes(result.key for result in results)
        blocks = untranspose_streams([result.plaintext for result in results])
        plaintext = b''.join(blocks)[:len(ciphertext)]
        score = sum(result.score for result in results)

        logger.info(f"Recovered {len(key)}-byte key {key!r}")
        return Solution(
            key=key,
            plaintext=plaintext,
            key_length=estimate.length,
            score=score,
            estimate=estimate,
        )

    def _break_streams(self, streams: List[bytes]) -> List[SingleByteResult]:
        """Solve every key position, preserving position order."""
        workers = min(self.config.workers, len(streams))
        if workers <= 1:
            results = [self.single_byte.break_stream(stream) for stream in streams]
        else:
            logger.debug(f"Solving {len(streams)} key positions with {workers} threads")
            with ThreadPoolExecutor(max_workers=workers) as executor:
                results = list(executor.map(self.single_byte.break_stream, streams))

        for position, result in enumerate(results):
            logger.debug(f"Key position {position}: 0x{result.key:02x} (score {result.score:.2f})")
        return results
