"""Breaker configuration"""
from dataclasses import dataclass
from typing import Tuple

from xorcrack.error_handling import ConfigurationError, ErrorContext, InvalidRangeError


# Inclusive bounds of the single-byte key sweep
FULL_KEY_RANGE: Tuple[int, int] = (0x00, 0xFF)
# Printable-text keys only; skips 0x00 and the upper half of the byte range
REFERENCE_KEY_RANGE: Tuple[int, int] = (0x01, 0x80)

DEFAULT_MIN_KEY_LENGTH = 2
DEFAULT_MAX_KEY_LENGTH = 40
DEFAULT_SAMPLE_COUNT = 10


def validate_length_range(min_length: int, max_length: int):
    """
    Check an inclusive key length search range.

    Raises:
        InvalidRangeError: If min_length < 1 or max_length < min_length
    """
    if min_length < 1 or max_length < min_length:
        raise InvalidRangeError(
            f"Invalid key length range [{min_length}, {max_length}]",
            context=ErrorContext(
                operation="key length estimation",
                additional_info={"min_key_length": min_length, "max_key_length": max_length},
            ),
            suggestion="Use 1 <= min_key_length <= max_key_length.",
        )


def validate_key_range(key_range: Tuple[int, int]):
    """
    Check an inclusive single-byte key sweep range.

    Raises:
        InvalidRangeError: If a bound falls outside 0..255 or the range is inverted
    """
    low, high = key_range
    if not (0 <= low <= 0xFF and 0 <= high <= 0xFF) or high < low:
        raise InvalidRangeError(
            f"Invalid key byte range {low:#04x}-{high:#04x}",
            context=ErrorContext(operation="single-byte key sweep"),
            suggestion="Use bounds in 0..255 with low <= high.",
        )


@dataclass(frozen=True)
class BreakerConfig:
    """
    Tunable parameters of the repeating-key XOR breaker.

    Attributes:
        min_key_length: Smallest key length to consider
        max_key_length: Largest key length to consider (inclusive)
        sample_count: Number of block pairs sampled per candidate length
        key_range: Inclusive (low, high) bounds of the single-byte key sweep
        workers: Thread pool size for solving key positions (1 = sequential)
    """
    min_key_length: int = DEFAULT_MIN_KEY_LENGTH
    max_key_length: int = DEFAULT_MAX_KEY_LENGTH
    sample_count: int = DEFAULT_SAMPLE_COUNT
    key_range: Tuple[int, int] = FULL_KEY_RANGE
    workers: int = 1

    def __post_init__(self):
        self.validate()

    def validate(self):
        """
        Validate every field.

        Raises:
            InvalidRangeError: For an empty or inverted length or key range
            ConfigurationError: For a non-positive sample count or worker count
        """
        validate_length_range(self.min_key_length, self.max_key_length)
        validate_key_range(self.key_range)
        if self.sample_count < 1:
            raise ConfigurationError(
                f"sample_count must be positive, got {self.sample_count}",
                suggestion="The default of 10 sampled block pairs works well for English text.",
            )
        if self.workers < 1:
            raise ConfigurationError(f"workers must be positive, got {self.workers}")
