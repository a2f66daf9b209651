"""Tests for the repeating-key XOR breaker"""
import pytest

from xorcrack.analysis.repeating_key import RepeatingKeyBreaker
from xorcrack.config import BreakerConfig
from xorcrack.error_handling import ConfigurationError, EmptyInputError, InvalidRangeError
from xorcrack.utils.xor_tools import repeating_key_xor
from tests.conftest import ENGLISH_TEXT, HIGH_ENTROPY_KEY, ICE_KEY, ICE_PLAINTEXT


@pytest.mark.parametrize("min_length,max_length", [(3, 3), (2, 3), (2, 4), (2, 6), (3, 5), (1, 10), (2, 40)])
def test_breaks_ice_vector(ice_ciphertext, min_length, max_length):
    solution = RepeatingKeyBreaker().break_ciphertext(ice_ciphertext, min_length, max_length)

    assert solution.key == ICE_KEY
    assert solution.key_length == 3
    assert solution.plaintext == ICE_PLAINTEXT


def test_round_trip_with_length_search(seven_byte_key_ciphertext):
    plaintext, key, ciphertext = seven_byte_key_ciphertext
    solution = RepeatingKeyBreaker(BreakerConfig(min_key_length=2, max_key_length=9)).break_ciphertext(ciphertext)

    assert solution.key == key
    assert solution.plaintext == plaintext
    assert solution.estimate.length == len(key)


def test_padding_is_trimmed():
    plaintext = ENGLISH_TEXT[:773]
    ciphertext = repeating_key_xor(plaintext, HIGH_ENTROPY_KEY)
    solution = RepeatingKeyBreaker().break_ciphertext(ciphertext, 7, 7)

    assert len(solution.plaintext) == len(ciphertext)
    assert solution.plaintext == plaintext
    assert solution.key == HIGH_ENTROPY_KEY


def test_threaded_run_matches_sequential(seven_byte_key_ciphertext):
    _, _, ciphertext = seven_byte_key_ciphertext
    sequential = RepeatingKeyBreaker(min_key_length=2, max_key_length=9).break_ciphertext(ciphertext)
    threaded = RepeatingKeyBreaker(min_key_length=2, max_key_length=9, workers=4).break_ciphertext(ciphertext)

    assert threaded.key == sequential.key
    assert threaded.plaintext == sequential.plaintext
    assert threaded.score == sequential.score


def test_deterministic(ice_ciphertext):
    breaker = RepeatingKeyBreaker(min_key_length=2, max_key_length=6)
    first = breaker.break_ciphertext(ice_ciphertext)
    second = breaker.break_ciphertext(ice_ciphertext)

    assert first.key == second.key
    assert first.plaintext == second.plaintext
    assert first.key_length == second.key_length
    assert first.key == ICE_KEY


def test_overrides_replace_config_fields():
    breaker = RepeatingKeyBreaker(BreakerConfig(sample_count=4), max_key_length=12)
    assert breaker.config.sample_count == 4
    assert breaker.config.max_key_length == 12
    assert breaker.estimator.sample_count == 4


def test_invalid_override_is_rejected():
    with pytest.raises(ConfigurationError):
        RepeatingKeyBreaker(workers=0)


def test_empty_ciphertext():
    with pytest.raises(EmptyInputError):
        RepeatingKeyBreaker().break_ciphertext(b"")


def test_inverted_range():
    with pytest.raises(InvalidRangeError):
        RepeatingKeyBreaker().break_ciphertext(b"\x01\x02\x03", 5, 2)


def test_solution_score_sums_positions(ice_ciphertext):
    solution = RepeatingKeyBreaker().break_ciphertext(ice_ciphertext, 3, 3)
    assert solution.score > 0
    assert "ICE" in str(solution)
