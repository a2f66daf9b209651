"""Tests for single-byte XOR brute force and detection"""
import random

import pytest

from xorcrack.analysis.english import english_score
from xorcrack.analysis.single_byte import SingleByteBreaker, detect_single_byte_xor
from xorcrack.config import REFERENCE_KEY_RANGE
from xorcrack.error_handling import EmptyInputError, InvalidRangeError
from xorcrack.utils.xor_tools import single_byte_xor
from tests.conftest import ENGLISH_TEXT


def test_recovers_classic_single_byte_key():
    ciphertext = bytes.fromhex("1b37373331363f78151b7f2b783431333d78397828372d363c78373e783a393b3736")
    result = SingleByteBreaker().break_stream(ciphertext)

    assert result.key == ord('X')
    assert result.plaintext == b"Cooking MC's like a pound of bacon"
    assert result.score == english_score(result.plaintext)


@pytest.mark.parametrize("key", [0x00, 0x01, 0x42, 0x80, 0xA7, 0xFF])
def test_recovers_key_across_full_range(key):
    plaintext = ENGLISH_TEXT[:150]
    result = SingleByteBreaker().break_stream(single_byte_xor(plaintext, key))

    assert result.key == key
    assert result.plaintext == plaintext


def test_reference_range_cannot_find_high_keys():
    plaintext = ENGLISH_TEXT[:150]
    result = SingleByteBreaker(REFERENCE_KEY_RANGE).break_stream(single_byte_xor(plaintext, 0xA7))

    assert REFERENCE_KEY_RANGE[0] <= result.key <= REFERENCE_KEY_RANGE[1]
    assert result.plaintext != plaintext


def test_single_key_range():
    result = SingleByteBreaker((0x41, 0x41)).break_stream(b"\x00\x01")
    assert result.key == 0x41
    assert result.plaintext == b"A@"


def test_first_key_wins_ties():
    # '1' and '2' both fall back to the flat non-letter frequency
    breaker = SingleByteBreaker((0x01, 0x02))
    result = breaker.break_stream(b"\x30")
    assert english_score(b"\x31") == english_score(b"\x32")
    assert result.key == 0x01


def test_empty_stream():
    with pytest.raises(EmptyInputError):
        SingleByteBreaker().break_stream(b"")


@pytest.mark.parametrize("key_range", [(0x80, 0x01), (-1, 0x10), (0x00, 0x100)])
def test_invalid_key_range(key_range):
    with pytest.raises(InvalidRangeError):
        SingleByteBreaker(key_range)


def test_detects_encrypted_line():
    rng = random.Random(1234)
    lines = [bytes(rng.getrandbits(8) for _ in range(60)) for _ in range(20)]
    secret = ENGLISH_TEXT[200:260]
    lines[13] = single_byte_xor(secret, 0x35)

    detection = detect_single_byte_xor(lines)

    assert detection.index == 13
    assert detection.ciphertext == lines[13]
    assert detection.result.key == 0x35
    assert detection.result.plaintext == secret


def test_detection_skips_empty_lines():
    secret = ENGLISH_TEXT[:60]
    detection = detect_single_byte_xor([b"", single_byte_xor(secret, 0x11), b""])
    assert detection.index == 1


def test_detection_needs_a_ciphertext():
    with pytest.raises(EmptyInputError):
        detect_single_byte_xor([])
    with pytest.raises(EmptyInputError):
        detect_single_byte_xor([b"", b""])
