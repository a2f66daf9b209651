"""Tests for English letter-frequency scoring"""
import random

from hypothesis import given, settings, strategies as st

from xorcrack.analysis.english import (
    BYTE_MODEL,
    ENGLISH_FREQUENCIES,
    OTHER_BYTE_FREQUENCY,
    english_score,
)
from tests.conftest import ENGLISH_TEXT


def test_empty_buffer_scores_zero():
    assert english_score(b"") == 0.0


def test_frequency_table_covers_letters_and_space():
    expected = {ord(c) for c in "abcdefghijklmnopqrstuvwxyz "}
    assert set(ENGLISH_FREQUENCIES) == expected
    assert all(0.0 < freq < 1.0 for freq in ENGLISH_FREQUENCIES.values())


def test_byte_model_is_total():
    assert len(BYTE_MODEL) == 256
    assert all(frequency > 0 for frequency, _ in BYTE_MODEL)
    assert BYTE_MODEL[ord('A')] == (ENGLISH_FREQUENCIES[ord('a')], 1.0)
    assert BYTE_MODEL[ord('!')] == (OTHER_BYTE_FREQUENCY, 0.0)
    assert BYTE_MODEL[0x00] == (OTHER_BYTE_FREQUENCY, 0.0)


def test_uppercase_scores_worse_than_lowercase():
    assert english_score(b"hello world") < english_score(b"HELLO WORLD")


def test_punctuation_and_control_bytes_do_not_divide_by_zero():
    score = english_score(b"\x00\x01\xff!?,.;")
    assert score > 0


def test_prose_beats_case_flipped_prose():
    prose = ENGLISH_TEXT[:120]
    flipped = bytes(b ^ 0x20 for b in prose)
    assert english_score(prose) < english_score(flipped)


@given(st.binary(max_size=300))
def test_score_is_non_negative(data):
    assert english_score(data) >= 0.0


@settings(max_examples=200)
@given(seed=st.integers(min_value=0, max_value=2**32 - 1),
       start=st.integers(min_value=0, max_value=len(ENGLISH_TEXT) - 200))
def test_prose_scores_lower_than_random_bytes(seed, start):
    prose = ENGLISH_TEXT[start:start + 200]
    rng = random.Random(seed)
    noise = bytes(rng.getrandbits(8) for _ in range(len(prose)))
    assert english_score(prose) < english_score(noise)
