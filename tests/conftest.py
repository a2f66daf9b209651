"""Shared fixtures for the XORCrack test suite"""
import pytest

from xorcrack.utils.xor_tools import repeating_key_xor


# Lowercase English prose used as known plaintext
ENGLISH_TEXT = (
    "the old lighthouse keeper had lived on the island for most of his life, "
    "and in all that time he had never once let the lamp go dark. every eveni"
    "ng he climbed the narrow stairs with a can of oil in one hand and a clot"
    "h in the other, polishing the great lens until it shone like the surface"
    " of a still pond. the fishermen in the village across the water said tha"
    "t they could set their clocks by the moment the beam first swept over th"
    "e harbour. when the storms came in the autumn he would sit beside the wi"
    "ndow with a cup of tea and watch the waves break against the rocks below"
    ", counting the seconds between the flashes of lightning and the roll of "
    "the thunder. he kept a small notebook in which he wrote down the weather"
    " each day, the ships that passed, and the birds that rested on the raili"
    "ng of the gallery. over the years the notebook became a shelf of noteboo"
    "ks, and the shelf became a whole wall of them, their spines faded by the"
    " salt air and the sun. a young woman from the university came one summer"
    " to read them, because she wanted to learn how the climate of the coast "
    "had changed over the course of a lifetime. she stayed for three weeks, s"
    "leeping in the spare room and eating supper with the keeper each night, "
    "and by the time she left she had filled her own notebook with numbers an"
    "d tables and careful little drawings of the clouds.").encode('ascii')

ICE_PLAINTEXT = b"Burning 'em, if you ain't quick and nimble\nI go crazy when I hear a cymbal"
ICE_KEY = b"ICE"
ICE_CIPHERTEXT_HEX = (
    "0b3637272a2b2e63622c2e69692a23693a2a3c6324202d623d63343c2a26226324272765272a282b2f20430a652e2c652a3124333a653e2b2027630c692b20283165286326302e27282f"
)

# Key bytes spread across the whole byte range
HIGH_ENTROPY_KEY = bytes([0x9f, 0x13, 0xc4, 0x5a, 0xe7, 0x28, 0x71])


@pytest.fixture
def english_text() -> bytes:
    return ENGLISH_TEXT


@pytest.fixture
def ice_ciphertext() -> bytes:
    return bytes.fromhex(ICE_CIPHERTEXT_HEX)


@pytest.fixture
def seven_byte_key_ciphertext():
    """770 bytes of prose (a multiple of the key length) under a 7-byte key"""
    plaintext = ENGLISH_TEXT[:770]
    return plaintext, HIGH_ENTROPY_KEY, repeating_key_xor(plaintext, HIGH_ENTROPY_KEY)
