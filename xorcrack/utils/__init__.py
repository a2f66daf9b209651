"""XOR primitives and ciphertext codecs"""

from .xor_tools import (
    repeating_key_xor,
    single_byte_xor,
    fixed_xor,
    hex_to_bytes,
    base64_to_bytes,
    hex_to_base64,
    decode_ciphertext,
    ENCODINGS,
)

__all__ = [
    'repeating_key_xor',
    'single_byte_xor',
    'fixed_xor',
    'hex_to_bytes',
    'base64_to_bytes',
    'hex_to_base64',
    'decode_ciphertext',
    'ENCODINGS',
]
