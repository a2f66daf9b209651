"""
XOR Primitives and Ciphertext Codecs

Provides utilities for:
- Repeating-key XOR encryption/decryption
- Single-byte and fixed-length XOR
- Hex and base64 decoding of ciphertext text
"""

import base64
import binascii
from typing import Union

from xorcrack.error_handling import (
    DecodingError,
    EmptyInputError,
    ErrorContext,
    LengthMismatchError,
    create_error,
)


ENCODINGS = ('raw', 'hex', 'base64')


def repeating_key_xor(data: bytes, key: bytes) -> bytes:
    """
    XOR data with key, cycling the key over the whole buffer.

    Encryption and decryption are the same operation. The output always
    has the length of data.

    Raises:
        EmptyInputError: If key is empty
    """
    if not key:
        raise EmptyInputError(
            "Repeating-key XOR needs a non-empty key",
            context=ErrorContext(function="repeating_key_xor", input_length=len(data)),
        )
    key_length = len(key)
    return bytes(byte ^ key[i % key_length] for i, byte in enumerate(data))


def single_byte_xor(data: bytes, key: int) -> bytes:
    """XOR every byte of data with one key byte"""
    return bytes(byte ^ key for byte in data)


def fixed_xor(a: bytes, b: bytes) -> bytes:
    """
    XOR two equal-length buffers.

    Raises:
        LengthMismatchError: If the buffers have different lengths
    """
    if len(a) != len(b):
        raise LengthMismatchError(
            f"Fixed XOR needs equal-length buffers ({len(a)} != {len(b)})",
            context=ErrorContext(
                function="fixed_xor",
                additional_info={"left_length": len(a), "right_length": len(b)},
            ),
        )
    return bytes(x ^ y for x, y in zip(a, b))


def _as_text(data: Union[str, bytes]) -> str:
    if isinstance(data, bytes):
        return data.decode('ascii', errors='replace')
    return data


def hex_to_bytes(text: Union[str, bytes]) -> bytes:
    """
    Decode hex text; whitespace between byte pairs is ignored.

    Raises:
        DecodingError: If text is not valid hex
    """
    try:
        return bytes.fromhex(_as_text(text).strip())
    except ValueError as e:
        raise create_error("invalid_hex", error_cls=DecodingError, reason=e) from e


def base64_to_bytes(text: Union[str, bytes]) -> bytes:
    """
    Decode base64 text, tolerating line wrapping.

    Raises:
        DecodingError: If text is not valid base64
    """
    compact = ''.join(_as_text(text).split())
    try:
        return base64.b64decode(compact, validate=True)
    except (binascii.Error, ValueError) as e:
        raise create_error("invalid_base64", error_cls=DecodingError, reason=e) from e


def hex_to_base64(text: Union[str, bytes]) -> str:
    """Re-encode hex text as base64"""
    return base64.b64encode(hex_to_bytes(text)).decode('ascii')


def decode_ciphertext(data: Union[str, bytes], encoding: str = 'base64') -> bytes:
    """
    Turn ciphertext as read from a file or stdin into raw bytes.

    Args:
        data: Encoded ciphertext
        encoding: One of 'raw', 'hex' or 'base64'

    Returns:
        Raw ciphertext bytes

    Raises:
        DecodingError: If data is not valid for encoding, or encoding is unknown
    """
    if encoding == 'raw':
        return data.encode('utf-8') if isinstance(data, str) else bytes(data)
    if encoding == 'hex':
        return hex_to_bytes(data)
    if encoding == 'base64':
        return base64_to_bytes(data)
    raise create_error("unknown_encoding", error_cls=DecodingError, encoding=encoding)
