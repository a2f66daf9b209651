"""Fixed-size blocking and the transpose used to group bytes by key position"""
from typing import List, Sequence

from xorcrack.error_handling import ErrorContext, InvalidBlockSizeError


def split_blocks(data: bytes, block_size: int) -> List[bytes]:
    """
    Split data into blocks of exactly block_size bytes.

    If len(data) is not a multiple of block_size the final block is
    extended with zero bytes. Callers that decrypt those blocks must trim
    the result back to len(data).

    Args:
        data: Buffer to split
        block_size: Length of every block

    Returns:
        List of equal-length blocks (empty for empty data)

    Raises:
        InvalidBlockSizeError: If block_size < 1
    """
    if block_size < 1:
        raise InvalidBlockSizeError(
            f"Block size must be positive, got {block_size}",
            context=ErrorContext(function="split_blocks", input_length=len(data)),
        )

    remainder = len(data) % block_size
    if remainder:
        data = bytes(data) + bytes(block_size - remainder)

    return [bytes(data[start:start + block_size]) for start in range(0, len(data), block_size)]


def transpose_blocks(blocks: Sequence[bytes]) -> List[bytes]:
    """
    Regroup equal-length blocks into one stream per byte position.

    Stream i holds the i-th byte of every block, in block order, so every
    byte in a stream was encrypted with the same key byte.
    """
    if not blocks:
        return []
    width = len(blocks[0])
    return [bytes(block[i] for block in blocks) for i in range(width)]


def untranspose_streams(streams: Sequence[bytes]) -> List[bytes]:
    """Inverse of transpose_blocks: rebuild the blocks from per-position streams."""
    if not streams:
        return []
    count = len(streams[0])
    return [bytes(stream[j] for stream in streams) for j in range(count)]
