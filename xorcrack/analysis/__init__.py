"""Cryptanalysis core: key length estimation, frequency scoring and XOR breakers"""

from .hamming import hamming_distance, POPCOUNT
from .blocking import split_blocks, transpose_blocks, untranspose_streams
from .english import english_score, ENGLISH_FREQUENCIES
from .key_length import KeyLengthEstimator, average_distance, sample_pairs
from .single_byte import SingleByteBreaker, detect_single_byte_xor
from .repeating_key import RepeatingKeyBreaker

__all__ = [
    'hamming_distance',
    'POPCOUNT',
    'split_blocks',
    'transpose_blocks',
    'untranspose_streams',
    'english_score',
    'ENGLISH_FREQUENCIES',
    'KeyLengthEstimator',
    'average_distance',
    'sample_pairs',
    'SingleByteBreaker',
    'detect_single_byte_xor',
    'RepeatingKeyBreaker',
]
