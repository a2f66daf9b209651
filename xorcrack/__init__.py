"""
XORCrack - repeating-key XOR cryptanalysis.

Recovers the key and plaintext of data encrypted with repeating-key XOR
using Hamming-distance key-length estimation and English frequency
analysis.
"""

from .__version__ import __version__
from .config import BreakerConfig, REFERENCE_KEY_RANGE, FULL_KEY_RANGE
from .models import (
    KeyLengthCandidate,
    KeyLengthEstimate,
    SingleByteResult,
    DetectionResult,
    Solution,
)
from .analysis import (
    hamming_distance,
    split_blocks,
    transpose_blocks,
    untranspose_streams,
    english_score,
    KeyLengthEstimator,
    SingleByteBreaker,
    RepeatingKeyBreaker,
    detect_single_byte_xor,
)

__all__ = [
    '__version__',
    'BreakerConfig',
    'REFERENCE_KEY_RANGE',
    'FULL_KEY_RANGE',
    'KeyLengthCandidate',
    'KeyLengthEstimate',
    'SingleByteResult',
    'DetectionResult',
    'Solution',
    'hamming_distance',
    'split_blocks',
    'transpose_blocks',
    'untranspose_streams',
    'english_score',
    'KeyLengthEstimator',
    'SingleByteBreaker',
    'RepeatingKeyBreaker',
    'detect_single_byte_xor',
]
