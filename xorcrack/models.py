"""Result models for XORCrack"""
from dataclasses import dataclass, field
from typing import List, Optional


def _preview(data: bytes, limit: int = 50) -> str:
    """Printable preview of decoded bytes"""
    text = data[:limit].decode('latin-1')
    return ''.join(ch if ch.isprintable() else '.' for ch in text)


@dataclass(frozen=True)
class KeyLengthCandidate:
    """A candidate key length and its normalized Hamming distance (lower is better)"""
    length: int
    score: float

    def __str__(self) -> str:
        return f"Length: {self.length:3d} | Normalized distance: {self.score:.4f}"


@dataclass
class KeyLengthEstimate:
    """Selected key length together with the block partition it was scored on"""
    length: int
    blocks: List[bytes]
    candidates: List[KeyLengthCandidate] = field(default_factory=list)

    def ranked(self) -> List[KeyLengthCandidate]:
        """Candidates sorted by score; ties keep examination order."""
        return sorted(self.candidates, key=lambda c: c.score)


@dataclass(frozen=True)
class SingleByteResult:
    """Best single-byte key for one stream, with the decoded stream and its score"""
    key: int
    plaintext: bytes
    score: float

    def __str__(self) -> str:
        return (f"Key: 0x{self.key:02X} | Score: {self.score:.2f} | "
                f"Preview: {_preview(self.plaintext)}")


@dataclass(frozen=True)
class DetectionResult:
    """Ciphertext, out of many, that best decrypts under a single-byte key"""
    index: int
    ciphertext: bytes
    result: SingleByteResult

    def __str__(self) -> str:
        return f"Line {self.index} | {self.result}"


@dataclass
class Solution:
    """
    Recovered repeating key and plaintext.

    The plaintext has the same length as the ciphertext it came from;
    block padding has already been trimmed.
    """
    key: bytes
    plaintext: bytes
    key_length: int
    score: float
    estimate: Optional[KeyLengthEstimate] = None

    @property
    def key_text(self) -> str:
        """Key decoded for display (non-printable bytes shown as '.')"""
        return _preview(self.key, limit=len(self.key))

    def __str__(self) -> str:
        key_hex = ''.join(f'{b:02X}' for b in self.key)
        return (f"Key: {key_hex} ({self.key_text!r}, length: {self.key_length}) | "
                f"Score: {self.score:.2f} | Preview: {_preview(self.plaintext)}")
