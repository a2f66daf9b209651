"""Output formatter for XOR cryptanalysis results"""
from typing import List

from xorcrack.models import DetectionResult, SingleByteResult, Solution


def hex_dump(data: bytes) -> str:
    """
    Canonical hex dump: offset, 16 bytes in two groups of eight, ASCII gutter.

    Example line:
        00000000  0b 36 37 27 2a 2b 2e 63  62 2c 2e 69 69 2a 23 69  |.67'*+.cb,.ii*#i|
    """
    lines = []
    for offset in range(0, len(data), 16):
        chunk = data[offset:offset + 16]
        left = ' '.join(f'{b:02x}' for b in chunk[:8])
        right = ' '.join(f'{b:02x}' for b in chunk[8:])
        text = ''.join(chr(b) if 0x20 <= b < 0x7f else '.' for b in chunk)
        lines.append(f"{offset:08x}  {left:<23}  {right:<23}  |{text}|")
    return "\n".join(lines)


def _printable(data: bytes) -> str:
    return data.decode('utf-8', errors='replace')


class OutputFormatter:
    """Formats cryptanalysis results into plain-text reports"""

    def __init__(self, show_hexdump: bool = False):
        """
        Initialize the output formatter.

        Args:
            show_hexdump: Append a hex dump of recovered plaintext to reports
        """
        self.show_hexdump = show_hexdump

    def format_solution(self, solution: Solution, top_n: int = 5) -> str:
        """
        Format a repeating-key XOR solution.

        Args:
            solution: Recovered key and plaintext
            top_n: Number of ranked key length candidates to list

        Returns:
            Formatted report string
        """
        lines: List[str] = []
        lines.append("Repeating-key XOR Analysis")
        lines.append("=" * 80)
        lines.append(f"Key length: {solution.key_length}")

        if solution.estimate and top_n > 0:
            lines.append("")
            lines.append(f"Key length candidates (top {top_n} of {len(solution.estimate.candidates)}):")
            for i, candidate in enumerate(solution.estimate.ranked()[:top_n], 1):
                lines.append(f"  {i}. {candidate}")

        lines.append("")
        lines.append(f"Key (hex):  {solution.key.hex()}")
        lines.append(f"Key (text): {solution.key_text}")
        lines.append(f"Score:      {solution.score:.2f}")
        lines.append("")
        lines.append("Plaintext:")
        lines.append("-" * 80)
        lines.append(_printable(solution.plaintext))
        self._append_hexdump(lines, solution.plaintext)

        return "\n".join(lines)

    def format_single_byte(self, result: SingleByteResult) -> str:
        """Format a single-byte XOR result"""
        lines: List[str] = ["Single-byte XOR Analysis", "=" * 80, str(result), "", "Plaintext:", "-" * 80]
        lines.append(_printable(result.plaintext))
        self._append_hexdump(lines, result.plaintext)
        return "\n".join(lines)

    def format_detection(self, detection: DetectionResult) -> str:
        """Format the result of searching many ciphertexts for single-byte XOR"""
        lines: List[str] = ["Single-byte XOR Detection", "=" * 80]
        lines.append(f"Line: {detection.index}")
        lines.append(f"Ciphertext (hex): {detection.ciphertext.hex()}")
        lines.append(str(detection.result))
        lines.append("")
        lines.append("Plaintext:")
        lines.append("-" * 80)
        lines.append(_printable(detection.result.plaintext))
        self._append_hexdump(lines, detection.result.plaintext)
        return "\n".join(lines)

    def _append_hexdump(self, lines: List[str], data: bytes):
        if self.show_hexdump:
            lines.append("")
            lines.append("Hex dump:")
            lines.append(hex_dump(data))
