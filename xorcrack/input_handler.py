"""Input handler for reading ciphertext from files or stdin"""
import sys
from pathlib import Path
from typing import List, Optional

from xorcrack.error_handling import EmptyInputError, create_error
from xorcrack.utils.xor_tools import decode_ciphertext


class InputHandler:
    """Reads ciphertext from files or standard input and decodes it to bytes"""

    def __init__(self, encoding: str = 'base64'):
        """
        Initialize input handler.

        Args:
            encoding: Ciphertext encoding ('raw', 'hex' or 'base64')
        """
        self.encoding = encoding

    def read_from_file(self, filepath: str) -> bytes:
        """
        Read and decode ciphertext from a file.

        Args:
            filepath: Path to the ciphertext file

        Returns:
            Raw ciphertext bytes

        Raises:
            FileNotFoundError: If the file doesn't exist
            IOError: If the path is not a readable file
            EmptyInputError: If the file holds no ciphertext
            DecodingError: If the content does not match the encoding
        """
        content = self._read_bytes(filepath)
        if not content.strip():
            raise create_error("empty_ciphertext", error_cls=EmptyInputError, source=filepath)
        return decode_ciphertext(content, self.encoding)

    def read_from_stdin(self) -> bytes:
        """
        Read and decode ciphertext from standard input.

        Raises:
            EmptyInputError: If stdin is empty
        """
        content = sys.stdin.buffer.read()
        if not content.strip():
            raise create_error("empty_ciphertext", error_cls=EmptyInputError, source="stdin")
        return decode_ciphertext(content, self.encoding)

    def read_lines(self, filepath: Optional[str] = None) -> List[bytes]:
        """
        Read one ciphertext per line from a file (or stdin when filepath is None).

        Blank lines are skipped; in raw mode trailing line breaks are dropped.

        Returns:
            Decoded ciphertexts in file order
        """
        if filepath:
            content = self._read_bytes(filepath)
        else:
            content = sys.stdin.buffer.read()

        lines = [line.rstrip(b'\r') for line in content.split(b'\n')]
        ciphertexts = [decode_ciphertext(line, self.encoding) for line in lines if line.strip()]
        if not ciphertexts:
            raise create_error("empty_ciphertext", error_cls=EmptyInputError, source=filepath or "stdin")
        return ciphertexts

    def _read_bytes(self, filepath: str) -> bytes:
        path = Path(filepath)

        if not path.exists():
            raise FileNotFoundError(f"File not found: {filepath}")

        if not path.is_file():
            raise IOError(f"Not a file: {filepath}")

        try:
            return path.read_bytes()
        except OSError as e:
            raise IOError(f"Cannot read file: {filepath}") from e
