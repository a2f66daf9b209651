#!/usr/bin/env python3
"""
XORCrack - repeating-key XOR cryptanalysis

A command-line tool that recovers the key and plaintext of data encrypted
with repeating-key XOR, using Hamming-distance key length estimation and
English letter-frequency analysis.
"""

import argparse
import os
import sys
from pathlib import Path
from typing import List, Optional, Tuple

from xorcrack.__version__ import __version__
from xorcrack.analysis import (
    RepeatingKeyBreaker,
    SingleByteBreaker,
    detect_single_byte_xor,
    hamming_distance,
)
from xorcrack.config import (
    BreakerConfig,
    DEFAULT_MAX_KEY_LENGTH,
    DEFAULT_MIN_KEY_LENGTH,
    DEFAULT_SAMPLE_COUNT,
    FULL_KEY_RANGE,
    REFERENCE_KEY_RANGE,
)
from xorcrack.error_handling import (
    InvalidRangeError,
    XORCrackError,
    create_error,
    get_error_handler,
)
from xorcrack.formatter import OutputFormatter
from xorcrack.input_handler import InputHandler
from xorcrack.utils.xor_tools import ENCODINGS, repeating_key_xor


def parse_key_range(value: str) -> Tuple[int, int]:
    """
    Parse a LO-HI key byte range; bounds may be decimal or 0x-prefixed hex.

    Raises:
        InvalidRangeError: If the value is malformed
    """
    parts = value.split('-')
    if len(parts) != 2:
        raise create_error("invalid_key_range", error_cls=InvalidRangeError, value=value)
    try:
        return int(parts[0], 0), int(parts[1], 0)
    except ValueError as e:
        raise create_error("invalid_key_range", error_cls=InvalidRangeError, value=value) from e


def build_parser() -> argparse.ArgumentParser:
    """Build the command-line parser"""
    parser = argparse.ArgumentParser(
        description='XORCrack - repeating-key XOR cryptanalysis',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
QUICK START:

  Break repeating-key XOR (base64 ciphertext file):
    python main.py 6.txt

  Hex ciphertext on stdin, narrower key length search:
    echo 0b3637272a2b2e63 | python main.py --encoding hex --max-key-length 8

  Single-byte XOR:
    python main.py cipher.hex --encoding hex --single-byte

  Find the one line encrypted with single-byte XOR:
    python main.py 4.txt --encoding hex --detect

  Encrypt with a repeating key:
    python main.py plain.txt --encrypt ICE

  Hamming distance of two strings:
    python main.py --distance "this is a test" "wokka wokka!!!"
        """
    )

    parser.add_argument(
        'file',
        nargs='?',
        type=str,
        help='Ciphertext file (reads stdin when omitted)'
    )
    parser.add_argument(
        '--version',
        action='version',
        version=f'%(prog)s {__version__}'
    )

    input_opts = parser.add_argument_group('Input Options')
    input_opts.add_argument(
        '--encoding',
        choices=ENCODINGS,
        help='Encoding of the input (default: base64, or raw with --encrypt)'
    )

    modes = parser.add_argument_group('Modes')
    mode = modes.add_mutually_exclusive_group()
    mode.add_argument(
        '--single-byte',
        action='store_true',
        help='Treat the whole input as single-byte XOR'
    )
    mode.add_argument(
        '--detect',
        action='store_true',
        help='Treat each line as a ciphertext and find the single-byte XOR one'
    )
    mode.add_argument(
        '--encrypt',
        metavar='KEY',
        help='XOR the input with KEY and print the result as hex (input defaults to raw)'
    )
    mode.add_argument(
        '--distance',
        nargs=2,
        metavar=('A', 'B'),
        help='Print the Hamming distance between two equal-length strings'
    )

    tuning = parser.add_argument_group('Analysis Options')
    tuning.add_argument(
        '--min-key-length',
        type=int,
        default=DEFAULT_MIN_KEY_LENGTH,
        help=f'Smallest key length to try (default: {DEFAULT_MIN_KEY_LENGTH})'
    )
    tuning.add_argument(
        '--max-key-length',
        type=int,
        default=DEFAULT_MAX_KEY_LENGTH,
        help=f'Largest key length to try (default: {DEFAULT_MAX_KEY_LENGTH})'
    )
    tuning.add_argument(
        '--sample-count',
        type=int,
        default=DEFAULT_SAMPLE_COUNT,
        help=f'Block pairs sampled per key length (default: {DEFAULT_SAMPLE_COUNT})'
    )
    key_range = tuning.add_mutually_exclusive_group()
    key_range.add_argument(
        '--key-range',
        metavar='LO-HI',
        help='Inclusive key byte sweep, e.g. 0x20-0x7e (default: 0x00-0xff)'
    )
    key_range.add_argument(
        '--reference-range',
        action='store_true',
        help='Sweep only key bytes 0x01-0x80'
    )
    tuning.add_argument(
        '--workers',
        type=int,
        default=1,
        help='Threads used to solve key positions (default: 1)'
    )

    output = parser.add_argument_group('Output Options')
    output.add_argument(
        '-o', '--output',
        type=str,
        help='Write the report to a file instead of stdout'
    )
    output.add_argument(
        '--top',
        type=int,
        default=5,
        help='Number of key length candidates to show (default: 5)'
    )
    output.add_argument(
        '--hexdump',
        action='store_true',
        help='Append a hex dump of the recovered plaintext'
    )
    output.add_argument(
        '--debug',
        action='store_true',
        help='Enable debug logging and tracebacks'
    )

    return parser


def build_config(args: argparse.Namespace) -> BreakerConfig:
    """Create a validated BreakerConfig from parsed arguments"""
    if args.reference_range:
        key_range = REFERENCE_KEY_RANGE
    elif args.key_range:
        key_range = parse_key_range(args.key_range)
    else:
        key_range = FULL_KEY_RANGE

    return BreakerConfig(
        min_key_length=args.min_key_length,
        max_key_length=args.max_key_length,
        sample_count=args.sample_count,
        key_range=key_range,
        workers=args.workers,
    )


def read_input(input_handler: InputHandler, args: argparse.Namespace) -> bytes:
    """
    Read ciphertext from the file argument or stdin.

    Raises:
        FileNotFoundError: If the file doesn't exist
        IOError: If the file cannot be read
        XORCrackError: If the input is empty or badly encoded
    """
    if args.file:
        return input_handler.read_from_file(args.file)
    return input_handler.read_from_stdin()


def run(args: argparse.Namespace) -> str:
    """Execute the selected mode and return its report"""
    if args.distance:
        first, second = (os.fsencode(text) for text in args.distance)
        return str(hamming_distance(first, second))

    config = build_config(args)
    encoding = args.encoding or ('raw' if args.encrypt is not None else 'base64')
    input_handler = InputHandler(encoding=encoding)
    formatter = OutputFormatter(show_hexdump=args.hexdump)

    if args.detect:
        ciphertexts = input_handler.read_lines(args.file)
        detection = detect_single_byte_xor(ciphertexts, key_range=config.key_range)
        return formatter.format_detection(detection)

    data = read_input(input_handler, args)

    if args.encrypt is not None:
        return repeating_key_xor(data, os.fsencode(args.encrypt)).hex()

    if args.single_byte:
        result = SingleByteBreaker(config.key_range).break_stream(data)
        return formatter.format_single_byte(result)

    solution = RepeatingKeyBreaker(config).break_ciphertext(data)
    return formatter.format_solution(solution, top_n=args.top)


def write_output(output: str, output_path: Optional[str] = None):
    """
    Write the report to the specified destination.

    Args:
        output: Formatted report string
        output_path: Optional file path to write to (None = stdout)

    Raises:
        IOError: If output file cannot be written
    """
    if output_path:
        try:
            path = Path(output_path)
            path.write_text(output + "\n", encoding='utf-8')
            print(f"Report written to {output_path}", file=sys.stderr)
        except OSError as e:
            raise IOError(f"Cannot write to output file: {output_path}") from e
    else:
        print(output)


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the XORCrack CLI"""
    parser = build_parser()
    args = parser.parse_args(argv)
    handler = get_error_handler(debug_mode=args.debug)

    try:
        write_output(run(args), args.output)
    except XORCrackError as e:
        handler.handle_error(e)
        return 1
    except OSError as e:
        handler.handle_error(e)
        return 1
    except KeyboardInterrupt:
        print("\nOperation cancelled by user", file=sys.stderr)
        return 130
    except Exception as e:
        handler.handle_error(e)
        return 1

    return 0


if __name__ == '__main__':
    sys.exit(main())
