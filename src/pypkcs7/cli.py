"""Command line front end: ``pkcs7 pad`` / ``pkcs7 unpad``.

Usage
-----
    pkcs7 pad --block-size 8 --hex deadbeef
    pkcs7 unpad --hex deadbeef04040404
    pkcs7 pad --input plain.bin --output padded.bin
    echo deadbeef | pkcs7 pad
"""

from __future__ import annotations

import argparse
import logging
import sys
from collections.abc import Sequence
from pathlib import Path

from pypkcs7.codec import Pkcs7Codec, parse_hex_bytes
from pypkcs7.config import Pkcs7Config
from pypkcs7.exceptions import Pkcs7Error

_logger = logging.getLogger(__name__)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="pkcs7", description="PKCS#7 pad or unpad byte data.")
    parser.add_argument("operation", choices=("pad", "unpad"), help="Operation to perform")
    parser.add_argument(
        "--block-size",
        "-b",
        type=int,
        help="Block size in bytes (1-255, default from PKCS7_BLOCK_SIZE or 16)",
    )
    source = parser.add_mutually_exclusive_group()
    source.add_argument("--hex", dest="hex_input", help="Input as hex text")
    source.add_argument("--input", "-i", help="Read raw input bytes from FILE")
    parser.add_argument("--output", "-o", help="Write raw result bytes to FILE instead of hex to stdout")
    parser.add_argument("--strict", action="store_true", help="Require block-aligned input when unpadding")
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable debug logging")
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    args = _build_parser().parse_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

    overrides: dict[str, object] = {}
    if args.block_size is not None:
        overrides["block_size"] = args.block_size
    if args.strict:
        overrides["strict"] = True

    try:
        codec = Pkcs7Codec(Pkcs7Config.from_env(**overrides))
        if args.input:
            data = Path(args.input).read_bytes()
        else:
            text = args.hex_input if args.hex_input is not None else sys.stdin.read()
            data = parse_hex_bytes(text, name="input")

        result = codec.pad(data) if args.operation == "pad" else codec.unpad(data)
        _logger.debug("%s: %d -> %d bytes", args.operation, len(data), len(result))

        if args.output:
            Path(args.output).write_bytes(result)
        else:
            print(result.hex())
    except (Pkcs7Error, OSError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
