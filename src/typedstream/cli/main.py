"""Main CLI entry point for typedstream."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from .. import __version__
from ..endianness import Endianness
from ..exceptions import TypedStreamError
from ..types import Type
from .dump import TEXT_MODES, dump_file


def main(argv: list[str] | None = None) -> int:
    """Main entry point for the typedstream CLI.

    Args:
        argv: Argument list (defaults to sys.argv[1:])

    Returns:
        Exit code (0 for success, non-zero for error)
    """
    type_choices = [member.name.lower() for member in Type] + list(TEXT_MODES)

    parser = argparse.ArgumentParser(
        prog="typedstream",
        description="typedstream: Typed Binary Decoding",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  typedstream data.bin --type uint32 --count 4 --endian big
  typedstream data.bin --type string --offset 16
  typedstream data.bin --type bitmask --count 2
  typedstream --version
        """,
    )

    parser.add_argument("file", nargs="?", metavar="FILE", help="Binary file to decode")
    parser.add_argument(
        "--type",
        dest="type_name",
        default="uint8",
        choices=type_choices,
        help="Value type to decode (default: uint8)",
    )
    parser.add_argument(
        "--count", type=int, default=1, help="Number of values (bytes for bitmask)"
    )
    parser.add_argument("--offset", type=int, default=0, help="Start offset in bytes")
    parser.add_argument(
        "--endian",
        default="auto",
        choices=["little", "big", "auto"],
        help="Byte order (default: host order)",
    )
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable debug logging")
    parser.add_argument(
        "--version",
        action="version",
        version=f"typedstream {__version__}",
    )

    args = parser.parse_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")

    # If no file specified, show help
    if args.file is None:
        parser.print_help()
        return 0

    file_path = Path(args.file)
    if not file_path.exists():
        print(f"Error: File not found: {file_path}", file=sys.stderr)
        return 1

    try:
        lines = dump_file(
            file_path,
            type_name=args.type_name,
            count=args.count,
            offset=args.offset,
            endianness=Endianness.parse(args.endian),
        )
    except (TypedStreamError, ValueError) as e:
        print(f"Error decoding file: {e}", file=sys.stderr)
        return 1

    for line in lines:
        print(line)
    return 0


if __name__ == "__main__":
    sys.exit(main())
