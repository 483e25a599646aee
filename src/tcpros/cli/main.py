"""Main CLI entry point for tcpros."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from .. import __version__
from ..exceptions import MalformedHeaderError
from .inspect_header import inspect_header, load_header_bytes


def main(argv: list[str] | None = None) -> int:
    """Main entry point for the tcpros CLI.

    Returns:
        Exit code (0 for success, non-zero for error)
    """
    parser = argparse.ArgumentParser(
        description="tcpros: TCPROS connection header codec",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  tcpros --decode header.bin                 Decode a captured header
  tcpros --decode header.hex --hex           Decode a hex dump
  tcpros --decode header.bin --count-prefixes
                                             Decode a header from a standard ROS peer
  tcpros --version                           Show version
        """,
    )

    parser.add_argument(
        "--decode",
        metavar="FILE",
        type=str,
        help="Decode a connection header block and print its fields",
    )

    parser.add_argument(
        "--hex",
        action="store_true",
        help="FILE holds a hex dump instead of raw bytes",
    )

    parser.add_argument(
        "--count-prefixes",
        action="store_true",
        help="Header total length includes per-field length prefixes",
    )

    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log dropped or malformed fields",
    )

    parser.add_argument(
        "--version",
        action="version",
        version=f"tcpros {__version__}",
    )

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.ERROR,
        format="%(levelname)s %(name)s: %(message)s",
    )

    if args.decode:
        file_path = Path(args.decode)
        if not file_path.exists():
            print(f"Error: File not found: {file_path}", file=sys.stderr)
            return 1

        try:
            data = load_header_bytes(file_path, as_hex=args.hex)
            inspect_header(data, count_prefixes=args.count_prefixes)
            return 0
        except OSError as e:
            print(f"Error reading file: {e}", file=sys.stderr)
            return 1
        except (MalformedHeaderError, ValueError) as e:
            print(f"Error decoding header: {e}", file=sys.stderr)
            return 1

    # If no command specified, show help
    parser.print_help()
    return 0


if __name__ == "__main__":
    sys.exit(main())
