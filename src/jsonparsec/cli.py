"""Command-line driver: parse a document and report the result.

Usage:
    jsonparsec document.json
    jsonparsec --format simple document.json
    echo '{"a": [1, 2]}' | jsonparsec --python

Flags:
    --format              Diagnostic style: rust (default), simple or json
    --max-depth           Maximum nesting of arrays and objects
    --max-message-length  Truncate diagnostic messages and hints
    --python              Print plain Python data instead of the document model
    --color               Colorize the diagnostic severity
    --verbose             Enable debug logging

Exit Codes:
    0   Parsed successfully
    1   Input is not a valid document
    2   Usage or file read error

Python 3.13+.
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import TYPE_CHECKING

from jsonparsec import __version__
from jsonparsec.diagnostics import DiagnosticFormatter, JsonParsecError, OutputFormat
from jsonparsec.syntax import JsonParser, to_python

if TYPE_CHECKING:
    from collections.abc import Sequence

__all__ = ["main"]

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_INVALID = 1
EXIT_USAGE = 2


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser."""
    parser = argparse.ArgumentParser(
        prog="jsonparsec",
        description="Parse a JSON-subset document and report diagnostics.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Parse a file and print the document model:
  jsonparsec document.json

  # Parse stdin, single-line diagnostics:
  cat document.json | jsonparsec --format simple
""",
    )
    parser.add_argument(
        "file", type=Path, nargs="?", help="Document to parse (default: stdin)"
    )
    parser.add_argument(
        "--format",
        choices=[fmt.value for fmt in OutputFormat],
        default=OutputFormat.RUST.value,
        help="Diagnostic output format (default: rust)",
    )
    parser.add_argument(
        "--max-depth",
        type=int,
        default=None,
        metavar="N",
        help="Maximum nesting of arrays and objects",
    )
    parser.add_argument(
        "--python", action="store_true", help="Print plain Python data instead of the model"
    )
    parser.add_argument(
        "--color", action="store_true", help="Colorize the diagnostic severity"
    )
    parser.add_argument(
        "--max-message-length",
        type=int,
        default=None,
        metavar="N",
        help="Truncate diagnostic messages and hints to N characters",
    )
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable debug logging")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def read_source(file_path: Path | None) -> str:
    """Read the document from file_path, or from stdin when it is None.

    Raises:
        OSError: If the file cannot be read
        UnicodeDecodeError: If the file is not valid UTF-8
    """
    if file_path is None:
        return sys.stdin.read()
    return file_path.read_text(encoding="utf-8")


def main(argv: Sequence[str] | None = None) -> int:
    """Main entry point."""
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        source = read_source(args.file)
    except (OSError, UnicodeDecodeError) as e:
        print(f"jsonparsec: cannot read {args.file}: {e}", file=sys.stderr)
        return EXIT_USAGE

    if args.max_depth is not None and args.max_depth < 1:
        print("jsonparsec: --max-depth must be at least 1", file=sys.stderr)
        return EXIT_USAGE

    if args.max_message_length is not None and args.max_message_length < 1:
        print("jsonparsec: --max-message-length must be at least 1", file=sys.stderr)
        return EXIT_USAGE

    formatter = DiagnosticFormatter(
        output_format=OutputFormat(args.format),
        sanitize=args.max_message_length is not None,
        color=args.color,
        max_content_length=args.max_message_length or 0,
    )
    parser = JsonParser(max_nesting_depth=args.max_depth)

    try:
        document = parser.parse(source)
    except ValueError as e:
        print(f"jsonparsec: {e}", file=sys.stderr)
        return EXIT_USAGE
    except JsonParsecError as e:
        if e.diagnostic is None:
            print(e, file=sys.stderr)
        else:
            print(formatter.format_with_source(e.diagnostic, source), file=sys.stderr)
        return EXIT_INVALID

    logger.debug("Document has %d top-level members", len(document.members))
    print(to_python(document) if args.python else document)
    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
