"""
CLI — Output flags and the gridprint command

Command handlers share one set of output flags:

    parser = argparse.ArgumentParser()
    add_output_arguments(parser, config.output)
    args = parser.parse_args()
    print_to(sys.stdout, records, args.output,
             context=context_from_args(args), compact=args.compact)

The gridprint command itself renders a JSON document:

    gridprint features.json
    curl -s .../features | gridprint -o json --compact
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional, TextIO

from . import __version__
from .config import ConfigManager, OutputConfig
from .errors import ConfigError, OutputError
from .output import print_to
from .output.json import decode_json
from .presentation.colors import COLOR_MODES, resolve_color
from .presentation.formatters import DEFAULT_MAX_ITEMS, FormatContext


logger = logging.getLogger(__name__)

STDIN = "-"


def add_output_arguments(
    parser: argparse.ArgumentParser,
    defaults: Optional[OutputConfig] = None
) -> argparse.ArgumentParser:
    """
    Install the shared output flags on a parser.

    --output is free-form on purpose: an unknown format is reported by the
    renderer as "unsupported output format", like any other caller.

    Args:
        parser: Parser (or subparser) to extend
        defaults: Loaded output config supplying flag defaults

    Returns:
        The same parser
    """
    defaults = defaults or OutputConfig()

    parser.add_argument(
        '--output', '-o',
        default=defaults.format,
        help='Output format: json or table (default: %(default)s)'
    )
    parser.add_argument(
        '--compact',
        action=argparse.BooleanOptionalAction,
        default=defaults.compact,
        help='Output compact JSON (no pretty-printing)'
    )
    parser.add_argument(
        '--color',
        choices=COLOR_MODES,
        default=defaults.color,
        help='Colorize table output (default: %(default)s)'
    )
    parser.add_argument(
        '--verbose', '-v',
        action='store_true',
        help='Verbose output'
    )
    return parser


def context_from_args(
    args: argparse.Namespace,
    stream: Optional[TextIO] = None,
    max_items: int = DEFAULT_MAX_ITEMS
) -> FormatContext:
    """Build the FormatContext selected by parsed output flags."""
    return FormatContext(
        color=resolve_color(args.color, stream),
        max_items=max_items,
    )


def configure_logging(verbose: bool = False):
    """Send log records to stderr: DEBUG with --verbose, WARNING otherwise."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )


def read_document(source: str):
    """
    Read and parse a JSON document from a file path or "-" for stdin.

    Raises:
        OSError: If the file cannot be read
        EncodingError: If the content is not valid JSON
    """
    if source == STDIN:
        raw = sys.stdin.read()
    else:
        raw = Path(source).read_bytes()
    return decode_json(raw)


def main(argv: Optional[List[str]] = None) -> int:
    """
    Main entry point for the gridprint command.

    Returns:
        Process exit status (0 success, 1 error)
    """
    try:
        config = ConfigManager().load()
    except ConfigError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    parser = argparse.ArgumentParser(
        prog="gridprint",
        description="gridprint -- Render JSON documents as tables or canonical JSON",
    )
    parser.add_argument(
        'file',
        nargs='?',
        default=STDIN,
        help='JSON document to render (default: stdin)'
    )
    parser.add_argument(
        '--version', '-V',
        action='version',
        version=f'gridprint {__version__}'
    )
    add_output_arguments(parser, config.output)

    args = parser.parse_args(argv)
    configure_logging(args.verbose)

    try:
        document = read_document(args.file)
        context = context_from_args(args, sys.stdout, config.output.max_items)
        print_to(sys.stdout, document, args.output, context=context, compact=args.compact)
    except (OutputError, OSError) as e:
        logger.debug("render failed", exc_info=True)
        print(f"Error: {e}", file=sys.stderr)
        return 1

    return 0


if __name__ == '__main__':
    sys.exit(main())
