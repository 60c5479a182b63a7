"""
Output Module — Format dispatch for rendered values

Commands hand over plain values, the selected renderer handles display.
This enables format switching (table, json) without per-entity code.

Usage:
    from gridprint.output import print_to, OutputFormat

    print_to(sys.stdout, features, OutputFormat.TABLE)
    print_to(sys.stdout, features, "json", compact=True)
"""

import logging
import sys
from enum import Enum
from typing import Any, Optional, TextIO, Union

from ..errors import UnsupportedFormatError
from ..presentation.colors import resolve_color
from ..presentation.formatters import FormatContext

# Re-export for convenience
from .base import BaseRenderer
from .table import TableRenderer
from .json import JsonRenderer, reformat_json


logger = logging.getLogger(__name__)


# =============================================================================
# Format Registry
# =============================================================================

class OutputFormat(str, Enum):
    """Supported output formats."""
    JSON = "json"
    TABLE = "table"


# Maps format to renderer class
RENDERERS = {
    OutputFormat.JSON: JsonRenderer,
    OutputFormat.TABLE: TableRenderer,
}

# Valid format values for config/CLI
VALID_FORMATS = tuple(f.value for f in OutputFormat)


def parse_format(format: Union[str, OutputFormat]) -> OutputFormat:
    """
    Validate a format selector.

    Raises:
        UnsupportedFormatError: If format is not one of VALID_FORMATS
    """
    try:
        return OutputFormat(format)
    except ValueError:
        raise UnsupportedFormatError(format) from None


def get_renderer(
    format: Union[str, OutputFormat],
    context: Optional[FormatContext] = None,
    compact: bool = False
) -> BaseRenderer:
    """
    Get appropriate renderer instance.

    Args:
        format: Format name from VALID_FORMATS
        context: Presentation settings (default: no color)
        compact: Single-line JSON (ignored by the table renderer)

    Returns:
        Renderer instance

    Raises:
        UnsupportedFormatError: If format is invalid
    """
    output_format = parse_format(format)
    renderer_class = RENDERERS[output_format]
    if output_format is OutputFormat.JSON:
        return renderer_class(context=context, compact=compact)
    return renderer_class(context=context)


# =============================================================================
# Entry Points
# =============================================================================

def print_to(
    sink: TextIO,
    value: Any,
    format: Union[str, OutputFormat] = OutputFormat.TABLE,
    context: Optional[FormatContext] = None,
    compact: bool = False
) -> None:
    """
    Render value in the given format and write it to sink.

    Args:
        sink: Any object with a write(str) method
        value: Data to render
        format: "json" or "table"
        context: Presentation settings (default: no color)
        compact: Single-line JSON

    Raises:
        UnsupportedFormatError: Unknown format, nothing written
        EncodingError: JSON path met a value it cannot represent
    """
    renderer = get_renderer(format, context=context, compact=compact)
    logger.debug("printing %s as %s", type(value).__name__, renderer.name)
    renderer.write(sink, value)


def print_value(
    value: Any,
    format: Union[str, OutputFormat] = OutputFormat.TABLE,
    context: Optional[FormatContext] = None,
    compact: bool = False
) -> None:
    """
    Render value to standard output.

    Without a context, color follows the terminal: on for a TTY, off when
    piped or when NO_COLOR is set.
    """
    if context is None:
        context = FormatContext(color=resolve_color("auto", sys.stdout))
    print_to(sys.stdout, value, format, context=context, compact=compact)


def print_raw_json(sink: TextIO, raw: Union[str, bytes], compact: bool = False) -> None:
    """
    Re-emit an already encoded JSON document, keeping its key order.

    Raises:
        EncodingError: If raw is not valid JSON
    """
    sink.write(reformat_json(raw, compact=compact))


__all__ = [
    "OutputFormat", "RENDERERS", "VALID_FORMATS",
    "parse_format", "get_renderer",
    "print_to", "print_value", "print_raw_json",
    "BaseRenderer", "TableRenderer", "JsonRenderer",
]
