"""
gridprint — Generic structured-data renderer for command-line clients

Turns whatever an API call returned (records, lists, dicts, scalars) into
either canonical JSON or an aligned, border-less table, with no per-entity
rendering code.

Usage:
    from gridprint import print_value, print_to

    print_value(features)                    # table on stdout
    print_value(features, "json")            # canonical JSON
    print_to(buffer, tenant, "table")        # any text sink
"""

__version__ = "0.1.0"

# Errors
from .errors import OutputError, UnsupportedFormatError, EncodingError, ConfigError

# Presentation layer
from .presentation import (
    Kind, classify, FormatContext, PLAIN, TableFormattable,
    format_value, render_grid, resolve_color,
)

# Output layer
from .output import (
    OutputFormat, VALID_FORMATS, get_renderer,
    print_to, print_value, print_raw_json,
)

# Config (stays at root)
from .config import Config, OutputConfig, ConfigManager, get_config

__all__ = [
    # Errors
    'OutputError', 'UnsupportedFormatError', 'EncodingError', 'ConfigError',
    # Presentation
    'Kind', 'classify', 'FormatContext', 'PLAIN', 'TableFormattable',
    'format_value', 'render_grid', 'resolve_color',
    # Output
    'OutputFormat', 'VALID_FORMATS', 'get_renderer',
    'print_to', 'print_value', 'print_raw_json',
    # Config
    'Config', 'OutputConfig', 'ConfigManager', 'get_config',
]
