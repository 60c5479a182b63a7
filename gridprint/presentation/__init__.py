"""
Presentation — Value-to-text layer for gridprint

Contains classification and formatting:
- Values: Closed shape classification (absent/scalar/sequence/mapping/record/opaque)
- Headers: Display names from serialization aliases
- Formatters: Recursive cell formatting with truncation
- Grid: Border-less aligned table layout
- Colors: Terminal highlighting and color detection
"""

from .values import Kind, Classified, classify, deref, is_record, holds_records
from .headers import (
    FieldSpec, parse_tag, resolve_fields,
    display_names, record_values, record_items
)
from .formatters import (
    FormatContext, PLAIN, DEFAULT_MAX_ITEMS, TableFormattable,
    format_value, format_sequence, format_count_summary, summarize_record
)
from .grid import render_grid, normalize_header
from .colors import resolve_color, strip_styles, display_width, COLOR_MODES

__all__ = [
    # Values
    "Kind", "Classified", "classify", "deref", "is_record", "holds_records",
    # Headers
    "FieldSpec", "parse_tag", "resolve_fields",
    "display_names", "record_values", "record_items",
    # Formatters
    "FormatContext", "PLAIN", "DEFAULT_MAX_ITEMS", "TableFormattable",
    "format_value", "format_sequence", "format_count_summary", "summarize_record",
    # Grid
    "render_grid", "normalize_header",
    # Colors
    "resolve_color", "strip_styles", "display_width", "COLOR_MODES",
]
