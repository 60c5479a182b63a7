"""
TableRenderer — Render any value as a border-less table

Top-level layout depends on the value's shape:
- None:                 nothing
- empty sequence:       "No results found"
- sequence of records:  one column per visible field, one row per record
- other sequences:      a single VALUE column, one row per element
- record:               field / value rows, no header
- mapping:              key / value rows, no header, in the mapping's own order
- anything else:        its text on one line

Cells are produced by format_value(), so nested collections are truncated
and booleans highlighted according to the renderer's FormatContext.
"""

import logging
from typing import Any, List, Mapping, Sequence, Tuple

from .base import BaseRenderer
from ..presentation.formatters import PLAIN, format_value
from ..presentation.grid import render_grid
from ..presentation.headers import FieldSpec, record_items, resolve_fields
from ..presentation.values import Kind, classify, holds_records


logger = logging.getLogger(__name__)

NO_RESULTS = "No results found"
VALUE_HEADER = "Value"


class TableRenderer(BaseRenderer):
    """
    Render structured data as an aligned text table.

    Features:
    - Headers derived from record field aliases
    - Row cells aligned with headers by field, whatever the record
    - Nested collections summarized by count past the truncation threshold
    """

    name = "table"

    def render(self, value: Any) -> str:
        """
        Render a value as a table.

        Args:
            value: Any value

        Returns:
            Table text ("" for None)
        """
        kind, value = classify(value)
        logger.debug("rendering %s value as table", kind.value)

        if kind is Kind.ABSENT:
            return ""
        if kind is Kind.SEQUENCE:
            return self.render_sequence(list(value))
        if kind is Kind.RECORD:
            return self.render_record(value)
        if kind is Kind.MAPPING:
            return self.render_mapping(value)
        # Top-level scalars print as plain text, uncolored
        return format_value(value, PLAIN) + "\n"

    # =========================================================================
    # Shapes
    # =========================================================================

    def render_sequence(self, items: List[Any]) -> str:
        """Render a sequence: records as columns, anything else as VALUE rows."""
        if not items:
            return NO_RESULTS + "\n"

        if holds_records(items):
            fields = resolve_fields(type(classify(items[0]).value))
            headers = [spec.display for spec in fields]
            rows = [self._record_row(item, fields) for item in items]
            logger.debug("%d rows x %d columns", len(rows), len(headers))
            return render_grid(rows, headers)

        rows = [[format_value(item, self.context)] for item in items]
        return render_grid(rows, [VALUE_HEADER])

    def render_record(self, record: Any) -> str:
        """Render one record as display name / value rows."""
        rows = [
            [spec.display, format_value(field_value, self.context)]
            for spec, field_value in record_items(record)
        ]
        return render_grid(rows)

    def render_mapping(self, mapping: Mapping) -> str:
        """Render a mapping as key / value rows."""
        rows = [
            [format_value(key), format_value(item, self.context)]
            for key, item in mapping.items()
        ]
        return render_grid(rows)

    # =========================================================================
    # Row Extraction
    # =========================================================================

    def _record_row(self, item: Any, fields: Sequence[FieldSpec]) -> List[str]:
        """
        Extract one row, aligned with the header fields.

        Fields the item does not have (including any item that is not a
        record) render as empty cells.
        """
        kind, record = classify(item)
        if kind is not Kind.RECORD:
            return [""] * len(fields)

        values = dict(self._named_values(record))
        return [
            format_value(values[spec.name], self.context) if spec.name in values else ""
            for spec in fields
        ]

    @staticmethod
    def _named_values(record: Any) -> List[Tuple[str, Any]]:
        return [(spec.name, field_value) for spec, field_value in record_items(record)]
