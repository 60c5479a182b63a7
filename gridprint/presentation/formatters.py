"""
Formatters — Single-value to cell-text rendering

format_value() turns any value into the text of one table cell. It is
recursive and pure: the only inputs are the value and a FormatContext.

Rules, by kind:
- absent:              ""
- boolean:             "true" / "false" (colored when context.color)
- empty sequence:      "[]"
- sequence of records: up to max_items compacted to "name (enabled), ...",
                       beyond that "[N items]"
- sequence of scalars: up to max_items as "[a, b, c]", beyond that "[N items]"
- mapping:             "{}" when empty, "{N entries}" otherwise
- record / opaque:     the value's own text form (enums by value)
- other scalars:       their natural text form

Mappings nested in a cell are never enumerated, which bounds cell width.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, List, Optional, Protocol, runtime_checkable

from .colors import highlight_bool, status_word
from .headers import record_items
from .values import Kind, classify, holds_records


DEFAULT_MAX_ITEMS = 3

EMPTY_SEQUENCE = "[]"
EMPTY_MAPPING = "{}"

# Field display names used to summarize records nested in a cell
NAME_FIELD = "name"
ENABLED_FIELD = "enabled"


@dataclass(frozen=True)
class FormatContext:
    """
    Presentation settings passed into every formatting call.

    Attributes:
        color: Highlight booleans and status words with ANSI color
        max_items: Largest sequence enumerated inside a cell
    """
    color: bool = False
    max_items: int = DEFAULT_MAX_ITEMS


PLAIN = FormatContext()


@runtime_checkable
class TableFormattable(Protocol):
    """
    Optional capability for records that know their own one-line form.

    Only used when the record appears inside a sequence nested in a cell.
    Top-level records always render as a field/value grid.
    """

    def format_for_table(self) -> str:
        ...


def format_value(value: Any, context: Optional[FormatContext] = None) -> str:
    """
    Format a value as cell text.

    Args:
        value: Any value
        context: Presentation settings (default: PLAIN)

    Returns:
        Single cell text, never raises for any value shape
    """
    context = context or PLAIN
    kind, value = classify(value)

    if kind is Kind.ABSENT:
        return ""
    if kind is Kind.SCALAR:
        return _format_scalar(value, context)
    if kind is Kind.SEQUENCE:
        return format_sequence(list(value), context)
    if kind is Kind.MAPPING:
        return format_count_summary(len(value), mapping=True)
    if isinstance(value, Enum):
        return format_value(value.value, context)
    return str(value)


def format_count_summary(count: int, mapping: bool = False) -> str:
    """
    Summarize a collection by its size.

    Examples:
        format_count_summary(0)                -> "[]"
        format_count_summary(5)                -> "[5 items]"
        format_count_summary(5, mapping=True)  -> "{5 entries}"
    """
    if mapping:
        return f"{{{count} entries}}" if count else EMPTY_MAPPING
    return f"[{count} items]" if count else EMPTY_SEQUENCE


def format_sequence(items: List[Any], context: Optional[FormatContext] = None) -> str:
    """Format a sequence nested in a cell."""
    context = context or PLAIN
    if not items:
        return EMPTY_SEQUENCE
    if len(items) > context.max_items:
        return format_count_summary(len(items))
    if holds_records(items):
        return _format_record_items(items, context)
    return "[" + ", ".join(format_value(item, context) for item in items) + "]"


def summarize_record(record: Any, context: Optional[FormatContext] = None) -> str:
    """
    One-line summary of a record from its name and enabled fields.

    Returns "name (enabled)", "name (disabled)", "name", or "" when the
    record has no non-empty name field.
    """
    context = context or PLAIN
    name = ""
    status = ""

    for spec, field_value in record_items(record):
        if spec.display == NAME_FIELD:
            name = format_value(field_value, context)
        elif spec.display == ENABLED_FIELD:
            kind, flag = classify(field_value)
            if kind is Kind.SCALAR and isinstance(flag, bool):
                status = status_word(flag, context.color)

    if not name:
        return ""
    if status:
        return f"{name} ({status})"
    return name


def _format_record_items(items: List[Any], context: FormatContext) -> str:
    parts = []
    for item in items:
        kind, record = classify(item)
        if kind is not Kind.RECORD:
            continue
        if isinstance(record, TableFormattable):
            parts.append(record.format_for_table())
            continue
        summary = summarize_record(record, context)
        if summary:
            parts.append(summary)

    if not parts:
        return EMPTY_SEQUENCE
    return ", ".join(parts)


def _format_scalar(value: Any, context: FormatContext) -> str:
    if isinstance(value, bool):
        return highlight_bool(value, context.color)
    if isinstance(value, (bytes, bytearray)):
        return bytes(value).decode("utf-8", errors="replace")
    return str(value)
