"""
Grid — Border-less text table layout

Lays out rows of already-formatted cells:

    NAME        ENABLED COUNT
    feature1    true    10
    feature2    false   20

- Left-aligned, no borders, no header separator line
- Columns padded with spaces to the widest cell and joined by a tab
- Trailing whitespace stripped from every line
- Widths measured in terminal cells with ANSI styling ignored
- Cells containing newlines continue on the following lines
"""

from typing import List, Optional, Sequence

from .colors import display_width


COLUMN_SEPARATOR = "\t"


def normalize_header(name: str) -> str:
    """
    Normalize a header for display.

    Underscores become spaces, dots become spaces unless they sit between
    digits (so "1.0" survives), surrounding whitespace is trimmed and the
    result is uppercased.

    Examples:
        normalize_header("tenant_rights")  -> "TENANT RIGHTS"
        normalize_header("meta.name")      -> "META NAME"
        normalize_header("v1.0")           -> "V1.0"
    """
    chars = list(name)
    last = len(chars) - 1
    for i, ch in enumerate(chars):
        if ch == "_":
            chars[i] = " "
        elif ch == ".":
            before_ok = i == 0 or _is_digit_or_space(chars[i - 1])
            after_ok = i == last or _is_digit_or_space(chars[i + 1])
            if not (before_ok and after_ok):
                chars[i] = " "

    normalized = "".join(chars).strip()
    if not normalized and name:
        normalized = " "
    return normalized.upper()


def _is_digit_or_space(ch: str) -> bool:
    return ch.isdigit() or ch == " "


def render_grid(
    rows: Sequence[Sequence[str]],
    headers: Optional[Sequence[str]] = None
) -> str:
    """
    Render rows (and optional headers) as an aligned grid.

    Args:
        rows: Formatted cells, one list per row
        headers: Column headers, normalized before display; None for no header

    Returns:
        Grid text ending with a newline, or "" when there is nothing to show
    """
    header_cells = [normalize_header(h) for h in headers] if headers else None

    if header_cells is not None:
        columns = len(header_cells)
    else:
        columns = max((len(row) for row in rows), default=0)

    logical: List[List[str]] = []
    if header_cells is not None:
        logical.append(header_cells)
    logical.extend(_fit(row, columns) for row in rows)

    physical: List[List[str]] = []
    for row in logical:
        physical.extend(_split_lines(row))

    if not physical:
        return ""

    widths = [0] * columns
    for row in physical:
        for i, cell in enumerate(row):
            widths[i] = max(widths[i], display_width(cell))

    return "\n".join(_join(row, widths) for row in physical) + "\n"


def _fit(row: Sequence[str], columns: int) -> List[str]:
    """Pad or cut a row to exactly `columns` cells."""
    cells = [str(cell) for cell in row[:columns]]
    cells.extend([""] * (columns - len(cells)))
    return cells


def _split_lines(row: List[str]) -> List[List[str]]:
    """Expand a row with multi-line cells into several physical rows."""
    split = [cell.split("\n") for cell in row]
    height = max((len(lines) for lines in split), default=1)
    return [
        [lines[i] if i < len(lines) else "" for lines in split]
        for i in range(height)
    ]


def _join(row: List[str], widths: List[int]) -> str:
    padded = [
        cell + " " * (width - display_width(cell))
        for cell, width in zip(row, widths)
    ]
    return COLUMN_SEPARATOR.join(padded).rstrip()
