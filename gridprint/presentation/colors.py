"""
Colors — Terminal highlighting for rendered cells

Booleans and enabled/disabled markers are highlighted green/red when color
is on, and left as plain text when it is off. Styling is produced with
rich, and widths are measured with the styling removed so that colored
cells line up with plain ones.
"""

import os
import sys
from typing import Optional, TextIO

from rich.color import ColorSystem
from rich.console import Console
from rich.style import Style
from rich.text import Text


COLOR_MODES = ("auto", "always", "never")

POSITIVE = Style(color="green")
NEGATIVE = Style(color="red")


def paint(text: str, style: Style, enabled: bool) -> str:
    """Wrap text in the ANSI sequences for style, or return it unchanged."""
    if not enabled:
        return text
    return style.render(text, color_system=ColorSystem.STANDARD)


def highlight_bool(value: bool, enabled: bool) -> str:
    """Render a boolean as "true" (green) or "false" (red)."""
    if value:
        return paint("true", POSITIVE, enabled)
    return paint("false", NEGATIVE, enabled)


def status_word(value: bool, enabled: bool) -> str:
    """Render an enabled flag as "enabled" (green) or "disabled" (red)."""
    if value:
        return paint("enabled", POSITIVE, enabled)
    return paint("disabled", NEGATIVE, enabled)


def strip_styles(text: str) -> str:
    """Remove ANSI styling from text."""
    return Text.from_ansi(text).plain


def display_width(text: str) -> int:
    """Terminal cell width of text, ignoring ANSI styling."""
    if "\x1b" not in text:
        return Text(text).cell_len
    return Text.from_ansi(text).cell_len


def resolve_color(mode: str = "auto", stream: Optional[TextIO] = None) -> bool:
    """
    Decide whether output should be colored.

    Args:
        mode: "always", "never" or "auto"
        stream: Destination checked for a terminal in auto mode (default: stdout)

    Returns:
        True when color should be used

    Raises:
        ValueError: If mode is not a known color mode
    """
    if mode == "always":
        return True
    if mode == "never":
        return False
    if mode != "auto":
        valid = ", ".join(COLOR_MODES)
        raise ValueError(f"Unknown color mode '{mode}'. Valid: {valid}")

    if os.environ.get("NO_COLOR"):
        return False
    console = Console(file=stream if stream is not None else sys.stdout)
    return console.is_terminal
