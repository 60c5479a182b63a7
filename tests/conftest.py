"""
Shared pytest fixtures for the gridprint test suite.

Usage in tests:
    def test_something(sink):
        print_to(sink, [1, 2], "table")
        assert "VALUE" in sink.getvalue()

    def test_colored(color_context):
        assert "\\x1b[" in format_value(True, color_context)
"""

import io

import pytest

from gridprint.presentation.formatters import FormatContext


@pytest.fixture
def sink():
    """In-memory text sink standing in for stdout."""
    return io.StringIO()


@pytest.fixture
def color_context():
    """Formatting context with color forced on."""
    return FormatContext(color=True)


@pytest.fixture
def no_color_env(monkeypatch):
    """
    Environment without color overrides.

    Clears variables that would force rich or the renderer into a color
    decision, so auto-detection only looks at the stream.
    """
    for name in ("NO_COLOR", "FORCE_COLOR", "TTY_COMPATIBLE", "TTY_INTERACTIVE"):
        monkeypatch.delenv(name, raising=False)
    return monkeypatch


@pytest.fixture
def clean_env(monkeypatch):
    """Environment without GRIDPRINT_* overrides."""
    for name in ("GRIDPRINT_OUTPUT", "GRIDPRINT_COLOR", "GRIDPRINT_COMPACT", "GRIDPRINT_MAX_ITEMS"):
        monkeypatch.delenv(name, raising=False)
    return monkeypatch


class BrokenSink:
    """Sink whose writes always fail."""

    def __init__(self):
        self.calls = 0

    def write(self, text):
        self.calls += 1
        raise OSError("disk full")


@pytest.fixture
def broken_sink():
    """Sink that raises OSError on write."""
    return BrokenSink()
