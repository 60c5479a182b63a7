"""
Errors — Exception taxonomy for the renderer

Three failure modes exist:
- UnsupportedFormatError: the format selector is not recognized
- EncodingError: the JSON path met a value it cannot represent
- ConfigError: a configuration value is invalid

Sink write failures are not wrapped; they propagate as raised by the sink.
The table path never fails on a value shape.
"""

from typing import Any


class OutputError(Exception):
    """Base class for all renderer errors."""


class UnsupportedFormatError(OutputError, ValueError):
    """Raised when the output format selector is not recognized."""

    def __init__(self, format: Any):
        self.format = format
        super().__init__(f"unsupported output format: {format}")


class EncodingError(OutputError):
    """Raised when a value cannot be encoded (or decoded) as JSON."""


class ConfigError(OutputError, ValueError):
    """Raised when configuration holds an invalid value."""
