"""
BaseRenderer — Abstract base class for output renderers

All renderers inherit from this class and implement render().
Rendering happens entirely in memory; write() then hands the finished text
to the sink in a single call, so a failed render never leaves partial
output behind.
"""

import logging
from abc import ABC, abstractmethod
from typing import Any, Optional, TextIO

from ..presentation.formatters import FormatContext, PLAIN


logger = logging.getLogger(__name__)


class BaseRenderer(ABC):
    """
    Abstract base class for all output renderers.

    Provides:
    - The FormatContext shared by every formatting call
    - Single-write output to a text sink

    Subclasses must implement render() method.
    """

    #: Selector this renderer answers to (e.g. "json")
    name = ""

    def __init__(self, context: Optional[FormatContext] = None):
        """
        Initialize renderer.

        Args:
            context: Presentation settings (default: PLAIN, no color)
        """
        self.context = context or PLAIN

    @abstractmethod
    def render(self, value: Any) -> str:
        """
        Render a value to text.

        Args:
            value: Any value handed over by the caller

        Returns:
            Complete output text ("" for nothing to write)
        """
        pass

    def write(self, sink: TextIO, value: Any) -> None:
        """
        Render value and write the result to sink.

        Write errors raised by the sink propagate unchanged.
        """
        text = self.render(value)
        if not text:
            logger.debug("%s renderer produced no output", self.name)
            return
        sink.write(text)
