"""
Rich Output Sink

Writes progress lines through a Rich console so they share the console used
for error panels and degrade cleanly when output is redirected.
"""

import logging
from typing import Iterator, Optional, Tuple

from rich.console import Console
from rich.control import Control
from rich.segment import ControlType

from scoped_progress.progress.display.base import OutputSink

logger = logging.getLogger(__name__)


def _split_lines(text: str) -> Iterator[Tuple[str, str]]:
    """Yield (content, terminator) pairs; the terminator is '\\r', '\\n' or ''."""
    start = 0
    for index, char in enumerate(text):
        if char in "\r\n":
            yield text[start:index], char
            start = index + 1
    if start < len(text):
        yield text[start:], ""


class RichConsoleSink(OutputSink):
    """
    Rich-based output sink.

    Features:
    - Plain output (no markup, no highlighting, no wrapping) of progress text
    - Carriage returns sent as terminal control codes on interactive consoles
    - Carriage returns turned into newlines when the console is not a
      terminal, so redirected output simply accumulates lines
    """

    def __init__(self, console: Optional[Console] = None) -> None:
        """
        Initialize Rich output sink.

        Args:
            console: Optional Rich console instance (defaults to a stderr console)
        """
        super().__init__()
        self.console = console or Console(stderr=True, highlight=False, soft_wrap=True)

    def is_available(self) -> bool:
        """Rich is only preferred when it can rewrite lines in place."""
        return self.supports_overwrite()

    def supports_overwrite(self) -> bool:
        return self.console.is_terminal and not self.console.is_dumb_terminal

    def _write(self, text: str) -> None:
        for content, terminator in _split_lines(text):
            if content:
                self.console.out(content, end="", highlight=False)
            if terminator == "\n":
                self.console.line()
            elif terminator == "\r":
                if self.supports_overwrite():
                    self.console.control(Control(ControlType.CARRIAGE_RETURN))
                else:
                    self.console.line()
