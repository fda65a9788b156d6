"""
tqdm Output Sink

Writes progress lines through tqdm so they cooperate with any tqdm bars the
host tool has on screen.
"""

import sys
from typing import Optional, TextIO

from tqdm import tqdm

from scoped_progress.progress.display.base import OutputSink


class TqdmSink(OutputSink):
    """
    tqdm-based output sink for compatibility.

    Uses tqdm.write, which clears active bars, writes the text, and redraws
    the bars underneath it.
    """

    def __init__(self, file: Optional[TextIO] = None) -> None:
        """
        Initialize tqdm output sink.

        Args:
            file: Output stream (defaults to stderr)
        """
        super().__init__()
        self.file = file or sys.stderr

    def is_available(self) -> bool:
        """Check if the target stream is an interactive terminal."""
        return hasattr(self.file, "isatty") and self.file.isatty()

    def _write(self, text: str) -> None:
        tqdm.write(text, file=self.file, end="")
        self.file.flush()
