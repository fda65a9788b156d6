"""
Progress-Aware Console Handler

Custom logging handler that shares the progress output sink so log records
never land on top of an in-place progress line.
"""

import logging
from typing import Optional

from scoped_progress.progress.display.base import OutputSink, StreamSink


class ProgressAwareConsoleHandler(logging.Handler):
    """
    Console handler that respects in-place progress lines.

    Before a record is written, any progress line left open by a carriage
    return is terminated, so the record starts on a fresh line and the
    progress text stays readable. Records go through the same sink as the
    progress lines, which keeps every write line-atomic.
    """

    def __init__(self, sink: Optional[OutputSink] = None) -> None:
        """
        Initialize progress-aware console handler.

        Args:
            sink: Output sink shared with the progress reporter (default: stderr)
        """
        super().__init__()
        self.sink = sink or StreamSink()

    def set_sink(self, sink: OutputSink) -> None:
        """Switch to a different output sink."""
        self.acquire()
        try:
            self.sink = sink
        finally:
            self.release()

    def emit(self, record: logging.LogRecord) -> None:
        """
        Emit a log record below any open progress line.

        Args:
            record: LogRecord to emit
        """
        try:
            message = self.format(record)
            self.sink.write_line(message)
        except Exception:
            self.handleError(record)
