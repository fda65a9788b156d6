"""
Output Sink Base

Defines the sink interface the progress reporter writes to, plus the plain
stream implementation used when no richer console is wanted.
"""

import sys
from abc import ABC, abstractmethod
from threading import RLock
from typing import Optional, TextIO


class OutputSink(ABC):
    """
    Abstract base class for progress output sinks.

    A sink accepts raw text. Each write() call is atomic with respect to other
    writes on the same sink, so lines from concurrent contexts never mix.
    Sinks remember whether the last write left an open line (one ending in a
    carriage return) so other output can terminate it first.
    """

    def __init__(self) -> None:
        self._lock = RLock()
        self._line_open = False

    def write(self, text: str) -> None:
        """Write raw text to the sink."""
        if not text:
            return
        with self._lock:
            self._write(text)
            self._line_open = text.endswith("\r") and self.supports_overwrite()

    def commit_line(self) -> None:
        """Terminate an in-place line left open by a previous write."""
        with self._lock:
            if self._line_open:
                self._write("\n")
                self._line_open = False

    def write_line(self, text: str) -> None:
        """Write a complete line below any in-place line left open."""
        with self._lock:
            self.commit_line()
            self.write(f"{text}\n")

    def supports_overwrite(self) -> bool:
        """Whether a carriage return rewrites the current line in place."""
        return True

    @property
    def line_open(self) -> bool:
        return self._line_open

    @abstractmethod
    def _write(self, text: str) -> None:
        """Write text to the underlying destination. Called with the lock held."""
        pass

    @abstractmethod
    def is_available(self) -> bool:
        """Check if this sink can be used in the current environment."""
        pass


class StreamSink(OutputSink):
    """
    Sink that writes straight to a text stream.

    On a terminal, carriage returns are written as-is. When the stream is a
    file or pipe they become newlines, so redirected output accumulates one
    line per report.
    """

    def __init__(self, stream: Optional[TextIO] = None) -> None:
        """
        Initialize stream sink.

        Args:
            stream: Output stream (defaults to stderr)
        """
        super().__init__()
        self.stream = stream or sys.stderr

    def is_available(self) -> bool:
        return True

    def supports_overwrite(self) -> bool:
        return hasattr(self.stream, "isatty") and self.stream.isatty()

    def _write(self, text: str) -> None:
        if not self.supports_overwrite():
            text = text.replace("\r", "\n")
        self.stream.write(text)
        self.stream.flush()
