"""
Logging Manager - Core Handler Management

Main LoggingManager class that installs the progress-aware console handler,
owns the verbosity flag read by the progress reporter, and displays critical
errors.
"""

import logging
import sys
from pathlib import Path
from threading import RLock
from typing import List, Optional

from rich.console import Console
from rich.panel import Panel
from rich.text import Text

from scoped_progress.logging.handlers import ProgressAwareConsoleHandler
from scoped_progress.progress.display.base import OutputSink

logger = logging.getLogger(__name__)


class LoggingManager:
    """
    Thread-safe logging manager shared with the progress reporter.

    Features:
    - Console handler writing through the progress output sink
    - Optional file handler that always logs at DEBUG
    - Verbosity flag derived from the console level (INFO or lower)
    - Rich error panels for fatal errors
    """

    # Class-level lock for thread safety across instances
    _global_lock = RLock()
    _instance: Optional['LoggingManager'] = None

    def __init__(self) -> None:
        """Initialize logging manager with thread-safe state."""
        self._lock = RLock()
        self._console_handler: Optional[ProgressAwareConsoleHandler] = None
        self._file_handler: Optional[logging.FileHandler] = None
        self._original_handlers: List[logging.Handler] = []
        self._console_level = logging.WARNING

        # Rich console for error display (lazy initialized)
        self._rich_console: Optional[Console] = None

    @classmethod
    def get_instance(cls) -> 'LoggingManager':
        """Get or create singleton instance (thread-safe)."""
        if cls._instance is None:
            with cls._global_lock:
                if cls._instance is None:
                    cls._instance = LoggingManager()
        return cls._instance

    def setup(
        self,
        console_level: int = logging.WARNING,
        log_file: Optional[Path] = None,
        sink: Optional[OutputSink] = None,
    ) -> None:
        """
        Configure console logging, and file logging when a log file is given.

        Args:
            console_level: Logging level for console output (default: WARNING)
                          - WARNING: Only errors and warnings (minimal output)
                          - INFO: Workflow steps and scope start lines (--verbose)
                          - DEBUG: All technical details (--debug)
            log_file: Optional path to a log file that receives every record
            sink: Output sink shared with the progress reporter
        """
        with self._lock:
            self._console_level = console_level

            console_formatter = logging.Formatter(
                '%(levelname)s - %(message)s' if console_level >= logging.INFO
                else '%(levelname)s - %(name)s - %(message)s'
            )

            self._console_handler = ProgressAwareConsoleHandler(sink=sink)
            self._console_handler.setLevel(console_level)
            self._console_handler.setFormatter(console_formatter)

            root_logger = logging.getLogger()
            root_logger.setLevel(logging.DEBUG)

            # Store original handlers before replacement
            self._original_handlers = root_logger.handlers.copy()
            root_logger.handlers.clear()
            root_logger.addHandler(self._console_handler)

            if log_file is not None:
                log_file.parent.mkdir(parents=True, exist_ok=True)
                self._file_handler = logging.FileHandler(log_file)
                self._file_handler.setLevel(logging.DEBUG)
                self._file_handler.setFormatter(logging.Formatter(
                    '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
                ))
                root_logger.addHandler(self._file_handler)

            logger.debug("Logging manager setup complete")

    def set_sink(self, sink: OutputSink) -> None:
        """Route console records through the given progress sink."""
        with self._lock:
            if self._console_handler:
                self._console_handler.set_sink(sink)

    def is_verbose(self) -> bool:
        """Verbosity flag read by the progress reporter."""
        return self._console_level <= logging.INFO

    def display_critical_error(self, message: str, title: str = "Critical Error") -> None:
        """
        Display a fatal error as a Rich panel on stderr.

        Any in-place progress line is committed first so the panel starts on
        a fresh line.

        Args:
            message: Error text to display
            title: Panel title
        """
        with self._lock:
            if self._console_handler:
                self._console_handler.sink.commit_line()

            if not self._rich_console:
                self._rich_console = Console(stderr=True)

            error_text = Text()
            error_text.append("ERROR", style="bold red")
            error_text.append(f": {message}", style="red")

            panel = Panel(
                error_text,
                title=f"⚠️  {title}",
                border_style="red",
                padding=(0, 1),
                expand=False,
            )
            self._rich_console.print(panel)

    def cleanup(self) -> None:
        """
        Clean up logging manager resources.

        Restores original handlers and closes the file handler.
        """
        with self._lock:
            root_logger = logging.getLogger()
            for handler in (self._console_handler, self._file_handler):
                if handler is not None and handler in root_logger.handlers:
                    root_logger.removeHandler(handler)

            if self._original_handlers:
                root_logger.handlers.extend(self._original_handlers)
                self._original_handlers = []

            if self._file_handler:
                try:
                    self._file_handler.close()
                except OSError as e:
                    sys.stderr.write(f"Warning: Logging manager cleanup error: {e}\n")
                self._file_handler = None

            self._console_handler = None
            self._console_level = logging.WARNING


def setup_logging(
    console_level: int = logging.WARNING,
    log_file: Optional[Path] = None,
    sink: Optional[OutputSink] = None,
) -> LoggingManager:
    """
    Setup logging with progress-aware management.

    Args:
        console_level: Console logging level
        log_file: Optional log file path
        sink: Output sink shared with the progress reporter

    Returns:
        LoggingManager instance for advanced control
    """
    manager = LoggingManager.get_instance()
    manager.setup(console_level, log_file=log_file, sink=sink)
    return manager
