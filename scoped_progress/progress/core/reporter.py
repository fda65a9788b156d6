"""
Core Progress Reporter Module

Starts scopes, reports throttled progress for the innermost scope of the
caller's execution context, and writes a completion summary when a scope ends.
"""

import logging
import time
from typing import Callable, Optional

from scoped_progress.progress.config import ProgressConfig, get_config
from scoped_progress.progress.core.scope import Clock, Scope
from scoped_progress.progress.core.stack import ScopeStack
from scoped_progress.progress.display.base import OutputSink, StreamSink
from scoped_progress.progress.formatting import format_duration, format_progress_line
from scoped_progress.exceptions import ScopeStackError

logger = logging.getLogger(__name__)

VerboseFlag = Callable[[], bool]


def _never_verbose() -> bool:
    return False


class ProgressScope:
    """
    Disposal handle for a started scope.

    Use it as a context manager so the scope is released on every exit path,
    including exceptions:

        with reporter.start("Restore packages"):
            for i, package in enumerate(packages):
                restore(package)
                reporter.update(i + 1, len(packages))
    """

    def __init__(self, reporter: "ProgressReporter", scope: Scope) -> None:
        self._reporter = reporter
        self.scope = scope
        self._closed = False

    @property
    def name(self) -> str:
        return self.scope.name

    @property
    def closed(self) -> bool:
        return self._closed

    def update(self, done: int, total: int) -> None:
        """Report progress for the innermost scope of the current context."""
        self._reporter.update(done, total)

    def close(self) -> None:
        """
        End the scope: pop it and write the completion summary.

        Raises:
            ScopeStackError: If the scope was already closed or is not the
                innermost scope of the current context
        """
        if self._closed:
            raise ScopeStackError(f"Progress scope '{self.scope.name}' disposed twice")
        self._reporter._finish(self.scope)
        self._closed = True

    def __enter__(self) -> "ProgressScope":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()


class ProgressReporter:
    """
    Progress reporter for nested, context-scoped operations.

    Holds no scope state of its own: scopes live on the per-context
    ScopeStack, so one reporter can be shared by any number of threads and
    asyncio tasks.
    """

    def __init__(
        self,
        sink: Optional[OutputSink] = None,
        verbose: Optional[VerboseFlag] = None,
        config: Optional[ProgressConfig] = None,
        clock: Clock = time.monotonic,
    ) -> None:
        """
        Initialize progress reporter.

        Args:
            sink: Output sink (defaults to a plain stderr stream)
            verbose: Zero-argument callable returning the verbosity flag
            config: Progress configuration (defaults to the global config)
            clock: Monotonic clock returning seconds
        """
        self.sink = sink or StreamSink()
        self._verbose = verbose or _never_verbose
        self._config = config
        self.clock = clock

    @property
    def config(self) -> ProgressConfig:
        return self._config or get_config()

    def is_verbose(self) -> bool:
        return bool(self._verbose())

    def start(self, name: str) -> ProgressScope:
        """
        Start a scope and make it the innermost scope of the current context.

        Args:
            name: Display label for the operation

        Returns:
            ProgressScope handle that ends the scope when closed
        """
        if not name:
            raise ValueError("Progress scope name must be a non-empty string")

        scope = Scope(name=name, start_time=self.clock(), clock=self.clock)
        ScopeStack.push(scope)

        if self.is_verbose():
            self.sink.write(f"{name}{self.config.start_marker}\r")

        return ProgressScope(self, scope)

    def update(self, done: int, total: int) -> None:
        """
        Report progress for the innermost scope of the current context.

        Nothing is written during the first seconds of a scope, and in-progress
        lines are throttled; the completing call (done == total) always writes.

        Args:
            done: Number of items completed
            total: Number of items expected (0 when unknown)

        Raises:
            ScopeStackError: If no scope is active in the current context
        """
        scope = ScopeStack.peek()
        config = self.config

        elapsed_ms = scope.elapsed_ms()
        if elapsed_ms < config.progress_delay_ms:
            return

        if done != total and elapsed_ms - scope.last_reported_elapsed_ms < config.throttle_interval_ms:
            return

        scope.last_reported_elapsed_ms = elapsed_ms
        self.sink.write(
            format_progress_line(scope.name, done, total, elapsed_ms, width=config.percent_width)
        )

    def _finish(self, scope: Scope) -> None:
        ScopeStack.pop(expected=scope)

        elapsed_ms = scope.elapsed_ms()
        if self.is_verbose() or elapsed_ms > self.config.progress_delay_ms:
            self.sink.write(f"{scope.name} done in {format_duration(scope.elapsed_seconds())}\n")
