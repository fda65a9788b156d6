"""
Pytest configuration and shared fixtures for scoped_progress tests.

Provides a manually advanced clock, an in-memory output sink and a reporter
wired to both, so timing behaviour is tested without sleeping.
"""

from __future__ import annotations

from collections.abc import Generator
from threading import Lock

import pytest

from scoped_progress.progress import ProgressConfig, ProgressReporter, ScopeStack
from scoped_progress.progress.display.base import OutputSink


class FakeClock:
    """Monotonic clock that only moves when told to."""

    def __init__(self, start: float = 0.0) -> None:
        self._now = start
        self._lock = Lock()

    def __call__(self) -> float:
        with self._lock:
            return self._now

    def advance(self, seconds: float) -> None:
        with self._lock:
            self._now += seconds


class MemorySink(OutputSink):
    """Sink collecting every write in memory."""

    def __init__(self) -> None:
        super().__init__()
        self.writes: list[str] = []

    def is_available(self) -> bool:
        return True

    def _write(self, text: str) -> None:
        self.writes.append(text)

    @property
    def output(self) -> str:
        return "".join(self.writes)


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def sink() -> MemorySink:
    return MemorySink()


@pytest.fixture
def verbose_flag() -> dict[str, bool]:
    """Mutable verbosity flag; flip ``flag["on"]`` inside a test."""
    return {"on": False}


@pytest.fixture
def reporter(sink: MemorySink, clock: FakeClock, verbose_flag: dict[str, bool]) -> ProgressReporter:
    return ProgressReporter(
        sink=sink,
        verbose=lambda: verbose_flag["on"],
        config=ProgressConfig(),
        clock=clock,
    )


@pytest.fixture(autouse=True)
def empty_scope_stack() -> Generator[None, None, None]:
    """Fail loudly if a test leaks scopes, and clear them so later tests start clean."""
    assert ScopeStack.depth() == 0
    yield
    leaked = ScopeStack.depth()
    while ScopeStack.depth():
        ScopeStack.pop()
    assert leaked == 0, f"test leaked {leaked} progress scope(s)"
