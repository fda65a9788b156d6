"""Tests for the module-level progress functions."""

import pytest

from scoped_progress import progress
from scoped_progress.progress import ScopeStack


@pytest.fixture
def default_reporter(reporter):
    progress.set_reporter(reporter)
    yield reporter
    progress.set_reporter(None)


def test_module_functions_use_the_default_reporter(default_reporter, sink, clock):
    with progress.start("Publish") as handle:
        assert ScopeStack.peek() is handle.scope
        clock.advance(2.5)
        progress.update(3, 3)

    assert sink.writes == [
        "Publish: 100% (3/3), 00:00:02 \n",
        "Publish done in 2.5s\n",
    ]


def test_get_reporter_is_created_lazily_once():
    progress.set_reporter(None)
    try:
        first = progress.get_reporter()
        assert progress.get_reporter() is first
    finally:
        progress.set_reporter(None)


def test_format_duration_is_exported():
    assert progress.format_duration(1.5) == "1.5s"
