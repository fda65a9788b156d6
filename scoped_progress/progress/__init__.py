"""
Progress Reporting Module

Nested, context-scoped progress reporting for long-running operations.
Subsystems start a named scope, report done/total counts, and let the scope
handle write a completion summary; throttling, nesting and output policy are
handled here.

Usage:
    from scoped_progress import progress

    with progress.start("Build"):
        for i, item in enumerate(items):
            build(item)
            progress.update(i + 1, len(items))
"""

from scoped_progress.progress.core import (
    Scope,
    ScopeStack,
    ProgressReporter,
    ProgressScope,
    bind_context,
    submit_in_context,
)
from scoped_progress.progress.display import OutputSink, StreamSink, RichConsoleSink, TqdmSink
from scoped_progress.progress.formatting import (
    compute_percent,
    format_clock,
    format_duration,
    format_progress_line,
)
from scoped_progress.progress.config import (
    ProgressConfig,
    SinkMode,
    get_config,
    set_config,
    update_config,
    get_sink_registry,
)
from scoped_progress.progress.utils import (
    create_progress_reporter,
    get_reporter,
    set_reporter,
    check_progress_dependencies,
)


def start(name: str) -> ProgressScope:
    """Start a scope on the process-default reporter."""
    return get_reporter().start(name)


def update(done: int, total: int) -> None:
    """Report progress for the innermost scope of the current context."""
    get_reporter().update(done, total)


__all__ = [
    'start',
    'update',
    'Scope',
    'ScopeStack',
    'ProgressReporter',
    'ProgressScope',
    'bind_context',
    'submit_in_context',
    'OutputSink',
    'StreamSink',
    'RichConsoleSink',
    'TqdmSink',
    'compute_percent',
    'format_clock',
    'format_duration',
    'format_progress_line',
    'ProgressConfig',
    'SinkMode',
    'get_config',
    'set_config',
    'update_config',
    'get_sink_registry',
    'create_progress_reporter',
    'get_reporter',
    'set_reporter',
    'check_progress_dependencies',
]
