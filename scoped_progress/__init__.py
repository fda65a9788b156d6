"""Scoped Progress Package"""

# Expose key components at package level for convenience

# Exceptions (centralized)
from scoped_progress.exceptions import ProgressError, ScopeStackError, SinkError

# Progress
from scoped_progress.progress import (
    ProgressReporter,
    ProgressScope,
    ScopeStack,
    bind_context,
    submit_in_context,
    format_duration,
    create_progress_reporter,
)

# Logging
from scoped_progress.logging import LoggingManager, setup_logging

# Workflows
from scoped_progress.workflows import run_simulated_workload

# CLI
from scoped_progress.cli import parse_arguments

__version__ = "0.2.0"
__all__ = [
    # Exceptions
    "ProgressError",
    "ScopeStackError",
    "SinkError",
    # Progress
    "ProgressReporter",
    "ProgressScope",
    "ScopeStack",
    "bind_context",
    "submit_in_context",
    "format_duration",
    "create_progress_reporter",
    # Logging
    "LoggingManager",
    "setup_logging",
    # Workflows
    "run_simulated_workload",
    # CLI
    "parse_arguments",
]
