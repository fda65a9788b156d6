"""
Logging Module - Progress-Aware Logging System

Console log records share the progress output sink, so a record never
overwrites or gets overwritten by an in-place progress line. The manager also
owns the verbosity flag the progress reporter reads.

Usage:
    from scoped_progress.logging import setup_logging

    manager = setup_logging(logging.INFO, sink=reporter.sink)
    manager.is_verbose()  # True at INFO and below
"""

from scoped_progress.logging.manager import LoggingManager, setup_logging
from scoped_progress.logging.handlers import ProgressAwareConsoleHandler

__all__ = [
    'LoggingManager',
    'ProgressAwareConsoleHandler',
    'setup_logging',
]
