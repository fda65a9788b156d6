"""
Progress Utilities

Helper functions for setting up progress reporting and the process-default
reporter behind the module-level start/update functions.
"""

import logging
from threading import RLock
from typing import Dict, Optional

from scoped_progress.progress.config import ProgressConfig, SinkMode, get_sink_registry
from scoped_progress.progress.core.reporter import ProgressReporter, VerboseFlag

logger = logging.getLogger(__name__)

_default_reporter: Optional[ProgressReporter] = None
_default_lock = RLock()


def _logging_verbose_flag() -> bool:
    # Imported here to avoid a circular import with the logging package
    from scoped_progress.logging import LoggingManager
    return LoggingManager.get_instance().is_verbose()


def create_progress_reporter(
    mode_str: str = "auto",
    verbose: Optional[VerboseFlag] = None,
    config: Optional[ProgressConfig] = None,
) -> ProgressReporter:
    """
    Create a progress reporter writing to the sink for the given mode.

    Args:
        mode_str: Sink mode string ("auto", "rich", "tqdm", "plain")
        verbose: Verbosity flag; defaults to the LoggingManager's flag
        config: Progress configuration; defaults to the global config

    Returns:
        ProgressReporter instance
    """
    try:
        mode = SinkMode(mode_str.lower())
    except ValueError:
        logger.warning(f"Invalid progress sink '{mode_str}', using 'auto'")
        mode = SinkMode.AUTO

    sink = get_sink_registry().create(mode)
    logger.debug(f"Progress reporter writing to {type(sink).__name__}")
    return ProgressReporter(sink=sink, verbose=verbose or _logging_verbose_flag, config=config)


def get_reporter() -> ProgressReporter:
    """Get the process-default reporter, creating it on first use."""
    global _default_reporter
    if _default_reporter is None:
        with _default_lock:
            if _default_reporter is None:
                _default_reporter = create_progress_reporter()
    return _default_reporter


def set_reporter(reporter: Optional[ProgressReporter]) -> None:
    """Replace the process-default reporter; None resets it to lazy creation."""
    global _default_reporter
    with _default_lock:
        _default_reporter = reporter


def check_progress_dependencies() -> Dict[str, object]:
    """
    Check which output sinks can be used in the current environment.

    Returns:
        Dictionary with availability information
    """
    available_sinks = get_sink_registry().list_available()

    return {
        'rich_available': available_sinks.get('rich', False),
        'tqdm_available': available_sinks.get('tqdm', False),
        'available_sinks': available_sinks,
    }
