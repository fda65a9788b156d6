"""
Progress Configuration Module

Configuration dataclass and output sink selection with thread safety.
"""

import logging
from dataclasses import dataclass
from enum import Enum
from threading import RLock
from typing import Dict, Optional, Type

from scoped_progress.exceptions import SinkError
from scoped_progress.progress.display.base import OutputSink, StreamSink
from scoped_progress.progress.display.rich_sink import RichConsoleSink
from scoped_progress.progress.display.tqdm_sink import TqdmSink

logger = logging.getLogger(__name__)


@dataclass
class ProgressConfig:
    """Configuration settings for progress reporting."""

    # Timing (in milliseconds)
    progress_delay_ms: int = 2000  # Quiet period before any progress line
    throttle_interval_ms: int = 1000  # Minimum gap between in-progress lines

    # Formatting
    percent_width: int = 3
    start_marker: str = "..."  # Appended to the scope name in verbose mode


# Global configuration instance
_config = ProgressConfig()
_config_lock = RLock()


def get_config() -> ProgressConfig:
    """Get the current global progress configuration."""
    with _config_lock:
        return _config


def set_config(config: ProgressConfig) -> None:
    """Set the global progress configuration."""
    global _config
    with _config_lock:
        _config = config


def update_config(**kwargs) -> None:
    """Update specific configuration values."""
    with _config_lock:
        for key, value in kwargs.items():
            if hasattr(_config, key):
                setattr(_config, key, value)
            else:
                raise ValueError(f"Unknown configuration option: {key}")


class SinkMode(Enum):
    """Output sink modes."""
    AUTO = "auto"    # Best sink for the current terminal
    RICH = "rich"    # Rich console
    TQDM = "tqdm"    # tqdm.write, cooperating with tqdm bars
    PLAIN = "plain"  # Raw stream writes


class SinkRegistry:
    """Thread-safe registry of output sinks with auto-selection."""

    # Priority order for AUTO: Rich > tqdm > plain
    _priority = (SinkMode.RICH, SinkMode.TQDM, SinkMode.PLAIN)

    def __init__(self) -> None:
        self._lock = RLock()
        self._sinks: Dict[SinkMode, Type[OutputSink]] = {}

    def register(self, mode: SinkMode, sink_class: Type[OutputSink]) -> None:
        """Register a sink class for a mode."""
        with self._lock:
            self._sinks[mode] = sink_class
            logger.debug(f"Registered output sink: {mode.value}")

    def get_sink_class(self, mode: SinkMode) -> Optional[Type[OutputSink]]:
        """Get the sink class registered for a mode."""
        with self._lock:
            return self._sinks.get(mode)

    def create(self, mode: SinkMode = SinkMode.AUTO) -> OutputSink:
        """
        Instantiate a sink for the given mode.

        Args:
            mode: Requested sink mode; AUTO picks the best available sink

        Returns:
            OutputSink instance

        Raises:
            SinkError: If no sink is registered for an explicit mode
        """
        if mode == SinkMode.AUTO:
            return self.auto_select()

        sink_class = self.get_sink_class(mode)
        if sink_class is None:
            raise SinkError(f"No output sink registered for mode '{mode.value}'")
        return sink_class()

    def auto_select(self) -> OutputSink:
        """Pick the highest-priority sink that is available, falling back to plain."""
        with self._lock:
            for mode in self._priority:
                sink_class = self._sinks.get(mode)
                if sink_class is None:
                    continue
                sink = sink_class()
                if sink.is_available():
                    logger.debug(f"Auto-selected output sink: {type(sink).__name__}")
                    return sink
                logger.debug(f"Output sink {mode.value} unavailable")

        logger.debug("No registered sink available, using plain stderr stream")
        return StreamSink()

    def list_available(self) -> Dict[str, bool]:
        """List all sinks and their availability."""
        with self._lock:
            return {
                mode.value: sink_class().is_available()
                for mode, sink_class in self._sinks.items()
            }


# Global sink registry
_sink_registry = SinkRegistry()
_sink_registry.register(SinkMode.RICH, RichConsoleSink)
_sink_registry.register(SinkMode.TQDM, TqdmSink)
_sink_registry.register(SinkMode.PLAIN, StreamSink)


def get_sink_registry() -> SinkRegistry:
    """Get the global sink registry."""
    return _sink_registry
