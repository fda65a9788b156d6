"""
Progress Output Sinks

Plain stream, Rich and tqdm destinations for progress text.
"""

from scoped_progress.progress.display.base import OutputSink, StreamSink
from scoped_progress.progress.display.rich_sink import RichConsoleSink
from scoped_progress.progress.display.tqdm_sink import TqdmSink

__all__ = [
    'OutputSink',
    'StreamSink',
    'RichConsoleSink',
    'TqdmSink',
]
