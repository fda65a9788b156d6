"""Command-line configuration."""

from scoped_progress.cli.config import parse_arguments

__all__ = ['parse_arguments']
