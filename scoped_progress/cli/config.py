"""
CLI Configuration Module

Handles command-line argument parsing and environment configuration.
"""

import os
import argparse
import logging
from pathlib import Path
from typing import Optional, Sequence

from dotenv import load_dotenv

from scoped_progress.progress.config import SinkMode

logger = logging.getLogger(__name__)


def _env_int(name: str, default: int, minimum: int = 0) -> int:
    """Read an integer environment variable, falling back to `default` when invalid."""
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        value = int(raw)
    except ValueError:
        logger.warning(f"Invalid {name} value '{raw}', using default {default}")
        return default
    if value < minimum:
        logger.warning(f"{name} must be at least {minimum}, got {value}. Using default {default}.")
        return default
    return value


def parse_arguments(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    """
    Parse command-line arguments and load environment configuration.

    Args:
        argv: Argument list (defaults to sys.argv[1:])

    Returns:
        argparse.Namespace: Parsed arguments with additional attributes:
            - console_log_level: int
            - progress_delay_ms: int
            - throttle_interval_ms: int
    """
    # Load environment variables from .env file (if present)
    load_dotenv()

    env_sink = os.getenv('PROGRESS_SINK', SinkMode.AUTO.value)
    env_log_file = os.getenv('LOG_FILE')
    progress_delay_ms = _env_int('PROGRESS_DELAY_MS', 2000)
    throttle_interval_ms = _env_int('THROTTLE_INTERVAL_MS', 1000)

    sink_choices = [mode.value for mode in SinkMode]
    if env_sink not in sink_choices:
        logger.warning(f"Invalid PROGRESS_SINK value '{env_sink}', using default 'auto'")
        env_sink = SinkMode.AUTO.value

    parser = argparse.ArgumentParser(
        description='Run a simulated workload with nested, context-scoped progress reporting'
    )
    parser.add_argument(
        '--verbose', '-v',
        action='store_true',
        help='Show scope start lines, every completion summary and INFO logs'
    )
    parser.add_argument(
        '--debug',
        action='store_true',
        help='Show DEBUG logs (implies --verbose)'
    )
    parser.add_argument(
        '--sink',
        type=str,
        choices=sink_choices,
        default=env_sink,
        help=f'Progress output sink (default: {env_sink})'
    )
    parser.add_argument(
        '--log-file',
        type=Path,
        default=Path(env_log_file) if env_log_file and env_log_file.strip() else None,
        help='Optional log file receiving DEBUG output'
    )
    parser.add_argument(
        '--jobs',
        type=int,
        default=3,
        help='Number of simulated jobs (default: 3)'
    )
    parser.add_argument(
        '--items',
        type=int,
        default=40,
        help='Items processed per job (default: 40)'
    )
    parser.add_argument(
        '--delay',
        type=float,
        default=0.1,
        help='Seconds spent per item (default: 0.1)'
    )
    parser.add_argument(
        '--workers',
        type=int,
        default=1,
        help='Jobs run concurrently on this many threads (default: 1)'
    )
    parser.add_argument(
        '--nested',
        action='store_true',
        help='Run a nested verification scope inside every job'
    )

    args = parser.parse_args(argv)

    for option in ('jobs', 'items', 'workers'):
        if getattr(args, option) < 1:
            parser.error(f"--{option} must be at least 1")
    if args.delay < 0:
        parser.error("--delay must not be negative")

    if args.debug:
        args.console_log_level = logging.DEBUG
    elif args.verbose:
        args.console_log_level = logging.INFO
    else:
        args.console_log_level = logging.WARNING

    args.progress_delay_ms = progress_delay_ms
    args.throttle_interval_ms = throttle_interval_ms

    return args
