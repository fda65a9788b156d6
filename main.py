#!/usr/bin/env python3
"""
Scoped Progress - Main Entry Point

Runs a simulated workload:
1. Start an outer scope for the whole workload
2. Run each job in its own (optionally nested) scope, on one or more threads
"""

import sys
import logging
from typing import Optional, Sequence

from scoped_progress.cli.config import parse_arguments
from scoped_progress.logging import LoggingManager
from scoped_progress.progress import ProgressConfig, create_progress_reporter, set_reporter, format_duration
from scoped_progress.exceptions import ProgressError
from scoped_progress.workflows import run_simulated_workload

logger = logging.getLogger(__name__)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """
    Main entry point - parse config and execute the simulated workload.

    Returns:
        Exit code: 0 for success, 2 for fatal errors, 130 on interrupt
    """
    args = parse_arguments(argv)

    logging_manager = LoggingManager.get_instance()

    try:
        logging_manager.setup(args.console_log_level, log_file=args.log_file)

        config = ProgressConfig(
            progress_delay_ms=args.progress_delay_ms,
            throttle_interval_ms=args.throttle_interval_ms,
        )
        reporter = create_progress_reporter(args.sink, verbose=logging_manager.is_verbose, config=config)
        set_reporter(reporter)

        # Log records and progress lines share one sink
        logging_manager.set_sink(reporter.sink)

        stats = run_simulated_workload(
            reporter,
            jobs=args.jobs,
            items=args.items,
            delay=args.delay,
            workers=args.workers,
            nested=args.nested,
        )

        logger.info("=" * 70)
        logger.info("WORKLOAD COMPLETE")
        logger.info("=" * 70)
        logger.info(f"Jobs completed: {stats.jobs_completed}")
        logger.info(f"Items processed: {stats.items_processed}")
        logger.info(f"Elapsed: {format_duration(stats.elapsed_seconds)}")

        return 0

    except ProgressError as e:
        logging_manager.display_critical_error(f"Progress reporting failed: {e}")
        logger.debug("Full error details:", exc_info=True)
        return 2

    except KeyboardInterrupt:
        logger.warning("\nWorkload interrupted by user (Ctrl+C)")
        return 130  # Standard exit code for SIGINT

    except Exception as e:
        logging_manager.display_critical_error(f"Unexpected error occurred: {e}")
        logger.debug("Full error details:", exc_info=True)
        return 2

    finally:
        set_reporter(None)
        logging_manager.cleanup()


if __name__ == '__main__':
    sys.exit(main())
