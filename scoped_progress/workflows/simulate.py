"""
Simulated Workload

Drives the progress reporter with jobs that sleep per item, optionally nested
and fanned out over a thread pool, so the reporting behaviour can be watched
from the command line.
"""

import logging
import time
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass, field
from typing import Callable, Dict, List

from scoped_progress.progress import ProgressReporter, submit_in_context
from scoped_progress.utils import log_section_header

logger = logging.getLogger(__name__)


@dataclass
class WorkloadStats:
    """Counts collected while running a simulated workload."""
    jobs_completed: int = 0
    items_processed: int = 0
    elapsed_seconds: float = 0.0
    per_job: Dict[str, int] = field(default_factory=dict)


def run_job(
    reporter: ProgressReporter,
    name: str,
    items: int,
    delay: float,
    nested: bool = False,
    sleep: Callable[[float], None] = time.sleep,
) -> int:
    """
    Run one simulated job inside its own progress scope.

    Args:
        reporter: Reporter to start scopes on
        name: Job display name
        items: Number of items to process
        delay: Seconds spent per item
        nested: Run a nested verification scope after the main loop
        sleep: Sleep function (replaceable in tests)

    Returns:
        Number of items processed
    """
    with reporter.start(name):
        for done in range(1, items + 1):
            sleep(delay)
            reporter.update(done, items)

        if nested:
            with reporter.start(f"{name} verify"):
                checks = max(1, items // 4)
                for done in range(1, checks + 1):
                    sleep(delay)
                    reporter.update(done, checks)

    logger.debug(f"Job '{name}' processed {items} items")
    return items


def run_simulated_workload(
    reporter: ProgressReporter,
    jobs: int,
    items: int,
    delay: float,
    workers: int = 1,
    nested: bool = False,
    sleep: Callable[[float], None] = time.sleep,
) -> WorkloadStats:
    """
    Run `jobs` simulated jobs under an outer "Workload" scope.

    With more than one worker, jobs run on a thread pool; each job thread
    starts from a snapshot of the caller's scopes, so jobs report into their
    own scopes without touching each other or the outer scope.

    Returns:
        WorkloadStats with per-job item counts
    """
    log_section_header("SIMULATED WORKLOAD")
    logger.info(f"Jobs: {jobs}, items per job: {items}, workers: {workers}")

    stats = WorkloadStats()
    names: List[str] = [f"Job {index + 1}" for index in range(jobs)]
    started = time.monotonic()

    with reporter.start("Workload"):
        if workers <= 1:
            for done, name in enumerate(names, start=1):
                stats.per_job[name] = run_job(reporter, name, items, delay, nested, sleep)
                reporter.update(done, jobs)
        else:
            with ThreadPoolExecutor(max_workers=workers) as executor:
                futures = {
                    name: submit_in_context(executor, run_job, reporter, name, items, delay, nested, sleep)
                    for name in names
                }
                for done, (name, future) in enumerate(futures.items(), start=1):
                    stats.per_job[name] = future.result()
                    reporter.update(done, jobs)

    stats.jobs_completed = len(stats.per_job)
    stats.items_processed = sum(stats.per_job.values())
    stats.elapsed_seconds = time.monotonic() - started
    return stats
