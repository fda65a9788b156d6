"""Workflows that exercise progress reporting."""

from scoped_progress.workflows.simulate import WorkloadStats, run_job, run_simulated_workload

__all__ = ['WorkloadStats', 'run_job', 'run_simulated_workload']
