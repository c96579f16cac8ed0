# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
"""Resumable sequential benchmark driver."""

import logging
import time
from collections.abc import Callable, Sequence

from buildbench.common.exceptions import ExecutionError
from buildbench.orchestrator.checkpoint import CheckpointStore
from buildbench.orchestrator.executor import BuildExecutorProtocol
from buildbench.orchestrator.models import AllResults
from buildbench.orchestrator.results import ResultStore

logger = logging.getLogger(__name__)

__all__ = [
    "BenchmarkDriver",
]


class BenchmarkDriver:
    """Benchmarks revisions one at a time, persisting progress after each.

    For every revision the driver:
    1. Saves the checkpoint (before any build work starts)
    2. Runs the executor
    3. Records the measurements into the in-memory results
    4. Saves the full results snapshot

    A crash between steps 1 and 4 leaves the checkpoint one revision ahead of the
    results. The next run resumes *at* the checkpointed revision and redoes it, so no
    revision is skipped and completed revisions are never measured twice.

    Errors are not retried. Any failure propagates to the caller and ends the run.
    """

    def __init__(
        self,
        checkpoint_store: CheckpointStore,
        result_store: ResultStore,
        executor: BuildExecutorProtocol,
        warmup: bool = True,
        clock: Callable[[], float] = time.perf_counter,
    ):
        """Initialize BenchmarkDriver.

        Args:
            checkpoint_store: Where the in-flight revision is recorded
            result_store: Where accumulated measurements are persisted
            executor: Performs checkout, patch, and builds for a revision
            warmup: Build the first revision once, unrecorded, before measuring
            clock: Monotonic time source used for progress output
        """
        self.checkpoint_store = checkpoint_store
        self.result_store = result_store
        self.executor = executor
        self.warmup = warmup
        self._clock = clock

    def resume(self, revisions: Sequence[str]) -> tuple[int, AllResults]:
        """Return the resume index and the previously accumulated results."""
        return (
            self.checkpoint_store.resolve_resume_index(revisions),
            self.result_store.load(),
        )

    def fresh_start(self) -> tuple[int, AllResults]:
        """Discard stored progress and return a start at index 0 with empty results.

        The empty snapshot is persisted immediately so that a crash during the first
        revision cannot resume on top of the discarded results.
        """
        results = AllResults()
        self.checkpoint_store.clear()
        self.result_store.save(results)
        return 0, results

    def run(self, revisions: Sequence[str], fresh: bool = False) -> AllResults:
        """Benchmark every revision from the resume point to the end of the list.

        Args:
            revisions: All revisions to benchmark, in processing order
            fresh: Ignore stored progress and start from the first revision

        Returns:
            The accumulated results after the last revision

        Raises:
            BuildBenchError: Any persistence, state, or execution failure
        """
        if not revisions:
            logger.warning("Revision list is empty, nothing to benchmark")
            return AllResults() if fresh else self.result_store.load()

        start_index, results = self.fresh_start() if fresh else self.resume(revisions)
        total = len(revisions)

        started_at = self._clock()

        if self.warmup:
            self._warm_up(revisions[0])

        for index in range(start_index, total):
            revision = revisions[index]
            logger.info(
                f"{self._clock() - started_at:.3E} secs: "
                f"Processing revision {index}/{total}: {revision}"
            )
            self._process_revision(results, revision)

        logger.info(
            f"All revisions complete: processed {total - start_index} of {total} "
            f"in {self._clock() - started_at:.1f} secs"
        )
        return results

    def _process_revision(self, results: AllResults, revision: str) -> None:
        self.checkpoint_store.save(revision)
        measurements = self.executor.execute(revision)
        self.result_store.record_measurements(results, revision, measurements)
        self.result_store.save(results)

    def _warm_up(self, revision: str) -> None:
        """Build `revision` once into throwaway results to absorb cold-start costs.

        Nothing from the warm-up is persisted. An execution failure is logged and
        does not stop the run; measured revisions report their own failures.
        """
        logger.info(f"Warming up with revision {revision}...")
        scratch = AllResults()
        try:
            measurements = self.executor.execute(revision)
        except ExecutionError as e:
            logger.warning(f"Warm-up failed, continuing without it: {e}")
            return
        ResultStore.record_measurements(scratch, revision, measurements)
        logger.debug(f"Warm-up complete for {revision}")
