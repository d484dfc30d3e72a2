"""Executor module — measures one test definition in isolation.

Each run is bracketed by full garbage-collection passes so that the
baseline is not polluted by the previous test's garbage and the next
test starts from a comparably clean heap. Workload faults are not
caught: they abort the whole run.

This module depends only on domain/ types and has zero external imports beyond stdlib.
"""

from __future__ import annotations

import gc
import logging
import time
from typing import TYPE_CHECKING

from domain.models import TestDefinition, TestResult

if TYPE_CHECKING:
    from collections.abc import Callable

    from domain.ports import MemoryProbePort

logger = logging.getLogger("pybench.executor")


class Executor:
    """Runs a single TestDefinition and returns its TestResult.

    The memory probe, clock and collector are constructor-injected so the
    measurement sequence can be exercised deterministically in tests.
    """

    def __init__(
        self,
        probe: MemoryProbePort,
        *,
        clock: Callable[[], float] = time.perf_counter,
        collect: Callable[[], object] = gc.collect,
    ) -> None:
        self._probe = probe
        self._clock = clock
        self._collect = collect

    def run(self, definition: TestDefinition) -> TestResult:
        """Measure *definition*.

        Steps:
        1. Pre-isolation collection pass.
        2. Baseline memory, then start timestamp.
        3. Invoke the workload (synchronous, no timeout).
        4. Drop the return value.
        5. Elapsed time and clamped memory delta.
        6. Post-isolation collection pass.
        """
        with self._probe.activate():
            self._collect()

            baseline = self._probe.current()
            start = self._clock()

            result = definition.workload(definition.iteration_count)
            del result

            elapsed = self._clock() - start
            raw_delta = self._probe.current() - baseline

            self._collect()

        if raw_delta < 0:
            logger.debug("%s: negative memory delta %d clamped to 0", definition.name, raw_delta)

        measured = TestResult(
            name=definition.name,
            elapsed_seconds=elapsed,
            memory_delta=max(0, raw_delta),
        )
        logger.debug(
            "%s: %.6fs, %d bytes", measured.name, measured.elapsed_seconds, measured.memory_delta
        )
        return measured
