"""Aggregator module — drives the Executor over the whole Registry.

Owns the run lifecycle (IDLE -> RUNNING -> COMPLETED -> REPORTED), the
stdout capture buffer shared by all workloads, and the run-wide totals.
Per-test measurement is entirely the Executor's job.

This module depends only on domain/ types and has zero external imports beyond stdlib.
"""

from __future__ import annotations

import contextlib
import io
import logging
import time
from typing import TYPE_CHECKING

from domain.models import RunOutcome, RunPhase, RunTotals, TestResult

if TYPE_CHECKING:
    from collections.abc import Callable

    from domain.ports import MemoryProbePort
    from modules.executor.core import Executor
    from modules.registry.core import Registry

logger = logging.getLogger("pybench.aggregator")


class HarnessStateError(RuntimeError):
    """An operation was attempted in the wrong run phase."""


class Aggregator:
    """One harness instance: a registry, its results and its totals.

    Instances are single-use. Build a new one for every run so that
    independent runs never share state.
    """

    def __init__(
        self,
        registry: Registry,
        executor: Executor,
        probe: MemoryProbePort,
        *,
        clock: Callable[[], float] = time.perf_counter,
    ) -> None:
        self._registry = registry
        self._executor = executor
        self._probe = probe
        self._clock = clock
        self._phase = RunPhase.IDLE
        self._results: list[TestResult] = []
        self._totals: RunTotals | None = None

    @property
    def phase(self) -> RunPhase:
        return self._phase

    @property
    def registry(self) -> Registry:
        return self._registry

    @property
    def results(self) -> tuple[TestResult, ...]:
        return tuple(self._results)

    @property
    def totals(self) -> RunTotals | None:
        return self._totals

    def run_all(self) -> RunOutcome:
        """Run every registered definition in order and return the outcome.

        Raises:
            HarnessStateError: if this instance has already run.
            InvalidTestDefinitionError: if a definition fails validation.
            Exception: whatever a workload raises; the run is aborted and
                results collected so far are discarded.
        """
        if self._phase is not RunPhase.IDLE:
            msg = f"Cannot start a run in phase {self._phase.value!r}"
            raise HarnessStateError(msg)

        self._registry.validate()

        self._phase = RunPhase.RUNNING
        logger.info("Run started: %d tests", len(self._registry))
        buffer = io.StringIO()
        try:
            with self._probe.activate(), contextlib.redirect_stdout(buffer):
                run_start = self._clock()
                baseline = self._probe.current()
                logger.debug("Run baseline memory: %d bytes", baseline)

                for definition in self._registry:
                    self._results.append(self._executor.run(definition))

                total_elapsed = self._clock() - run_start
                peak = self._probe.peak()
        except BaseException:
            logger.error("Run aborted after %d of %d tests", len(self._results), len(self._registry))
            self._phase = RunPhase.ABORTED
            self._results.clear()
            raise

        self._totals = RunTotals(
            total_elapsed_seconds=total_elapsed,
            peak_memory=peak,
            captured_output=buffer.getvalue(),
        )
        self._phase = RunPhase.COMPLETED
        logger.info("Run completed in %.4fs (peak %d bytes)", total_elapsed, peak)
        return RunOutcome(results=tuple(self._results), totals=self._totals)

    def mark_reported(self) -> None:
        """Record that the outcome has been rendered."""
        if self._phase is not RunPhase.COMPLETED:
            msg = f"Cannot report a run in phase {self._phase.value!r}"
            raise HarnessStateError(msg)
        self._phase = RunPhase.REPORTED
