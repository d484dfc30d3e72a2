"""Shared pytest fixtures and test factories for pybench.

Provides:
- Fake port implementations (MemoryProbe, clock, ReportSink)
- Factory functions for the domain models with sensible defaults
- Pytest fixtures wrapping the most commonly used fakes
"""

from __future__ import annotations

from contextlib import contextmanager
from typing import TYPE_CHECKING, Any

import pytest

from domain.models import RunOutcome, RunTotals, TestDefinition, TestResult

if TYPE_CHECKING:
    from collections.abc import Callable, Iterable, Iterator

    from domain.ports import Workload


# ── Fake Port Implementations ─────────────────────────────────────────────


class FakeProbe:
    """Scripted MemoryProbePort.

    ``current()`` pops the next value from *readings*; once they run out
    it keeps returning the last one (or 0 when none were given).
    """

    def __init__(self, readings: Iterable[int] = (), *, peak: int = 0) -> None:
        self._readings = list(readings)
        self._last = 0
        self.peak_value = peak
        self.activations = 0
        self.active = 0
        self.peak_calls = 0

    @contextmanager
    def activate(self) -> Iterator[None]:
        self.activations += 1
        self.active += 1
        try:
            yield
        finally:
            self.active -= 1

    def current(self) -> int:
        if self._readings:
            self._last = self._readings.pop(0)
        return self._last

    def peak(self) -> int:
        self.peak_calls += 1
        return self.peak_value


class FakeClock:
    """Monotonic clock advancing by *step* seconds on every call."""

    def __init__(self, start: float = 100.0, step: float = 0.5) -> None:
        self.now = start
        self.step = step
        self.calls = 0

    def __call__(self) -> float:
        value = self.now
        self.now += self.step
        self.calls += 1
        return value


class RecordingSink:
    """ReportSinkPort / ConsoleProtocol that records every call in order."""

    def __init__(self) -> None:
        self.calls: list[tuple[str, Any]] = []
        self.finalized = False

    def header(self, title: str, *, subtitle: str = "", summary: dict[str, str]) -> None:
        self.calls.append(("header", (title, subtitle, dict(summary))))

    def table(self, headers: list[str], rows: list[list[str]], *, title: str = "") -> None:
        self.calls.append(("table", (title, list(headers), [list(r) for r in rows])))

    def kv(self, data: dict[str, str], *, title: str = "") -> None:
        self.calls.append(("kv", (title, dict(data))))

    def finalize(self) -> None:
        self.finalized = True

    def kinds(self) -> list[str]:
        """Return the recorded method names in call order."""
        return [kind for kind, _ in self.calls]


# ── Workloads ─────────────────────────────────────────────────────────────


def noop(_limit: int) -> int:
    """Workload that does nothing and allocates nothing."""
    return 0


def failing(_limit: int) -> None:
    msg = "workload exploded"
    raise RuntimeError(msg)


# ── Domain Model Factories ───────────────────────────────────────────────


def make_definition(
    name: str = "noop",
    iteration_count: int = 1,
    workload: Workload = noop,
) -> TestDefinition:
    return TestDefinition(name=name, iteration_count=iteration_count, workload=workload)


def make_result(
    name: str = "noop",
    elapsed_seconds: float = 0.5,
    memory_delta: int = 0,
) -> TestResult:
    return TestResult(name=name, elapsed_seconds=elapsed_seconds, memory_delta=memory_delta)


def make_outcome(
    results: Iterable[TestResult] | None = None,
    *,
    total_elapsed_seconds: float | None = None,
    peak_memory: int = 2048,
    captured_output: str = "",
) -> RunOutcome:
    """Build a RunOutcome; the total defaults to the sum of result times."""
    resolved = tuple(results) if results is not None else (make_result(),)
    if total_elapsed_seconds is None:
        total_elapsed_seconds = sum(r.elapsed_seconds for r in resolved)
    return RunOutcome(
        results=resolved,
        totals=RunTotals(
            total_elapsed_seconds=total_elapsed_seconds,
            peak_memory=peak_memory,
            captured_output=captured_output,
        ),
    )


# ── Pytest Fixtures ──────────────────────────────────────────────────────


@pytest.fixture
def fake_probe() -> FakeProbe:
    return FakeProbe()


@pytest.fixture
def fake_clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def sink() -> RecordingSink:
    return RecordingSink()


@pytest.fixture
def sample_outcome() -> RunOutcome:
    return make_outcome(
        [make_result("Math", 1.23456789, 512), make_result("IO::File Read", 0.25, 0)],
        total_elapsed_seconds=1.5,
        peak_memory=1572864,
    )


@pytest.fixture
def probe_factory() -> Callable[..., FakeProbe]:
    return FakeProbe


@pytest.fixture
def definition_factory() -> Callable[..., TestDefinition]:
    return make_definition


@pytest.fixture
def result_factory() -> Callable[..., TestResult]:
    return make_result


@pytest.fixture
def outcome_factory() -> Callable[..., RunOutcome]:
    return make_outcome


@pytest.fixture
def failing_workload() -> Callable[[int], None]:
    return failing
