"""Core data types for pybench.

All types are frozen dataclasses with complete type annotations.
This module has ZERO imports from outside the Python standard library.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Mapping

    from domain.ports import Workload


class RunPhase(Enum):
    """Lifecycle of a single harness run."""

    IDLE = "idle"
    RUNNING = "running"
    COMPLETED = "completed"
    REPORTED = "reported"
    ABORTED = "aborted"


# ---------------------------------------------------------------------------
# Registration
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class TestDefinition:
    """A named workload and the iteration count it is invoked with."""

    __test__ = False

    name: str
    iteration_count: int
    workload: Workload


# ---------------------------------------------------------------------------
# Measurement
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class TestResult:
    """Measurement of one TestDefinition.

    ``memory_delta`` is never negative: a reading below the baseline
    (the collector reclaimed memory that predates the test) is clamped to 0.
    """

    __test__ = False

    name: str
    elapsed_seconds: float
    memory_delta: int


@dataclass(frozen=True)
class RunTotals:
    """Run-wide aggregates, produced once per run."""

    total_elapsed_seconds: float
    peak_memory: int
    captured_output: str


@dataclass(frozen=True)
class RunOutcome:
    """Everything the Aggregator hands to the Reporter."""

    results: tuple[TestResult, ...]
    totals: RunTotals

    def names(self) -> list[str]:
        """Return result names in run order."""
        return [r.name for r in self.results]


# ---------------------------------------------------------------------------
# Reporting
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class ReportRow:
    """One line of the results table."""

    name: str
    time: str


@dataclass(frozen=True)
class Report:
    """Logical structure of a rendered report, independent of styling."""

    title: str
    subtitle: str
    summary: tuple[tuple[str, str], ...]
    environment: tuple[tuple[str, str], ...]
    rows: tuple[ReportRow, ...]

    def summary_dict(self) -> dict[str, str]:
        """Return the header summary as an ordered dict."""
        return dict(self.summary)

    def environment_dict(self) -> dict[str, str]:
        """Return the environment facts as an ordered dict."""
        return dict(self.environment)


def facts_from(mapping: Mapping[str, object]) -> tuple[tuple[str, str], ...]:
    """Freeze an environment mapping into ordered string pairs."""
    return tuple((str(k), str(v)) for k, v in mapping.items())
