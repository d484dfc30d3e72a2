"""Port interfaces for pybench.

All ports are defined as typing.Protocol — structural subtyping means any class
with matching method signatures satisfies the Protocol without inheritance.

This module has ZERO external imports — only stdlib and typing.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from contextlib import AbstractContextManager


class Workload(Protocol):
    """A unit of work measured by the harness.

    Takes the iteration count and returns an arbitrary value. The value is
    never interpreted; it only keeps the computation from being dead code.
    Workloads may print; that text is captured at the run level.
    """

    def __call__(self, iteration_count: int, /) -> object:
        """Run the workload ``iteration_count`` times."""
        ...


class MemoryProbePort(Protocol):
    """Abstraction over live-memory measurement."""

    def activate(self) -> AbstractContextManager[None]:
        """Make the probe ready to measure for the duration of the block.

        Must be re-entrant: nested activations are no-ops.
        """
        ...

    def current(self) -> int:
        """Return the bytes currently in use."""
        ...

    def peak(self) -> int:
        """Return the resident high-water mark of the process in bytes."""
        ...


class ReportSinkPort(Protocol):
    """Where a rendered report is written (satisfied by the console backends)."""

    def header(self, title: str, *, subtitle: str = "", summary: dict[str, str]) -> None:
        """Display the report banner with its run summary."""
        ...

    def table(self, headers: list[str], rows: list[list[str]], *, title: str = "") -> None:
        """Display a table with *headers* and *rows*."""
        ...

    def kv(self, data: dict[str, str], *, title: str = "") -> None:
        """Display key-value pairs."""
        ...
