"""Reporter module — turns a run outcome into a two-section report.

Duration and size formatting are pure functions. Writing goes through a
ReportSinkPort (the console backends), so the same report renders as
Rich tables, plain text or an HTML document.

This module depends only on domain/ types and has zero external imports beyond stdlib.
"""

from __future__ import annotations

import logging
from decimal import ROUND_HALF_UP, Decimal
from typing import TYPE_CHECKING

from domain.models import Report, ReportRow, facts_from

if TYPE_CHECKING:
    from collections.abc import Mapping

    from domain.models import RunOutcome
    from domain.ports import ReportSinkPort

logger = logging.getLogger("pybench.reporter")

_KB = 1024
_MB = 1024 * 1024
_CENTS = Decimal("0.01")

REPORT_TITLE = "Python Benchmark"
REPORT_SUBTITLE = "v1.0"

# ---------------------------------------------------------------------------
# Formatting (pure)
# ---------------------------------------------------------------------------


def _compact(value: float) -> str:
    """Round half up to 2 decimals and drop trailing zeros (1.0 -> "1", 1.125 -> "1.13")."""
    rounded = Decimal(value).quantize(_CENTS, ROUND_HALF_UP)
    if rounded == rounded.to_integral_value():
        return str(int(rounded))
    return f"{rounded:f}".rstrip("0").rstrip(".")


def format_size(size_bytes: int) -> str:
    """Format a byte count as B, KB or MB.

    >>> format_size(1572864)
    '1.5 MB'
    """
    if size_bytes == 0:
        return "0 B"
    if size_bytes < _KB:
        return f"{size_bytes} B"
    if size_bytes < _MB:
        return f"{_compact(size_bytes / _KB)} KB"
    return f"{_compact(size_bytes / _MB)} MB"


def format_time(seconds: float) -> str:
    """Format a duration with 4 decimals and a thousands separator.

    >>> format_time(1.23456789)
    '1.2346 s'
    """
    return f"{seconds:,.4f} s"


# ---------------------------------------------------------------------------
# Report construction and rendering
# ---------------------------------------------------------------------------


def build_report(facts: Mapping[str, object], outcome: RunOutcome) -> Report:
    """Build the logical report for *facts* and *outcome*. Pure."""
    return Report(
        title=REPORT_TITLE,
        subtitle=REPORT_SUBTITLE,
        summary=(
            ("Total Time", format_time(outcome.totals.total_elapsed_seconds)),
            ("Peak Mem", format_size(outcome.totals.peak_memory)),
        ),
        environment=facts_from(facts),
        rows=tuple(
            ReportRow(name=result.name, time=format_time(result.elapsed_seconds))
            for result in outcome.results
        ),
    )


class Reporter:
    """Writes reports to a sink. Never mutates the outcome it is given."""

    def __init__(self, sink: ReportSinkPort) -> None:
        self._sink = sink

    def render(self, facts: Mapping[str, object], outcome: RunOutcome) -> Report:
        """Build the report and write it to the sink.

        Sections, in order: header with the run summary, "System Info"
        key/value table, "Test Results" table.
        """
        report = build_report(facts, outcome)
        self._sink.header(report.title, subtitle=report.subtitle, summary=report.summary_dict())
        self._sink.kv(report.environment_dict(), title="System Info")
        self._sink.table(
            ["Test Name", "Time"],
            [[row.name, row.time] for row in report.rows],
            title="Test Results",
        )
        logger.debug("Rendered report with %d rows", len(report.rows))
        return report
