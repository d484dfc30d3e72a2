"""
kernel/loop.py — One benchmark session, start to finish.

Registry -> run -> environment facts -> report -> finalize. Harness
pieces are obtained through wiring.py; this file only sequences them.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from kernel.console import console

if TYPE_CHECKING:
    from collections.abc import Iterable, Mapping

    from domain.models import RunOutcome, TestDefinition

logger = logging.getLogger("pybench.loop")


def run_session(
    definitions: Iterable[TestDefinition] | None = None,
    *,
    facts: Mapping[str, object] | None = None,
) -> RunOutcome:
    """Run *definitions* (default suite when None) and render the report.

    Workload faults propagate before anything is rendered, so a failed
    run never produces a partial report.
    """
    import wiring

    registry = wiring.build_registry(definitions)
    aggregator = wiring.build_aggregator(registry)

    outcome = aggregator.run_all()

    if outcome.totals.captured_output:
        logger.debug("Workloads wrote %d characters to stdout", len(outcome.totals.captured_output))

    if facts is None:
        facts = wiring.collect_environment_facts()
    wiring.render_report(facts, outcome)
    aggregator.mark_reported()

    console.finalize()
    return outcome
