"""
wiring.py — Composition root.

Builds the harness from modules/ and adapters/. This is the only file
that knows which concrete memory probe and console sink are in use;
the modules themselves see only the ports in domain/ports.py.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import modules.aggregator.core as _aggregator_core
import modules.executor.core as _executor_core
from adapters.tracemalloc_probe import TracemallocProbe
from benchmarks.suite import register_default_suite
from kernel.console import get_console
from modules.aggregator.core import Aggregator
from modules.environment.core import collect_environment_facts as _collect_facts
from modules.executor.core import Executor
from modules.registry.core import Registry
from modules.reporter.core import Reporter

if TYPE_CHECKING:
    from collections.abc import Iterable, Mapping

    from domain.models import Report, RunOutcome, TestDefinition

logger = logging.getLogger("pybench.wiring")

# Harness files whose own allocations (timestamps, results) are not
# charged to the workloads they measure.
_HARNESS_FILES = (_executor_core.__file__, _aggregator_core.__file__)


# ---------------------------------------------------------------------------
# Harness construction
# ---------------------------------------------------------------------------


def build_probe() -> TracemallocProbe:
    return TracemallocProbe(exclude=_HARNESS_FILES)


def build_registry(definitions: Iterable[TestDefinition] | None = None) -> Registry:
    """Return a registry holding *definitions*, or the default suite when None."""
    registry = Registry()
    if definitions is None:
        register_default_suite(registry)
    else:
        registry.extend(definitions)
    logger.debug("Registry built with %d tests", len(registry))
    return registry


def build_executor(probe: TracemallocProbe | None = None) -> Executor:
    return Executor(probe or build_probe())


def build_aggregator(registry: Registry) -> Aggregator:
    """Return a fresh single-use Aggregator over *registry*.

    Executor and Aggregator share one probe, so tracing is started once
    for the whole run.
    """
    probe = build_probe()
    return Aggregator(registry, build_executor(probe), probe)


# ---------------------------------------------------------------------------
# Reporting
# ---------------------------------------------------------------------------


def collect_environment_facts() -> dict[str, str]:
    return _collect_facts()


def render_report(facts: Mapping[str, object], outcome: RunOutcome) -> Report:
    """Render *outcome* to the configured console backend."""
    return Reporter(get_console()).render(facts, outcome)
