"""tracemalloc adapter implementing MemoryProbePort.

Measures the Python heap as seen by :mod:`tracemalloc`. ``current()`` sums
a snapshot filtered by the file of the innermost allocating frame, which
drops allocations made by the probe itself, by tracemalloc and by any
extra harness files passed as ``exclude`` (timestamps, result objects).
Without that filter a workload that allocates nothing would still show a
few dozen bytes of measurement overhead.

Allocations made through the system allocator (e.g. large NumPy buffers)
are not traced.

``peak()`` is not a tracemalloc figure: it is the resident high-water mark
of the whole process (``ru_maxrss``), so memory held before tracing started
still counts.
"""

from __future__ import annotations

import contextlib
import logging
import resource
import sys
import tracemalloc
from contextlib import contextmanager
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterable, Iterator

logger = logging.getLogger("pybench.probe")


class TracemallocProbe:
    """Concrete MemoryProbePort implementation backed by tracemalloc.

    Parameters
    ----------
    exclude:
        Source file paths whose allocations are not attributed to workloads.

    """

    def __init__(self, exclude: Iterable[str] = ()) -> None:
        patterns = [tracemalloc.__file__, contextlib.__file__, __file__, *exclude]
        self._filters = [tracemalloc.Filter(False, p) for p in dict.fromkeys(patterns)]

    @property
    def excluded(self) -> list[str]:
        """File patterns dropped from ``current()``."""
        return [f.filename_pattern for f in self._filters]

    @contextmanager
    def activate(self) -> Iterator[None]:
        """Trace allocations for the duration of the block.

        Starts tracing only if it is not already on, and stops it only if
        this call started it, so activations nest freely.
        """
        started = False
        if not tracemalloc.is_tracing():
            tracemalloc.start()
            started = True
            logger.debug("tracemalloc started")
        try:
            yield
        finally:
            if started:
                tracemalloc.stop()
                logger.debug("tracemalloc stopped")

    def current(self) -> int:
        """Bytes currently traced, excluding harness bookkeeping."""
        snapshot = tracemalloc.take_snapshot().filter_traces(self._filters)
        return sum(trace.size for trace in snapshot.traces)

    def peak(self) -> int:
        """Maximum resident set size of this process so far, in bytes."""
        maxrss = resource.getrusage(resource.RUSAGE_SELF).ru_maxrss
        # kilobytes everywhere except macOS
        if sys.platform == "darwin":
            return maxrss
        return maxrss * 1024
