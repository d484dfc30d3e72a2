"""File IO workloads.

Both workloads create their scratch file in the system temp directory and
remove it before returning, whether or not the loop completes.
"""

from __future__ import annotations

import logging
from pathlib import Path

from kernel.config import IO_READ_FILE, IO_WRITE_FILE

logger = logging.getLogger("pybench.benchmarks.filesystem")

_CHUNK = "1234567890" * 500


def file_write(limit: int, *, path: Path | None = None) -> int:
    """Append a 5000-byte chunk *limit* times, reopening the file on every write."""
    target = path or IO_WRITE_FILE
    target.unlink(missing_ok=True)
    logger.debug("Writing %d chunks to %s", limit, target)
    try:
        for _ in range(limit):
            with target.open("a", encoding="ascii") as fh:
                fh.write(_CHUNK)
        return target.stat().st_size
    finally:
        target.unlink(missing_ok=True)


def file_read(limit: int, *, path: Path | None = None) -> int:
    """Read a 100 KB file back *limit* times."""
    target = path or IO_READ_FILE
    target.write_text(_CHUNK * 20, encoding="ascii")
    logger.debug("Reading %s %d times", target, limit)
    size = 0
    try:
        for _ in range(limit):
            size = len(target.read_text(encoding="ascii"))
        return size
    finally:
        target.unlink(missing_ok=True)
