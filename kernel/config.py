"""
kernel/config.py — Project paths and configuration constants.

All settings live here as module constants; there is no configuration
file and no persisted state. The only environment variable read is
PYBENCH_LOG_LEVEL.
"""

from __future__ import annotations

import os
import tempfile
from pathlib import Path

# ---------------------------------------------------------------------------
# Identity
# ---------------------------------------------------------------------------

APP_NAME = "pybench"
APP_VERSION = "1.0"

# ---------------------------------------------------------------------------
# Preconditions
# ---------------------------------------------------------------------------

# Oldest interpreter the harness and its workloads run on
MIN_PYTHON: tuple[int, int] = (3, 11)

# ---------------------------------------------------------------------------
# Logging
# ---------------------------------------------------------------------------

LOG_LEVEL = os.environ.get("PYBENCH_LOG_LEVEL", "WARNING").upper()
LOG_FORMAT = "%(asctime)s %(name)s %(levelname)s %(message)s"

# ---------------------------------------------------------------------------
# Workload resources
# ---------------------------------------------------------------------------

TMP_DIR = Path(tempfile.gettempdir())
IO_WRITE_FILE = TMP_DIR / "py_bench_io_test.txt"
IO_READ_FILE = TMP_DIR / "py_bench_io_read.txt"

# Extra bytes the memory workload may allocate beyond what it starts with
MEMORY_WORKLOAD_CAP = 30 * 1024 * 1024
