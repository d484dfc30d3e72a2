#!/usr/bin/env python3
"""
pybench CLI -- Entry point for the micro-benchmark harness.

Runs the default workload suite once and prints the report. The output
format follows the execution context: an HTML page under a CGI web
server, Rich tables on a terminal, plain text otherwise.

Usage:
  pybench
  pybench --help
"""

from __future__ import annotations

import argparse
import logging
import sys

from kernel.config import APP_NAME, APP_VERSION, LOG_FORMAT, LOG_LEVEL, MIN_PYTHON
from kernel.console import configure

logger = logging.getLogger("pybench")


def check_python_version() -> None:
    """Exit with status 1 when the interpreter is older than MIN_PYTHON.

    The message goes to stderr, never into a report or CGI response body.
    """
    if sys.version_info < MIN_PYTHON:
        required = ".".join(str(part) for part in MIN_PYTHON)
        print(f"Python {required} or higher is required.", file=sys.stderr)
        sys.exit(1)


def main(argv: list[str] | None = None) -> None:
    check_python_version()

    parser = argparse.ArgumentParser(
        prog=APP_NAME,
        description=f"{APP_NAME} {APP_VERSION} -- run the micro-benchmark suite and print a report",
        epilog="Set PYBENCH_LOG_LEVEL=DEBUG to log every measurement to stderr.",
    )
    parser.parse_args(argv)

    # -- Console configuration ----------------------------------------------
    configure(backend="auto")

    # -- Logging configuration (stderr, never mixed into the report) --------
    logging.basicConfig(stream=sys.stderr, level=LOG_LEVEL, format=LOG_FORMAT)

    from kernel.loop import run_session

    outcome = run_session()
    logger.info("Reported %d results", len(outcome.results))


if __name__ == "__main__":
    main()
