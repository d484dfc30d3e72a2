"""kernel.console._protocol -- ConsoleProtocol definition.

Pure standard-library typing.Protocol for the pybench terminal output system.
No external dependencies allowed in this file.
"""

from __future__ import annotations

from typing import Protocol


class ConsoleProtocol(Protocol):
    """pybench output protocol.

    Two layers of methods:

    **Structured panels** -- tables and key-value displays::

        console.table(["Test Name", "Time"], [["Math", "0.1234 s"]], title="Test Results")
        console.kv({"Python": "3.12.1", "OS": "Linux"}, title="System Info")

    **Report lifecycle** -- used by the Reporter and kernel/loop.py::

        console.header("Python Benchmark", subtitle="v1.0", summary={...})
        console.finalize()
    """

    # -- Structured panels ---------------------------------------------------

    def table(self, headers: list[str], rows: list[list[str]], *, title: str = "") -> None:
        """Display a table with *headers* and *rows*."""
        ...

    def kv(self, data: dict[str, str], *, title: str = "") -> None:
        """Display key-value pairs."""
        ...

    # -- Report lifecycle ---------------------------------------------------

    def header(self, title: str, *, subtitle: str = "", summary: dict[str, str]) -> None:
        """Display the report banner: title, subtitle and run summary."""
        ...

    def finalize(self) -> None:
        """Flush any buffered document to the output sink."""
        ...
