"""kernel.console._plain -- Plain-text backend.

print()-based output with no external dependencies.
Used when stdout is not a TTY (pipes, redirects, CI logs).
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from typing import TextIO


class PlainBackend:
    """ConsoleProtocol implementation using only built-in print().

    Writes to *file*, or to whatever ``sys.stdout`` is at call time when
    *file* is None.
    """

    def __init__(self, file: TextIO | None = None) -> None:
        self._file = file

    def _print(self, text: str = "") -> None:
        print(text, file=self._file)

    # -- Structured panels --------------------------------------------------

    def table(self, headers: list[str], rows: list[list[str]], *, title: str = "") -> None:
        if title:
            self._print(f"\n  {title}:")

        if not headers:
            return

        # Calculate column widths
        all_rows = [headers, *rows]
        col_widths = [
            max(len(str(row[i])) if i < len(row) else 0 for row in all_rows)
            for i in range(len(headers))
        ]

        # Header
        header_line = "  " + "  ".join(
            h.ljust(w) for h, w in zip(headers, col_widths, strict=True)
        )
        self._print(header_line.rstrip())
        self._print("  " + "  ".join("-" * w for w in col_widths))

        # Rows; the last column is right-aligned like the Time column of a report
        for row in rows:
            cells = [
                str(row[i]) if i < len(row) else ""
                for i in range(len(headers))
            ]
            padded = [c.ljust(w) for c, w in zip(cells[:-1], col_widths[:-1], strict=True)]
            padded.append(cells[-1].rjust(col_widths[-1]))
            self._print("  " + "  ".join(padded))

    def kv(self, data: dict[str, str], *, title: str = "") -> None:
        if title:
            self._print(f"\n  {title}:")
        if not data:
            return
        max_key = max(len(k) for k in data)
        for k, v in data.items():
            self._print(f"  {k.rjust(max_key)}: {v}")

    # -- Report lifecycle ---------------------------------------------------

    def header(self, title: str, *, subtitle: str = "", summary: dict[str, str]) -> None:
        rule = "━" * 60
        heading = f"{title.upper()} {subtitle}".rstrip()
        self._print(rule)
        self._print(f"  {heading}")
        if summary:
            self._print("  " + " | ".join(f"{k}: {v}" for k, v in summary.items()))
        self._print(rule)

    def finalize(self) -> None:
        if self._file is not None:
            self._file.flush()
