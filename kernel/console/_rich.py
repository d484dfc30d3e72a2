"""kernel.console._rich -- Rich-based TUI backend.

Provides coloured, structured terminal output using the Rich library.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from rich import box
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table
from rich.theme import Theme

if TYPE_CHECKING:
    from typing import TextIO

_THEME = Theme(
    {
        "title": "bold #2c3e50",
        "subtitle": "#7f8c8d",
        "section": "bold #2980b9",
        "time": "#d35400",
        "memory": "#27ae60",
        "dim": "dim",
    }
)


class RichBackend:
    """ConsoleProtocol implementation backed by Rich."""

    def __init__(self, console: Console | None = None, *, file: TextIO | None = None) -> None:
        self._con = console or Console(theme=_THEME, highlight=False, file=file)

    @property
    def rich_console(self) -> Console:
        return self._con

    # -- Structured panels --------------------------------------------------

    def table(self, headers: list[str], rows: list[list[str]], *, title: str = "") -> None:
        t = Table(
            title=escape(title) or None,
            title_style="section",
            title_justify="left",
            box=box.SIMPLE,
            show_edge=False,
            pad_edge=True,
            expand=True,
        )
        for i, h in enumerate(headers):
            last = i == len(headers) - 1 and i > 0
            t.add_column(
                escape(h),
                justify="right" if last else "left",
                style="time" if last else None,
            )
        for r in rows:
            t.add_row(*(escape(str(cell)) for cell in r))
        self._con.print(t)

    def kv(self, data: dict[str, str], *, title: str = "") -> None:
        t = Table(
            title=escape(title) or None,
            title_style="section",
            title_justify="left",
            box=box.SIMPLE,
            show_header=False,
            show_edge=False,
            pad_edge=True,
        )
        t.add_column("Key", style="bold")
        t.add_column("Value", justify="right")
        for k, v in data.items():
            t.add_row(escape(k), escape(str(v)))
        self._con.print(t)

    # -- Report lifecycle ---------------------------------------------------

    def header(self, title: str, *, subtitle: str = "", summary: dict[str, str]) -> None:
        styles = ("time", "memory")
        parts = [
            f"{escape(k)}: [{styles[i % len(styles)]}]{escape(v)}[/]"
            for i, (k, v) in enumerate(summary.items())
        ]
        heading = f"[title]{escape(title.upper())}[/]"
        if subtitle:
            heading += f" [subtitle]{escape(subtitle)}[/]"
        self._con.print(
            Panel(
                " | ".join(parts),
                title=heading,
                title_align="left",
                border_style="dim",
                box=box.ROUNDED,
                padding=(0, 1),
            ),
        )

    def finalize(self) -> None:
        self._con.file.flush()
