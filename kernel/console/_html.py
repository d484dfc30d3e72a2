"""kernel.console._html -- HTML document backend for CGI execution.

Renders through Rich into a recording console, then emits CGI response
headers followed by the recorded output exported as a standalone HTML page.
"""

from __future__ import annotations

import io
import sys
from typing import TYPE_CHECKING

from rich.console import Console

from kernel.console._rich import _THEME, RichBackend

if TYPE_CHECKING:
    from typing import TextIO

_HEADERS = (
    ("Content-Type", "text/html; charset=utf-8"),
    ("Expires", "Wed, 11 Jan 1984 05:00:00 GMT"),
    ("Cache-Control", "no-cache, must-revalidate, max-age=0"),
)


class HtmlBackend(RichBackend):
    """ConsoleProtocol implementation producing one HTML document.

    Nothing is written until ``finalize()``.
    """

    def __init__(self, file: TextIO | None = None, *, send_headers: bool = True) -> None:
        super().__init__(
            Console(
                theme=_THEME,
                highlight=False,
                record=True,
                file=io.StringIO(),
                width=100,
                force_terminal=True,
            )
        )
        self._out = file
        self._send_headers = send_headers

    def render_document(self) -> str:
        """Return the recorded output as HTML and clear the recording."""
        return self._con.export_html(inline_styles=True)

    def finalize(self) -> None:
        out = self._out or sys.stdout
        if self._send_headers:
            for name, value in _HEADERS:
                out.write(f"{name}: {value}\r\n")
            out.write("\r\n")
        out.write(self.render_document())
        out.flush()
