"""kernel.console -- pybench output system.

Usage (any file)::

    from kernel.console import console

    console.table(["Test Name", "Time"], [["Math", "0.1234 s"]])

Configuration (call once in ``cli.py:main()``)::

    from kernel.console import configure

    configure(backend="auto")  # "rich" | "plain" | "html" | "auto"
"""

from __future__ import annotations

import os
import sys
from typing import TYPE_CHECKING

from kernel.console._plain import PlainBackend

if TYPE_CHECKING:
    from collections.abc import Mapping

    from kernel.console._protocol import ConsoleProtocol

# ---------------------------------------------------------------------------
# Global singleton -- defaults to PlainBackend
# ---------------------------------------------------------------------------

_backend: ConsoleProtocol = PlainBackend()


def select_backend(environ: Mapping[str, str] | None = None) -> str:
    """Pick a backend name from the execution context.

    ``"html"`` under a web server (CGI), ``"rich"`` when stdout is a TTY,
    ``"plain"`` otherwise.
    """
    env = os.environ if environ is None else environ
    if env.get("GATEWAY_INTERFACE"):
        return "html"
    if sys.stdout.isatty():
        return "rich"
    return "plain"


def configure(*, backend: str = "auto", environ: Mapping[str, str] | None = None) -> None:
    """Select the console backend.

    Should be called **once** at startup (in ``cli.py:main()``).

    Args:
        backend: ``"rich"`` -- always use Rich.
                 ``"plain"`` -- always use plain text.
                 ``"html"`` -- buffer everything into one HTML document.
                 ``"auto"`` (default) -- see ``select_backend()``.
        environ: Environment used by ``"auto"``; defaults to ``os.environ``.
    """
    global _backend  # noqa: PLW0603

    if backend == "auto":
        backend = select_backend(environ)

    if backend == "plain":
        _backend = PlainBackend()
    elif backend == "rich":
        from kernel.console._rich import RichBackend

        _backend = RichBackend()
    elif backend == "html":
        from kernel.console._html import HtmlBackend

        _backend = HtmlBackend()
    else:
        msg = f"Unknown console backend: {backend!r}"
        raise ValueError(msg)


def get_console() -> ConsoleProtocol:
    """Return the current backend instance."""
    return _backend


# ---------------------------------------------------------------------------
# Proxy object -- ``from kernel.console import console``
# ---------------------------------------------------------------------------


class _ConsoleProxy:
    """Transparent proxy that delegates to the current ``_backend``.

    This lets callers import ``console`` once at module level and
    automatically pick up any later ``configure()`` call.
    """

    def __getattr__(self, name: str) -> object:
        return getattr(_backend, name)


console: ConsoleProtocol = _ConsoleProxy()  # type: ignore[assignment]
