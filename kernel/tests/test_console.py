"""Tests for kernel/console — backend selection and report rendering per backend."""

from __future__ import annotations

import io
import sys
from typing import TYPE_CHECKING

import pytest
from rich.console import Console

import kernel.console as console_pkg
from kernel.console import configure, get_console, select_backend
from kernel.console._html import HtmlBackend
from kernel.console._plain import PlainBackend
from kernel.console._rich import _THEME, RichBackend

if TYPE_CHECKING:
    from collections.abc import Iterator

SUMMARY = {"Total Time": "1.5000 s", "Peak Mem": "1.5 MB"}
ROWS = [["Math (Trigonometry & Powers)", "1.2346 s"], ["IO::File Read", "0.2500 s"]]


@pytest.fixture(autouse=True)
def _restore_backend() -> Iterator[None]:
    saved = console_pkg._backend
    yield
    console_pkg._backend = saved


class _Terminal(io.StringIO):
    def isatty(self) -> bool:
        return True


def _render(backend: PlainBackend | RichBackend) -> None:
    backend.header("Python Benchmark", subtitle="v1.0", summary=SUMMARY)
    backend.kv({"Python": "3.12.1", "Interface": "cli"}, title="System Info")
    backend.table(["Test Name", "Time"], ROWS, title="Test Results")


# ---------------------------------------------------------------------------
# Backend selection
# ---------------------------------------------------------------------------


class TestSelectBackend:
    def test_cgi_selects_html(self) -> None:
        assert select_backend({"GATEWAY_INTERFACE": "CGI/1.1"}) == "html"

    def test_tty_selects_rich(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setattr(sys, "stdout", _Terminal())
        assert select_backend({}) == "rich"

    def test_pipe_selects_plain(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setattr(sys, "stdout", io.StringIO())
        assert select_backend({}) == "plain"

    def test_cgi_wins_over_tty(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setattr(sys, "stdout", _Terminal())
        assert select_backend({"GATEWAY_INTERFACE": "CGI/1.1"}) == "html"


class TestConfigure:
    @pytest.mark.parametrize(
        ("name", "backend_type"),
        [("plain", PlainBackend), ("rich", RichBackend), ("html", HtmlBackend)],
    )
    def test_explicit_backend(self, name: str, backend_type: type) -> None:
        configure(backend=name)
        assert isinstance(get_console(), backend_type)

    def test_auto_uses_environment(self) -> None:
        configure(backend="auto", environ={"GATEWAY_INTERFACE": "CGI/1.1"})
        assert isinstance(get_console(), HtmlBackend)

    def test_unknown_backend_rejected(self) -> None:
        with pytest.raises(ValueError, match="Unknown console backend"):
            configure(backend="curses")

    def test_proxy_follows_configure(self, capsys: pytest.CaptureFixture[str]) -> None:
        configure(backend="plain")
        console_pkg.console.kv({"Python": "3.12.1"})
        assert "3.12.1" in capsys.readouterr().out


@pytest.mark.parametrize("backend_type", [PlainBackend, RichBackend, HtmlBackend])
def test_backends_only_expose_report_methods(backend_type: type) -> None:
    backend = backend_type()
    for name in ("header", "kv", "table", "finalize"):
        assert callable(getattr(backend, name))
    for name in ("info", "success", "warning", "error", "panel"):
        assert not hasattr(backend, name)


# ---------------------------------------------------------------------------
# Plain
# ---------------------------------------------------------------------------


class TestPlainBackend:
    def test_report_layout(self) -> None:
        out = io.StringIO()
        _render(PlainBackend(file=out))
        text = out.getvalue()

        assert "PYTHON BENCHMARK v1.0" in text
        assert "Total Time: 1.5000 s | Peak Mem: 1.5 MB" in text
        assert text.index("System Info:") < text.index("Test Results:")
        assert "Test Name" in text
        assert "IO::File Read" in text

    def test_time_column_right_aligned(self) -> None:
        out = io.StringIO()
        PlainBackend(file=out).table(["Test Name", "Time"], [["a", "1.0000 s"], ["b", "10.0000 s"]])
        lines = out.getvalue().splitlines()
        assert lines[-2].endswith(" 1.0000 s")
        assert lines[-1].endswith("10.0000 s")
        assert len(lines[-2]) == len(lines[-1])

    def test_kv_aligns_keys(self) -> None:
        out = io.StringIO()
        PlainBackend(file=out).kv({"OS": "Linux", "Python": "3.12.1"})
        assert out.getvalue().splitlines() == ["      OS: Linux", "  Python: 3.12.1"]

    def test_empty_table_prints_title_only(self) -> None:
        out = io.StringIO()
        PlainBackend(file=out).table([], [], title="Nothing")
        assert out.getvalue() == "\n  Nothing:\n"


# ---------------------------------------------------------------------------
# Rich
# ---------------------------------------------------------------------------


class TestRichBackend:
    def _backend(self) -> tuple[RichBackend, io.StringIO]:
        out = io.StringIO()
        return RichBackend(Console(file=out, width=120, color_system=None, theme=_THEME)), out

    def test_report_layout(self) -> None:
        backend, out = self._backend()
        _render(backend)
        text = out.getvalue()

        assert "PYTHON BENCHMARK" in text
        assert "v1.0" in text
        assert "1.5 MB" in text
        assert text.index("System Info") < text.index("Test Results")
        assert "Math (Trigonometry & Powers)" in text
        assert "1.2346 s" in text

    def test_markup_in_names_is_escaped(self) -> None:
        backend, out = self._backend()
        backend.table(["Test Name", "Time"], [["[bold]odd[/bold]", "0.1000 s"]])
        assert "[bold]odd[/bold]" in out.getvalue()


# ---------------------------------------------------------------------------
# HTML
# ---------------------------------------------------------------------------


class TestHtmlBackend:
    def test_nothing_written_before_finalize(self) -> None:
        out = io.StringIO()
        _render(HtmlBackend(file=out))
        assert out.getvalue() == ""

    def test_document_with_cgi_headers(self) -> None:
        out = io.StringIO()
        backend = HtmlBackend(file=out)
        _render(backend)
        backend.finalize()

        head, _, body = out.getvalue().partition("\r\n\r\n")
        headers = dict(line.split(": ", 1) for line in head.split("\r\n"))
        assert headers["Content-Type"] == "text/html; charset=utf-8"
        assert headers["Cache-Control"] == "no-cache, must-revalidate, max-age=0"
        assert "Expires" in headers
        assert body.lstrip().startswith("<!DOCTYPE html>")
        assert "PYTHON BENCHMARK" in body
        assert "IO::File Read" in body

    def test_headers_can_be_suppressed(self) -> None:
        out = io.StringIO()
        backend = HtmlBackend(file=out, send_headers=False)
        backend.kv({"Python": "3.12.1"})
        backend.finalize()
        assert out.getvalue().lstrip().startswith("<!DOCTYPE html>")
