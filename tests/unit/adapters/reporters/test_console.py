"""Unit tests for the terminal reporter.

The reporter writes to **stderr** via Click. Glyph selection checks the
encoding of the destination stream; tests simulate an ASCII-only terminal by
patching `console._stream_encoding` and assert the ASCII fallbacks are used.
"""

from __future__ import annotations

import sys

import click
import pytest

from scrivener.adapters.reporters import ConsoleReporter, console

# ---------------------------------------------------------------------------
# Test utilities
# ---------------------------------------------------------------------------


class FakeStream:
    """Minimal stream object exposing only an `encoding` attribute."""

    def __init__(self, encoding: str | None) -> None:
        self.encoding = encoding


@pytest.fixture
def ascii_stderr(monkeypatch: pytest.MonkeyPatch) -> None:
    """Make glyph probing see an ASCII-only stderr."""
    monkeypatch.setattr(console, "_stream_encoding", lambda err: "ascii")


@pytest.fixture
def utf8_stderr(monkeypatch: pytest.MonkeyPatch) -> None:
    """Make glyph probing see a UTF-8 stderr."""
    monkeypatch.setattr(console, "_stream_encoding", lambda err: "utf-8")


# ---------------------------------------------------------------------------
# Tests
# ---------------------------------------------------------------------------


@pytest.mark.usefixtures("ascii_stderr")
def test_ascii_fallback_glyphs(capsys: pytest.CaptureFixture[str]):
    """ASCII-only terminals get `[X]` and `[!]` prefixes."""
    reporter = ConsoleReporter(color=False)
    reporter.error("broken")
    reporter.warning("odd")

    err = capsys.readouterr().err
    assert err == "[X]  broken\n[!]  odd\n"


@pytest.mark.usefixtures("utf8_stderr")
def test_emoji_glyphs(capsys: pytest.CaptureFixture[str]):
    """Terminals that can encode emoji get emoji prefixes."""
    ConsoleReporter(color=False).error("broken")
    assert capsys.readouterr().err == "❌  broken\n"


def test_missing_encoding_is_treated_as_ascii(monkeypatch: pytest.MonkeyPatch):
    """A stream without an encoding is treated as ASCII."""
    monkeypatch.setattr(sys, "stderr", FakeStream(None))
    assert console.caution_glyph() == "[!]"
    assert console.error_glyph() == "[X]"


@pytest.mark.usefixtures("ascii_stderr")
def test_info_is_unadorned(capsys: pytest.CaptureFixture[str]):
    """Information lines carry no glyph."""
    ConsoleReporter(color=False).formatted_info("wrote %q", "out.txt")
    assert capsys.readouterr().err == 'wrote "out.txt"\n'


@pytest.mark.usefixtures("ascii_stderr")
def test_stdout_destination(capsys: pytest.CaptureFixture[str]):
    """`err=False` sends every channel to stdout."""
    reporter = ConsoleReporter(err=False, color=False)
    reporter.info("hello")
    reporter.error("bad")
    captured = capsys.readouterr()
    assert captured.out == "hello\n[X]  bad\n"
    assert captured.err == ""


def test_glyphs_follow_destination_stream(monkeypatch: pytest.MonkeyPatch):
    """Glyphs are chosen from the encoding of the stream being written to."""
    checked: list[bool] = []

    def encoding(err: bool) -> str:
        checked.append(err)
        return "ascii" if err else "utf-8"

    monkeypatch.setattr(console, "_stream_encoding", encoding)
    assert console.error_glyph(err=False) == "❌"
    assert console.caution_glyph(err=True) == "[!]"
    assert checked == [False, True]


def test_stdout_reporter_checks_stdout(
    monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
):
    """`err=False` picks glyphs for stdout even when stderr is ASCII-only."""
    monkeypatch.setattr(console, "_stream_encoding", lambda err: "ascii" if err else "utf-8")
    reporter = ConsoleReporter(err=False, color=False)
    reporter.error("bad")
    reporter.warning("odd")
    assert capsys.readouterr().out == "❌  bad\n⚠️  odd\n"


@pytest.mark.usefixtures("ascii_stderr")
def test_forced_color_styles_errors(capsys: pytest.CaptureFixture[str]):
    """With color forced on, error lines carry ANSI styling."""
    ConsoleReporter(color=True).error("bad")
    err = capsys.readouterr().err
    assert "\x1b[" in err
    assert click.unstyle(err) == "[X]  bad\n"
