"""Reporter that writes styled lines to the terminal.

Errors, warnings and information go to **stderr** by default so stdout can
remain machine-readable. Each error and warning line starts with a glyph that
falls back to ASCII when the destination stream cannot encode emoji.
"""

import sys

import click

from scrivener.interfaces.reporter import SimpleReporter


def _stream_encoding(err: bool) -> str:
    """Return the encoding of stderr (or stdout), ``"ascii"`` when unknown."""
    stream = sys.stderr if err else sys.stdout
    return getattr(stream, "encoding", None) or "ascii"


def _supports_character(character: str, err: bool = True) -> bool:
    """Return True if *character* can be encoded on the destination stream.

    Args:
        character: A single Unicode character to check (e.g., "⚠️", "❌").
        err: Check stderr when True, stdout otherwise.

    Returns:
        bool: True if encoding succeeds; False on `UnicodeEncodeError`.
    """
    try:
        character.encode(_stream_encoding(err))
    except UnicodeEncodeError:
        return False
    return True


def caution_glyph(err: bool = True) -> str:
    """Return "⚠️" when the stream supports it; otherwise "[!]"."""
    emoji, fallback = ("⚠️", "[!]")
    return emoji if _supports_character(emoji, err) else fallback


def error_glyph(err: bool = True) -> str:
    """Return "❌" when the stream supports it; otherwise "[X]"."""
    emoji, fallback = ("❌", "[X]")
    return emoji if _supports_character(emoji, err) else fallback


class ConsoleReporter(SimpleReporter):
    """Report to the terminal with click.

    Args:
        err: Write to stderr (default) rather than stdout.
        color: Force styling on or off; None lets click decide from the stream.

    Example:
        ``❌  Cannot open "settings.toml"``
    """

    def __init__(self, *, err: bool = True, color: bool | None = None) -> None:
        self._err = err
        self._color = color

    def error(self, message: str) -> None:
        click.secho(
            f"{error_glyph(self._err)}  {message}",
            fg="red",
            bold=True,
            err=self._err,
            color=self._color,
        )

    def warning(self, message: str) -> None:
        click.secho(
            f"{caution_glyph(self._err)}  {message}",
            fg="yellow",
            bold=True,
            err=self._err,
            color=self._color,
        )

    def info(self, message: str) -> None:
        click.echo(message, err=self._err, color=self._color)
