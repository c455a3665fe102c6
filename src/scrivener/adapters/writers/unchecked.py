"""Conversion from the checked to the unchecked failure discipline.

`translate_io_errors` is the boundary helper: inside it, any `OSError` is
re-raised as `IORuntimeError` with the original error chained as ``cause``.
The adapter classes apply it to every operation of a checked sink.
"""

from collections.abc import Iterator
from contextlib import contextmanager

from scrivener.interfaces.errors import IORuntimeError
from scrivener.interfaces.streams import (
    ByteData,
    OutputStream,
    UncheckedOutputStream,
    UncheckedWriter,
    Writer,
)


@contextmanager
def translate_io_errors() -> Iterator[None]:
    """Re-raise `OSError` raised inside the block as `IORuntimeError`."""
    try:
        yield
    except OSError as exc:
        raise IORuntimeError(exc) from exc


class UncheckedWriterAdapter(UncheckedWriter):
    """Present a checked `Writer` as an `UncheckedWriter`."""

    def __init__(self, target: Writer) -> None:
        self._target = target

    def write(self, s: str) -> None:
        with translate_io_errors():
            self._target.write(s)

    def write_char(self, ch: str) -> None:
        with translate_io_errors():
            self._target.write_char(ch)

    def newline(self) -> None:
        with translate_io_errors():
            self._target.newline()

    def flush(self) -> None:
        with translate_io_errors():
            self._target.flush()


class UncheckedOutputStreamAdapter(UncheckedOutputStream):
    """Present a checked `OutputStream` as an `UncheckedOutputStream`."""

    def __init__(self, target: OutputStream) -> None:
        self._target = target

    def write_byte(self, b: int) -> None:
        with translate_io_errors():
            self._target.write_byte(b)

    def write(self, data: ByteData, offset: int = 0, length: int | None = None) -> None:
        with translate_io_errors():
            self._target.write(data, offset, length)

    def flush(self) -> None:
        with translate_io_errors():
            self._target.flush()


def unchecked_writer(target: Writer) -> UncheckedWriter:
    """Return ``target`` as an unchecked writer.

    An object that already is an `UncheckedWriter` is returned as is.
    """
    if isinstance(target, UncheckedWriter):
        return target
    return UncheckedWriterAdapter(target)


def unchecked_stream(target: OutputStream) -> UncheckedOutputStream:
    """Return ``target`` as an unchecked output stream.

    An object that already is an `UncheckedOutputStream` is returned as is.
    """
    if isinstance(target, UncheckedOutputStream):
        return target
    return UncheckedOutputStreamAdapter(target)
