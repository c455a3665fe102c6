"""Unit tests for the writer and stream contracts."""

import pytest

from scrivener.interfaces.streams import (
    Closeable,
    UncheckedWriter,
    Writer,
    byte_range,
)
from scrivener.interfaces.transactional import (
    TransactionalUncheckedWriter,
    TransactionalWriter,
)

# pylint: disable=magic-value-comparison


class Recorder(UncheckedWriter):
    """Writer implementing only the abstract operations."""

    def __init__(self) -> None:
        self.calls: list[str] = []

    def write(self, s: str) -> None:
        self.calls.append(s)

    def newline(self) -> None:
        self.calls.append("<nl>")

    def flush(self) -> None:
        self.calls.append("<flush>")


def test_writeln_defaults():
    """`writeln` writes non-empty text then a newline; empty text only a newline."""
    writer = Recorder()
    writer.writeln("a")
    writer.writeln()
    writer.writeln("")
    assert writer.calls == ["a", "<nl>", "<nl>", "<nl>"]


def test_write_char_default():
    """`write_char` forwards one character to `write`."""
    writer = Recorder()
    writer.write_char("z")
    assert writer.calls == ["z"]
    with pytest.raises(ValueError):
        writer.write_char("zz")


def test_flavours_are_distinct():
    """Checked and unchecked writers are separate capability shapes."""
    assert not issubclass(UncheckedWriter, Writer)
    assert not issubclass(Writer, UncheckedWriter)
    assert issubclass(TransactionalWriter, Writer)
    assert issubclass(TransactionalUncheckedWriter, UncheckedWriter)
    assert not issubclass(Writer, Closeable)


@pytest.mark.parametrize(
    ("offset", "length", "expected"),
    [(0, None, b"abcdef"), (2, None, b"cdef"), (1, 3, b"bcd"), (6, 0, b""), (0, 6, b"abcdef")],
)
def test_byte_range(offset, length, expected):
    """Valid ranges give a zero-copy view of the requested bytes."""
    assert bytes(byte_range(b"abcdef", offset, length)) == expected


@pytest.mark.parametrize(("offset", "length"), [(-1, 1), (0, -1), (4, 3), (7, None)])
def test_byte_range_out_of_bounds(offset, length):
    """Ranges outside the buffer raise IndexError."""
    with pytest.raises(IndexError):
        byte_range(b"abcdef", offset, length)
