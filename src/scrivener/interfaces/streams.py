"""Writer and output-stream contracts.

Four capability shapes are defined, two for bytes and two for text, each in
a *checked* flavour (I/O failures surface as `OSError`) and an *unchecked*
flavour (I/O failures surface as `IORuntimeError`):

    - OutputStream / UncheckedOutputStream: byte sinks.
    - Writer / UncheckedWriter: character sinks.

A fifth shape, `LineWriter`, accepts whole lines.

None of these contracts defines ``close()``. Release is reserved for the
transactional overlay (where leaving a ``with`` block means *abort*), so a
generic release path can never commit or abort by accident. Concrete writers
that are merely disposable additionally implement `Closeable`.

Character sinks treat ``"\\n"`` as the logical line separator. Implementations
that target a host device map it to the platform separator.
"""

from __future__ import annotations

import abc
from types import TracebackType

ByteData = bytes | bytearray | memoryview


def byte_range(data: ByteData, offset: int = 0, length: int | None = None) -> memoryview:
    """Return a view of ``length`` bytes of ``data`` starting at ``offset``.

    Args:
        data: The source buffer.
        offset: Index of the first byte.
        length: Number of bytes; defaults to the rest of the buffer.

    Returns:
        memoryview: A zero-copy view of the requested range.

    Raises:
        IndexError: If the range does not lie within ``data``.
    """
    view = memoryview(data)
    size = len(view)
    if length is None:
        length = size - offset
    if offset < 0 or length < 0 or offset + length > size:
        raise IndexError(
            f"byte range out of bounds: offset={offset}, length={length}, size={size}"
        )
    return view[offset : offset + length]


# ============================================================================
#                               Byte sinks
# ============================================================================


class _ByteSink(abc.ABC):
    """Operations shared by both byte sink flavours."""

    @abc.abstractmethod
    def write_byte(self, b: int) -> None:
        """Write the low eight bits of ``b``."""

    @abc.abstractmethod
    def write(self, data: ByteData, offset: int = 0, length: int | None = None) -> None:
        """Write ``length`` bytes of ``data`` starting at ``offset``.

        Raises:
            IndexError: If the range does not lie within ``data``.
        """

    @abc.abstractmethod
    def flush(self) -> None:
        """Push buffered bytes towards the underlying device."""


class OutputStream(_ByteSink):
    """Byte sink whose operations raise `OSError` on failure."""


class UncheckedOutputStream(_ByteSink):
    """Byte sink whose operations raise `IORuntimeError` on failure."""


# ============================================================================
#                             Character sinks
# ============================================================================


class _CharacterSink(abc.ABC):
    """Operations shared by both character sink flavours."""

    @abc.abstractmethod
    def write(self, s: str) -> None:
        """Write a string. Embedded ``"\\n"`` characters separate lines."""

    def write_char(self, ch: str) -> None:
        """Write a single character.

        Raises:
            ValueError: If ``ch`` is not exactly one character long.
        """
        if len(ch) != 1:
            raise ValueError(f"expected a single character, got {ch!r}")
        self.write(ch)

    @abc.abstractmethod
    def newline(self) -> None:
        """Terminate the current line."""

    def writeln(self, s: str = "") -> None:
        """Write ``s`` (possibly empty) followed by a line terminator."""
        if s:
            self.write(s)
        self.newline()

    @abc.abstractmethod
    def flush(self) -> None:
        """Push buffered text towards the underlying device."""


class Writer(_CharacterSink):
    """Character sink whose operations raise `OSError` on failure."""


class UncheckedWriter(_CharacterSink):
    """Character sink whose operations raise `IORuntimeError` on failure."""


class LineWriter(abc.ABC):
    """Sink that accepts whole lines and terminates them itself.

    Lines passed to `writeln` must not contain ``"\\n"``; doing so is a caller
    error and implementations are not required to split.
    """

    @abc.abstractmethod
    def writeln(self, s: str = "") -> None:
        """Write ``s`` as one complete line."""

    @abc.abstractmethod
    def flush(self) -> None:
        """Push buffered lines towards the underlying device."""


# ============================================================================
#                             Disposable writers
# ============================================================================


class Closeable(abc.ABC):
    """A non-transactional sink that can be released.

    Releasing a `Closeable` never publishes or discards staged work; it only
    makes the object unusable. Leaving a ``with`` block calls `close`.
    """

    @property
    @abc.abstractmethod
    def closed(self) -> bool:
        """Return True once `close` has been called."""

    @abc.abstractmethod
    def close(self) -> None:
        """Release the sink. Safe to call more than once."""

    def __enter__(self):
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()
