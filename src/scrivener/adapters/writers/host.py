"""Bridges between scrivener sinks and Python's own stream types.

Exports
-------
- HostWriterAdapter: `UncheckedWriter` over a host ``TextIO``, mapping
  ``"\\n"`` in written strings to the platform line separator.
- HostWriterProjection: ``io.TextIOBase`` over an `UncheckedWriter`, for
  APIs that expect a file object (``print(..., file=...)``, ``csv``, etc.).
- HostOutputStream: checked `OutputStream` over a host ``BinaryIO``.
- from_host / as_host: factory shorthands.

None of the adaptors closes the host stream; the caller keeps ownership.
"""

import io
from typing import BinaryIO, TextIO

from scrivener import config
from scrivener.interfaces.errors import WriterClosedError
from scrivener.interfaces.streams import (
    ByteData,
    Closeable,
    OutputStream,
    UncheckedWriter,
    byte_range,
)

from .unchecked import translate_io_errors


class HostWriterAdapter(UncheckedWriter, Closeable):
    """Unchecked writer over a host text stream.

    Strings passed to `write` have each ``"\\n"`` replaced by the line
    separator. `write_char` and `newline` pass ``"\\n"`` through unchanged:
    hosts that translate newlines themselves are trusted to do so.

    Args:
        target: The host text stream.
        line_separator: Separator to emit; defaults to
            `scrivener.config.get_line_separator()`.
    """

    def __init__(self, target: TextIO, *, line_separator: str | None = None) -> None:
        self._target: TextIO | None = target
        self._separator = (
            line_separator if line_separator is not None else config.get_line_separator()
        )

    @property
    def line_separator(self) -> str:
        """Return the separator emitted for each ``"\\n"`` in written strings."""
        return self._separator

    @property
    def closed(self) -> bool:
        return self._target is None

    def write(self, s: str) -> None:
        target = self._check()
        with translate_io_errors():
            if self._separator == "\n":
                target.write(s)
                return
            segments = s.split("\n")
            for segment in segments[:-1]:
                if segment:
                    target.write(segment)
                target.write(self._separator)
            if segments[-1]:
                target.write(segments[-1])

    def write_char(self, ch: str) -> None:
        if len(ch) != 1:
            raise ValueError(f"expected a single character, got {ch!r}")
        target = self._check()
        with translate_io_errors():
            target.write(ch)

    def newline(self) -> None:
        target = self._check()
        with translate_io_errors():
            target.write("\n")

    def flush(self) -> None:
        target = self._check()
        with translate_io_errors():
            target.flush()

    def close(self) -> None:
        # Drops the reference only; the host stream stays open.
        self._target = None

    def _check(self) -> TextIO:
        if self._target is None:
            raise WriterClosedError("Writer")
        return self._target


class HostWriterProjection(io.TextIOBase):
    """Host text stream that forwards to an `UncheckedWriter`.

    `close` has no effect: releasing the underlying writer is the job of
    whoever owns it (for transactional writers, commit or abort).
    """

    def __init__(self, target: UncheckedWriter) -> None:
        super().__init__()
        self._target = target

    def writable(self) -> bool:
        return True

    def write(self, s: str) -> int:  # type: ignore[override]
        self._target.write(s)
        return len(s)

    def flush(self) -> None:
        self._target.flush()

    def close(self) -> None:
        pass


class HostOutputStream(OutputStream, Closeable):
    """Checked output stream over a host binary stream.

    Failures of the host surface unchanged as `OSError`.
    """

    def __init__(self, target: BinaryIO) -> None:
        self._target: BinaryIO | None = target

    @property
    def closed(self) -> bool:
        return self._target is None

    def write_byte(self, b: int) -> None:
        self._check().write(bytes((b & 0xFF,)))

    def write(self, data: ByteData, offset: int = 0, length: int | None = None) -> None:
        view = byte_range(data, offset, length)
        self._check().write(view)

    def flush(self) -> None:
        self._check().flush()

    def close(self) -> None:
        self._target = None

    def _check(self) -> BinaryIO:
        if self._target is None:
            raise WriterClosedError("OutputStream")
        return self._target


def from_host(target: TextIO, *, line_separator: str | None = None) -> HostWriterAdapter:
    """Adapt a host text stream to the `UncheckedWriter` contract."""
    return HostWriterAdapter(target, line_separator=line_separator)


def as_host(writer: UncheckedWriter) -> io.TextIOBase:
    """Expose an `UncheckedWriter` as a host text stream."""
    return HostWriterProjection(writer)
