"""Local-filesystem transactional sinks.

Everything written is staged in a temporary file created next to the target
path (same directory, so the final rename stays on one filesystem). On
`commit()` the temp file is flushed, optionally ``fsync``-ed, closed and
atomically moved onto the target with `os.replace`. On `abort()` (including
leaving a ``with`` block without committing) the temp file is closed and
deleted, and a pre-existing target is left untouched.

If a sink is garbage-collected while still open, a registered cleaner removes
its temp file.

Exports
-------
- LocalTransactionalOutputStream: checked byte sink.
- LocalTransactionalWriter: checked text sink.
- LocalTransactionalUncheckedWriter: unchecked text sink.
- open_transactional_stream / open_transactional_writer /
  open_transactional_unchecked_writer: factory shorthands.

Typical usage
-------------
    with open_transactional_writer("report.txt") as w:
        for row in rows:
            w.writeln(row)
        w.commit()
"""

from __future__ import annotations

import contextlib
import functools
import logging
import os
import tempfile
from pathlib import Path
from typing import IO

from scrivener import config
from scrivener.interfaces.streams import ByteData, byte_range
from scrivener.interfaces.transactional import (
    TransactionalOutputStream,
    TransactionalUncheckedWriter,
    TransactionalWriter,
)
from scrivener.utils import cleaning

from ..writers.unchecked import translate_io_errors
from .base import TransactionalBase

logger = logging.getLogger(__name__)

PathLike = str | os.PathLike[str]

DEFAULT_ENCODING = "utf-8"


def _remove_staged(file: IO, path: Path) -> None:
    """Close and delete a temp file. Must not reference the owning sink."""
    try:
        file.close()
    finally:
        path.unlink(missing_ok=True)


class _LocalStaging(TransactionalBase):
    """Temp-file staging shared by the byte and text sinks."""

    def __init__(
        self,
        path: PathLike,
        *,
        binary: bool,
        encoding: str | None = None,
        fsync: bool | None = None,
    ) -> None:
        super().__init__()
        self._path = Path(path)
        self._fsync = config.get_fsync_default() if fsync is None else fsync

        with self._io():
            tmp = tempfile.NamedTemporaryFile(  # pylint: disable=consider-using-with
                mode="wb" if binary else "w",
                encoding=None if binary else encoding,
                newline=None if binary else "",
                dir=self._path.parent,
                prefix=f".{self._path.name}.",
                suffix=".tmp",
                delete=False,
            )
        self._file = tmp
        self._temp_path = Path(tmp.name)
        self._cleanable = cleaning.register(
            self, functools.partial(_remove_staged, tmp, self._temp_path)
        )
        logger.debug("Staging %s in %s", self._path, self._temp_path)

    @property
    def path(self) -> Path:
        """Return the path the contents are published to."""
        return self._path

    @property
    def temp_path(self) -> Path:
        """Return the path of the staging file."""
        return self._temp_path

    def __repr__(self) -> str:
        return f"{type(self).__name__}({str(self._path)!r}, state={self.state.value})"

    def _publish(self) -> None:
        self._file.flush()
        if self._fsync:
            os.fsync(self._file.fileno())
        self._file.close()
        os.replace(self._temp_path, self._path)
        self._cleanable.cancel()

    def _discard(self) -> None:
        self._cleanable.clean()

    def _io(self) -> contextlib.AbstractContextManager[None]:
        return translate_io_errors() if self._unchecked else contextlib.nullcontext()


class LocalTransactionalOutputStream(_LocalStaging, TransactionalOutputStream):
    """Checked byte sink published to ``path`` on commit.

    Args:
        path: Target file path. Its directory must exist.
        fsync: ``fsync`` before publishing; defaults to
            `scrivener.config.get_fsync_default()`.
    """

    def __init__(self, path: PathLike, *, fsync: bool | None = None) -> None:
        super().__init__(path, binary=True, fsync=fsync)

    def write_byte(self, b: int) -> None:
        self._ensure_open()
        self._file.write(bytes((b & 0xFF,)))

    def write(self, data: ByteData, offset: int = 0, length: int | None = None) -> None:
        self._ensure_open()
        self._file.write(byte_range(data, offset, length))

    def flush(self) -> None:
        self._ensure_open()
        self._file.flush()


class _LocalTextStaging(_LocalStaging):
    """Text operations over a temp file. Each ``"\\n"`` is written as the separator."""

    def __init__(
        self,
        path: PathLike,
        *,
        encoding: str = DEFAULT_ENCODING,
        line_separator: str | None = None,
        fsync: bool | None = None,
    ) -> None:
        super().__init__(path, binary=False, encoding=encoding, fsync=fsync)
        self._separator = (
            line_separator if line_separator is not None else config.get_line_separator()
        )

    @property
    def line_separator(self) -> str:
        """Return the separator written for each ``"\\n"``."""
        return self._separator

    def write(self, s: str) -> None:
        self._ensure_open()
        with self._io():
            if self._separator != "\n":
                s = s.replace("\n", self._separator)
            self._file.write(s)

    def newline(self) -> None:
        self.write("\n")

    def flush(self) -> None:
        self._ensure_open()
        with self._io():
            self._file.flush()


class LocalTransactionalWriter(_LocalTextStaging, TransactionalWriter):
    """Checked text sink published to ``path`` on commit.

    Args:
        path: Target file path. Its directory must exist.
        encoding: Text encoding of the published file.
        line_separator: Separator written for each ``"\\n"``; defaults to
            `scrivener.config.get_line_separator()`.
        fsync: ``fsync`` before publishing; defaults to
            `scrivener.config.get_fsync_default()`.
    """


class LocalTransactionalUncheckedWriter(_LocalTextStaging, TransactionalUncheckedWriter):
    """Unchecked variant of `LocalTransactionalWriter`.

    Staging, write, flush and commit failures raise `IORuntimeError`.
    """

    _unchecked = True


def open_transactional_stream(
    path: PathLike, *, fsync: bool | None = None
) -> LocalTransactionalOutputStream:
    """Open a checked transactional byte sink for ``path``."""
    return LocalTransactionalOutputStream(path, fsync=fsync)


def open_transactional_writer(
    path: PathLike,
    *,
    encoding: str = DEFAULT_ENCODING,
    line_separator: str | None = None,
    fsync: bool | None = None,
) -> LocalTransactionalWriter:
    """Open a checked transactional text sink for ``path``."""
    return LocalTransactionalWriter(
        path, encoding=encoding, line_separator=line_separator, fsync=fsync
    )


def open_transactional_unchecked_writer(
    path: PathLike,
    *,
    encoding: str = DEFAULT_ENCODING,
    line_separator: str | None = None,
    fsync: bool | None = None,
) -> LocalTransactionalUncheckedWriter:
    """Open an unchecked transactional text sink for ``path``.

    Raises:
        IORuntimeError: If the staging file cannot be created.
    """
    return LocalTransactionalUncheckedWriter(
        path, encoding=encoding, line_separator=line_separator, fsync=fsync
    )
