"""In-memory writer that collects text in a string."""

import io

from scrivener.interfaces.errors import WriterClosedError
from scrivener.interfaces.streams import Closeable, UncheckedWriter


class StringWriter(UncheckedWriter, Closeable):
    """Unchecked writer backed by a growable text buffer.

    Never raises I/O errors. After `close`, every write, `newline` and `flush`
    raises `WriterClosedError`, while `getvalue` keeps returning the text
    collected so far.

    Example:
        ```py
        w = StringWriter()
        w.writeln("a")
        w.write("b")
        assert w.getvalue() == "a\\nb"
        ```
    """

    def __init__(self) -> None:
        self._buffer: io.StringIO | None = io.StringIO()
        self._result = ""

    @property
    def closed(self) -> bool:
        return self._buffer is None

    def write(self, s: str) -> None:
        self._check().write(s)

    def write_char(self, ch: str) -> None:
        if len(ch) != 1:
            raise ValueError(f"expected a single character, got {ch!r}")
        self._check().write(ch)

    def newline(self) -> None:
        self._check().write("\n")

    def flush(self) -> None:
        self._check()

    def close(self) -> None:
        if self._buffer is not None:
            self._result = self._buffer.getvalue()
            self._buffer = None

    def getvalue(self) -> str:
        """Return the collected text."""
        if self._buffer is not None:
            return self._buffer.getvalue()
        return self._result

    def __str__(self) -> str:
        return self.getvalue()

    def _check(self) -> io.StringIO:
        if self._buffer is None:
            raise WriterClosedError(type(self).__name__)
        return self._buffer
