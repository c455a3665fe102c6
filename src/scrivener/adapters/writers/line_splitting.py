"""Writer that turns a character stream into whole lines."""

from scrivener.interfaces.streams import LineWriter, UncheckedWriter


class LineSplittingWriter(UncheckedWriter):
    """Collect written text into lines passed one at a time to a `LineWriter`.

    Every ``"\\n"`` completes the current line (possibly empty) and hands it
    to the target. The pending partial line never contains ``"\\n"``.

    `flush` is non-standard: it emits a non-empty partial line as if it had
    been terminated, so it must only be called once all text has been
    written. The target is not flushed and stays owned by the caller.

    Args:
        target: The line writer receiving completed lines.
    """

    def __init__(self, target: LineWriter) -> None:
        self._target = target
        self._pending: list[str] = []

    def write_char(self, ch: str) -> None:
        if len(ch) != 1:
            raise ValueError(f"expected a single character, got {ch!r}")
        if ch == "\n":
            self._finish_line()
        else:
            self._pending.append(ch)

    def write(self, s: str) -> None:
        *complete, rest = s.split("\n")
        for segment in complete:
            if segment:
                self._pending.append(segment)
            self._finish_line()
        if rest:
            self._pending.append(rest)

    def newline(self) -> None:
        self._finish_line()

    def flush(self) -> None:
        if self._pending:
            self._finish_line()

    def _finish_line(self) -> None:
        line = "".join(self._pending)
        self._pending.clear()
        self._target.writeln(line)
