"""In-memory transactional writer.

`BufferedTransactionalWriter` stages text in RAM and hands it to a
downstream `UncheckedWriter` only on commit, so nothing reaches the
downstream if the operation is aborted. Useful in front of writers that
cannot take anything back, such as a `LineSplittingWriter` feeding a log.
"""

import io

from scrivener.interfaces.streams import UncheckedWriter
from scrivener.interfaces.transactional import TransactionalUncheckedWriter

from .base import TransactionalBase


class BufferedTransactionalWriter(TransactionalBase, TransactionalUncheckedWriter):
    """Stage text and publish it to ``target`` on commit.

    On commit the staged text is written to ``target`` in one call and the
    target is flushed. The target stays owned by the caller.
    """

    _unchecked = True

    def __init__(self, target: UncheckedWriter) -> None:
        super().__init__()
        self._target = target
        self._buffer = io.StringIO()

    def __repr__(self) -> str:
        return f"{type(self).__name__}(target={self._target!r}, state={self.state.value})"

    @property
    def staged(self) -> str:
        """Return the text staged so far."""
        self._ensure_open()
        return self._buffer.getvalue()

    def write(self, s: str) -> None:
        self._ensure_open()
        self._buffer.write(s)

    def newline(self) -> None:
        self.write("\n")

    def flush(self) -> None:
        self._ensure_open()

    def _publish(self) -> None:
        text = self._buffer.getvalue()
        if text:
            self._target.write(text)
        self._target.flush()
        self._buffer.close()

    def _discard(self) -> None:
        self._buffer.close()
