"""Transactional overlay contracts.

A transactional sink defers publication of everything written to it until
`commit()` is called. `abort()` discards the staged work instead. Both
operations *terminate* the transaction:

    open ──commit()──▶ committed
      └───abort()───▶ aborted

Once terminated, `commit()` and `abort()` are silent no-ops and every other
operation raises `TransactionTerminatedError`. This makes the following idiom
correct without any flags:

    with open_transactional_writer(path) as w:
        w.writeln("hello")
        w.commit()

Leaving the ``with`` block calls `abort()`, which is a no-op after a
successful commit and discards the staged work otherwise (including when the
block exits with an exception).
"""

from __future__ import annotations

import abc
from enum import Enum
from types import TracebackType

from .streams import OutputStream, UncheckedWriter, Writer


class TransactionState(Enum):
    """Lifecycle states of a transactional sink."""

    OPEN = "open"
    COMMITTED = "committed"
    ABORTED = "aborted"


class Transactional(abc.ABC):
    """Contract for a commit/abort terminated operation."""

    @property
    @abc.abstractmethod
    def state(self) -> TransactionState:
        """Return the current lifecycle state."""

    @property
    def terminated(self) -> bool:
        """Return True once the transaction has been committed or aborted."""
        return self.state is not TransactionState.OPEN

    @abc.abstractmethod
    def commit(self) -> None:
        """Publish the staged work and terminate.

        No effect if already terminated.

        Raises:
            OSError: Publication failed (checked shapes).
            IORuntimeError: Publication failed (unchecked shapes).
        """

    @abc.abstractmethod
    def abort(self) -> None:
        """Discard the staged work and terminate.

        No effect if already terminated. Never raises.
        """

    def close(self) -> None:
        """Abort the transaction if it is still open."""
        self.abort()

    def __enter__(self):
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.abort()


class TransactionalOutputStream(OutputStream, Transactional):
    """Checked byte sink published on commit."""


class TransactionalWriter(Writer, Transactional):
    """Checked character sink published on commit."""


class TransactionalUncheckedWriter(UncheckedWriter, Transactional):
    """Unchecked character sink published on commit."""
