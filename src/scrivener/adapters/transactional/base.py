"""Shared commit/abort state machine for transactional sinks.

Subclasses implement two hooks:

    _publish()  make the staged work visible (rename a temp file, write a
                buffer downstream, ...). May raise.
    _discard()  release staged work and temporary resources. Failures are
                logged and swallowed.

and call `_ensure_open()` at the top of every other operation.
"""

import abc
import logging
from typing import ClassVar

from scrivener.interfaces.errors import IORuntimeError, TransactionTerminatedError
from scrivener.interfaces.transactional import Transactional, TransactionState

logger = logging.getLogger(__name__)


class TransactionalBase(Transactional):
    """Implements `commit`/`abort` once for every transactional shape.

    If publication fails, the staged work is discarded, the transaction ends
    up `ABORTED` and the failure propagates: unchanged for checked shapes, as
    `IORuntimeError` for unchecked ones (``_unchecked = True``).
    """

    _unchecked: ClassVar[bool] = False

    def __init__(self) -> None:
        self._state = TransactionState.OPEN

    @property
    def state(self) -> TransactionState:
        return self._state

    def commit(self) -> None:
        if self.terminated:
            return
        try:
            self._publish()
        except OSError as exc:
            self._fail()
            if self._unchecked:
                raise IORuntimeError(exc) from exc
            raise
        except BaseException:
            self._fail()
            raise
        self._state = TransactionState.COMMITTED
        logger.debug("Committed %r", self)

    def abort(self) -> None:
        if self.terminated:
            return
        self._state = TransactionState.ABORTED
        self._discard_quietly()
        logger.debug("Aborted %r", self)

    def _ensure_open(self) -> None:
        if self._state is not TransactionState.OPEN:
            raise TransactionTerminatedError(self._state)

    def _fail(self) -> None:
        self._state = TransactionState.ABORTED
        self._discard_quietly()
        logger.debug("Commit of %r failed; staged work discarded", self)

    def _discard_quietly(self) -> None:
        try:
            self._discard()
        except Exception:  # pylint: disable=broad-except
            logger.warning("Failed to discard staged work of %r", self, exc_info=True)

    @abc.abstractmethod
    def _publish(self) -> None:
        """Make the staged work visible."""

    @abc.abstractmethod
    def _discard(self) -> None:
        """Release the staged work."""
