"""Transactional sinks: local files and in-memory buffering."""

from .base import TransactionalBase
from .local import (
    LocalTransactionalOutputStream,
    LocalTransactionalUncheckedWriter,
    LocalTransactionalWriter,
    open_transactional_stream,
    open_transactional_unchecked_writer,
    open_transactional_writer,
)
from .memory import BufferedTransactionalWriter

__all__ = [
    "BufferedTransactionalWriter",
    "LocalTransactionalOutputStream",
    "LocalTransactionalUncheckedWriter",
    "LocalTransactionalWriter",
    "TransactionalBase",
    "open_transactional_stream",
    "open_transactional_unchecked_writer",
    "open_transactional_writer",
]
