"""Exceptions shared by the writer, transactional and presentation contracts."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .transactional import TransactionState

# ============================================================================
#                           General errors
# ============================================================================


class ScrivenerError(Exception):
    """Base class for all scrivener errors."""


class IORuntimeError(ScrivenerError, RuntimeError):
    """Unchecked wrapper around an I/O failure.

    Raised by the unchecked writer family so that callers which treat I/O
    failure as fatal do not need to handle `OSError` explicitly.

    Attributes:
        cause (OSError): The underlying I/O failure.
    """

    def __init__(self, cause: OSError) -> None:
        super().__init__(str(cause) or type(cause).__name__)
        self.cause = cause


# ============================================================================
#                           State errors
# ============================================================================


class WriterStateError(ScrivenerError, ValueError):
    """Raised when an operation is invoked on a writer that cannot accept it."""


class WriterClosedError(WriterStateError):
    """Raised when a released writer is used.

    Attributes:
        name (str): Short name of the writer type, used in the message.
    """

    def __init__(self, name: str = "Writer") -> None:
        super().__init__(f"{name} has been closed")
        self.name = name


class TransactionTerminatedError(WriterStateError):
    """Raised when a transactional sink is used after commit or abort.

    Attributes:
        state (TransactionState): The terminal state the sink is in.
    """

    def __init__(self, state: TransactionState) -> None:
        super().__init__(f"Transaction has already been {state.value}")
        self.state = state


# ============================================================================
#                       Presentation model errors
# ============================================================================


class InvalidTextError(ScrivenerError, ValueError):
    """Raised when editor text cannot be converted to a model value.

    Attributes:
        text (str): The text that failed to parse.
        reason (str): A short description of the problem.
    """

    def __init__(self, text: str, reason: str) -> None:
        super().__init__(f"Invalid text {text!r}: {reason}")
        self.text = text
        self.reason = reason


class UnsupportedOperationError(ScrivenerError):
    """Raised when an operation is not supported by the receiving object."""
