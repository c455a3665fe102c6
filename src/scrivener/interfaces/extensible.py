"""Runtime capability discovery protocol."""

from typing import Protocol, TypeVar, runtime_checkable

T = TypeVar("T")


@runtime_checkable
class Extensible(Protocol):
    """An object that can advertise capabilities beyond its declared type.

    Implementations may answer by delegation to another object.

    Note:
        Do not call `get_extension` directly; use
        `scrivener.domain.extensions.get_extension`, which checks direct
        instances first.
    """

    def get_extension(self, capability: type[T]) -> T | None:
        """Return the extension designated by ``capability``, or None."""
        ...
