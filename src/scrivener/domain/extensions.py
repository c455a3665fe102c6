"""Extension lookup helpers.

An object supports a capability if it *is* an instance of it, or if it
implements the `Extensible` protocol and answers a query for it. The instance
test always comes first: an extensible object cannot be assumed to recognise
its own class, or a class it implements directly.
"""

from typing import TypeVar

from scrivener.interfaces.extensible import Extensible

from .errors import MissingExtensionError

T = TypeVar("T")


def get_extension(o: object | None, capability: type[T]) -> T | None:
    """Return the extension of ``o`` designated by ``capability``, if supported.

    Args:
        o: The object, possibly None.
        capability: A class, or a runtime-checkable protocol.

    Returns:
        ``o`` itself if it is an instance of ``capability``; otherwise the
        answer of ``o.get_extension(capability)`` when ``o`` is extensible;
        otherwise None.
    """
    if o is None:
        return None
    if isinstance(o, capability):
        return o
    if isinstance(o, Extensible):
        return o.get_extension(capability)
    return None


def get_required_extension(o: object | None, capability: type[T]) -> T:
    """Return the extension of ``o`` designated by ``capability``.

    Raises:
        MissingExtensionError: If the extension is not supported.
    """
    extension = get_extension(o, capability)
    if extension is None:
        raise MissingExtensionError(capability)
    return extension


def supports(o: object | None, capability: type) -> bool:
    """Return True if ``o`` supports the extension designated by ``capability``."""
    return get_extension(o, capability) is not None


def supports_any(o: object | None, *capabilities: type) -> bool:
    """Return True if ``o`` supports at least one of ``capabilities``."""
    if o is None:
        return False
    return any(supports(o, c) for c in capabilities)
