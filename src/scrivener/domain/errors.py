"""Domain-layer error definitions."""

from scrivener.interfaces.errors import ScrivenerError


class MessageFormatError(ScrivenerError, ValueError):
    """Raised when a message pattern cannot be rendered.

    Attributes:
        pattern (str): The offending pattern.
        position (int): Index of the problem within the pattern.
    """

    def __init__(self, pattern: str, position: int, reason: str) -> None:
        super().__init__(f"{reason} at position {position} in {pattern!r}")
        self.pattern = pattern
        self.position = position


class MissingExtensionError(ScrivenerError, AssertionError):
    """Raised when a required extension is not supported by an object.

    Attributes:
        capability (type): The requested capability.
    """

    def __init__(self, capability: type) -> None:
        super().__init__(f"Required extension not found: {capability.__qualname__}")
        self.capability = capability
