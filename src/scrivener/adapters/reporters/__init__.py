"""Reporter implementations and factories.

Factories
---------
- sink(): the shared reporter that discards every message.
- string(): a fresh reporter that collects messages in a string.
"""

from .collector import StringMessageReporter
from .console import ConsoleReporter
from .logging_reporter import LoggingReporter
from .null import NULL_REPORTER, NullReporter


def sink() -> NullReporter:
    """Return the shared reporter that discards all messages."""
    return NULL_REPORTER


def string() -> StringMessageReporter:
    """Return a new reporter that collects messages in a string."""
    return StringMessageReporter()


__all__ = [
    "ConsoleReporter",
    "LoggingReporter",
    "NullReporter",
    "StringMessageReporter",
    "sink",
    "string",
]
