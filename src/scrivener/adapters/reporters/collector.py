"""Reporter that collects messages in a string."""

import io

from scrivener.interfaces.reporter import SimpleReporter


class StringMessageReporter(SimpleReporter):
    """Collect every reported message, newline-separated, in one string.

    Errors, warnings and information share the buffer, in call order.

    Example:
        ```py
        reporter = StringMessageReporter()
        reporter.info("a")
        reporter.info("b")
        assert reporter.messages() == "a\\nb"
        ```
    """

    def __init__(self) -> None:
        self._buffer = io.StringIO()
        self._count = 0

    def error(self, message: str) -> None:
        self._append(message)

    def warning(self, message: str) -> None:
        self._append(message)

    def info(self, message: str) -> None:
        self._append(message)

    def messages(self) -> str:
        """Return the collected messages."""
        return self._buffer.getvalue()

    def _append(self, message: str) -> None:
        if self._count:
            self._buffer.write("\n")
        self._buffer.write(message)
        self._count += 1
