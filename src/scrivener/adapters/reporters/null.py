"""Reporter that discards every message."""

from scrivener.interfaces.reporter import SimpleReporter


class NullReporter(SimpleReporter):
    """Stateless reporter that drops all messages.

    Use `scrivener.adapters.reporters.sink()` to obtain the shared instance.
    """

    def error(self, message: str) -> None:
        pass

    def warning(self, message: str) -> None:
        pass

    def info(self, message: str) -> None:
        pass

    def __repr__(self) -> str:
        return "NullReporter()"


NULL_REPORTER = NullReporter()
