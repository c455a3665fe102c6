"""Line writers: destinations for `LineSplittingWriter` and friends."""

import logging

from scrivener.interfaces.reporter import MessageReporter
from scrivener.interfaces.streams import LineWriter


class CollectingLineWriter(LineWriter):
    """Collect lines in a list. Intended for tests and small result sets."""

    def __init__(self) -> None:
        self.lines: list[str] = []

    def writeln(self, s: str = "") -> None:
        if "\n" in s:
            raise ValueError(f"line must not contain a newline: {s!r}")
        self.lines.append(s)

    def flush(self) -> None:
        pass


class LoggerLineWriter(LineWriter):
    """Emit each line as one log record.

    Args:
        logger: Destination logger, or the name of one.
        level: Level of the emitted records.
    """

    def __init__(self, logger: logging.Logger | str, level: int = logging.INFO) -> None:
        self._logger = logging.getLogger(logger) if isinstance(logger, str) else logger
        self._level = level

    def writeln(self, s: str = "") -> None:
        self._logger.log(self._level, "%s", s)

    def flush(self) -> None:
        for handler in self._logger.handlers:
            handler.flush()


class ReporterLineWriter(LineWriter):
    """Report each line as one informational message."""

    def __init__(self, reporter: MessageReporter) -> None:
        self._reporter = reporter

    def writeln(self, s: str = "") -> None:
        self._reporter.info(s)

    def flush(self) -> None:
        pass
