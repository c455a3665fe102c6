"""Reporter that routes messages to the `logging` module."""

import logging

from scrivener.interfaces.reporter import SimpleReporter


class LoggingReporter(SimpleReporter):
    """Emit errors, warnings and information as log records.

    The channels map to ERROR, WARNING and INFO. Messages are passed as a
    ``%s`` argument, so ``%`` characters in them are never interpreted.

    Args:
        logger: Destination logger, or the name of one.
    """

    def __init__(self, logger: logging.Logger | str = "scrivener.reports") -> None:
        self._logger = logging.getLogger(logger) if isinstance(logger, str) else logger

    @property
    def logger(self) -> logging.Logger:
        """Return the destination logger."""
        return self._logger

    def error(self, message: str) -> None:
        self._logger.error("%s", message)

    def warning(self, message: str) -> None:
        self._logger.warning("%s", message)

    def info(self, message: str) -> None:
        self._logger.info("%s", message)
