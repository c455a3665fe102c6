"""Reporter contracts for errors, warnings and information.

Three capability sets are defined; `SimpleReporter` combines them. The
``formatted_*`` variants render their pattern with the formatted-message
composer in plain-text mode (``%q`` quoted text, ``%s`` literal text, ``%%``
percent sign) before passing it to the plain channel.
"""

import abc

from scrivener.domain.formatting import construct_message


class ErrorReporter(abc.ABC):
    """Channel for errors and, by default, warnings."""

    @abc.abstractmethod
    def error(self, message: str) -> None:
        """Report an error."""

    def formatted_error(self, message: str, *args: object) -> None:
        """Report an error built from a pattern and arguments."""
        self.error(construct_message(False, message, *args))

    def warning(self, message: str) -> None:
        """Issue a warning.

        Reported as an error unless an implementation separates the channels.
        """
        self.error(message)

    def formatted_warning(self, message: str, *args: object) -> None:
        """Issue a warning built from a pattern and arguments."""
        self.warning(construct_message(False, message, *args))


class MessageReporter(abc.ABC):
    """Channel for informational messages."""

    @abc.abstractmethod
    def info(self, message: str) -> None:
        """Report information."""

    def formatted_info(self, message: str, *args: object) -> None:
        """Report information built from a pattern and arguments."""
        self.info(construct_message(False, message, *args))


class SimpleReporter(ErrorReporter, MessageReporter):
    """Reporter offering the error, warning and info channels."""
