"""Text presentation model contract.

A presentation model knows how to show values of one type as text and,
optionally, how to edit them as text. The editor text may differ from the
display text: a float might be displayed rounded but edited at full
precision.
"""

import abc
from typing import Generic, TypeVar

E = TypeVar("E")


class TextPresentationModel(abc.ABC, Generic[E]):
    """Presents (and optionally edits) values of type ``E`` as text."""

    @property
    @abc.abstractmethod
    def is_editable(self) -> bool:
        """Return True if this model supports editing."""

    @property
    @abc.abstractmethod
    def is_validating(self) -> bool:
        """Return True if editor text is validated.

        A non-validating model accepts every possible text.
        """

    @abc.abstractmethod
    def to_display_text(self, value: E | None) -> str:
        """Return the display representation of ``value``."""

    @abc.abstractmethod
    def to_editor_text(self, value: E) -> str:
        """Return the text to install in an editor opened on ``value``.

        Raises:
            UnsupportedOperationError: If the model is not editable.
        """

    @abc.abstractmethod
    def from_editor_text(self, text: str) -> E:
        """Parse text obtained from an editor.

        Raises:
            InvalidTextError: If ``text`` is not a valid representation.
            UnsupportedOperationError: If the model is not editable.
        """
