"""Text presentation models for common value types."""

from collections.abc import Callable
from typing import TypeVar

from scrivener.domain.value_objects import ValueStatus
from scrivener.interfaces.errors import InvalidTextError, UnsupportedOperationError
from scrivener.interfaces.presentation import TextPresentationModel

E = TypeVar("E")


class StringPresentationModel(TextPresentationModel[str]):
    """Edits strings as themselves. Every text is accepted."""

    @property
    def is_editable(self) -> bool:
        return True

    @property
    def is_validating(self) -> bool:
        return False

    def to_display_text(self, value: str | None) -> str:
        return value if value is not None else ""

    def to_editor_text(self, value: str) -> str:
        return value

    def from_editor_text(self, text: str) -> str:
        return text


class IntegerPresentationModel(TextPresentationModel[int]):
    """Presents integers in decimal, optionally with thousands separators.

    Editor text never contains separators; surrounding whitespace and
    underscores or commas between digits are accepted when parsing.

    Args:
        grouping: Display with ``,`` thousands separators.
    """

    def __init__(self, *, grouping: bool = False) -> None:
        self._grouping = grouping

    @property
    def is_editable(self) -> bool:
        return True

    @property
    def is_validating(self) -> bool:
        return True

    def to_display_text(self, value: int | None) -> str:
        if value is None:
            return ""
        return f"{value:,}" if self._grouping else str(value)

    def to_editor_text(self, value: int) -> str:
        return str(value)

    def from_editor_text(self, text: str) -> int:
        cleaned = text.strip().replace(",", "")
        if not cleaned:
            raise InvalidTextError(text, "a number is required")
        try:
            return int(cleaned)
        except ValueError:
            raise InvalidTextError(text, "not a whole number") from None

    def validate(self, text: str) -> ValueStatus[int]:
        """Parse ``text`` into a `ValueStatus` instead of raising."""
        try:
            return ValueStatus.valid(self.from_editor_text(text))
        except InvalidTextError as exc:
            return ValueStatus.invalid(exc.reason)


class DisplayOnlyPresentationModel(TextPresentationModel[E]):
    """Presents values with a rendering function and refuses to edit them.

    Args:
        render: Converts a non-None value to display text. Defaults to ``str``.
    """

    def __init__(self, render: Callable[[E], str] = str) -> None:
        self._render = render

    @property
    def is_editable(self) -> bool:
        return False

    @property
    def is_validating(self) -> bool:
        return False

    def to_display_text(self, value: E | None) -> str:
        return self._render(value) if value is not None else ""

    def to_editor_text(self, value: E) -> str:
        raise UnsupportedOperationError("this presentation model does not support editing")

    def from_editor_text(self, text: str) -> E:
        raise UnsupportedOperationError("this presentation model does not support editing")
