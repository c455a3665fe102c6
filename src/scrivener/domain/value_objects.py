"""Value objects describing the validity of user input."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, TypeVar

V = TypeVar("V")


@dataclass(frozen=True)
class ValidationStatus:
    """Whether user input is valid and, if not, why.

    Use the `valid` and `invalid` factories rather than the constructor.
    There is exactly one valid status.
    """

    description: str | None = None

    @classmethod
    def valid(cls) -> ValidationStatus:
        """Return the (singleton) valid status."""
        return VALID

    @classmethod
    def invalid(cls, description: str) -> ValidationStatus:
        """Return a status describing invalid input.

        Raises:
            ValueError: If ``description`` is empty.
        """
        if not description:
            raise ValueError("an invalid status requires a description")
        return cls(description)

    @property
    def is_valid(self) -> bool:
        """Return True if and only if the input is valid."""
        return self.description is None

    def __str__(self) -> str:
        return self.description if self.description is not None else "Valid"


VALID = ValidationStatus()


@dataclass(frozen=True)
class ValueStatus(Generic[V]):
    """The outcome of parsing user input: a value, or a description of the problem."""

    value: V | None = None
    description: str | None = None

    @classmethod
    def valid(cls, value: V) -> ValueStatus[V]:
        """Return a status carrying a parsed value.

        Raises:
            ValueError: If ``value`` is None.
        """
        if value is None:
            raise ValueError("a valid status requires a value")
        return cls(value=value)

    @classmethod
    def invalid(cls, description: str) -> ValueStatus[V]:
        """Return a status describing invalid input.

        Raises:
            ValueError: If ``description`` is empty.
        """
        if not description:
            raise ValueError("an invalid status requires a description")
        return cls(description=description)

    @property
    def is_valid(self) -> bool:
        """Return True if and only if the input is valid."""
        return self.description is None

    def as_validation_status(self) -> ValidationStatus:
        """Project onto a `ValidationStatus`, discarding the value."""
        if self.description is not None:
            return ValidationStatus.invalid(self.description)
        return ValidationStatus.valid()

    def __str__(self) -> str:
        if self.description is not None:
            return self.description
        return str(self.value)
