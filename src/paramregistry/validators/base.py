"""Validator protocol and shared base class.

A validator belongs to exactly one parameter. It remembers the last value it
accepted, so the registry always stores what the validator produced (for
example a float converted from an int default) rather than the raw input.
"""

from abc import ABC, abstractmethod
from typing import Any, Protocol, runtime_checkable

from paramregistry.exceptions import ParameterValidationError
from paramregistry.models.value_type import ValueType


@runtime_checkable
class Validator(Protocol):
    """
    Accept/reject contract for a parameter's values.

    Implementations raise ParameterValidationError to reject. A rejected
    candidate must leave ``value`` unchanged.

    Custom validators may also expose a ``value_type`` attribute; the
    registry refuses to pair such a validator with a parameter of another
    type.
    """

    @property
    def value(self) -> Any:
        """Last accepted value, or None."""
        ...

    def check(self, value: Any) -> None:
        """Validate a typed candidate; None means unset."""
        ...

    def convert_and_check(self, raw: str | None) -> None:
        """Convert a raw string into the target type, then validate it."""
        ...


class BaseValidator(ABC):
    """Common state and text handling for the built-in validators."""

    value_type: ValueType | None = None

    def __init__(self) -> None:
        self._value: Any = None

    @property
    def value(self) -> Any:
        """Last accepted value, or None."""
        return self._value

    @abstractmethod
    def check(self, value: Any) -> None:
        """Validate a typed candidate and remember it."""

    @abstractmethod
    def convert_and_check(self, raw: str | None) -> None:
        """Convert a raw string, then validate and remember it."""

    @staticmethod
    def normalize(raw: str) -> str:
        """
        Reject blank or padded text.

        Args:
            raw: Text as received from a file or command line

        Returns:
            The text, unchanged

        Raises:
            ParameterValidationError: If the text is blank or has
                leading/trailing whitespace
        """
        stripped = raw.strip()
        if not stripped:
            raise ParameterValidationError("value is blank", value=raw)
        if len(stripped) != len(raw):
            raise ParameterValidationError("value has leading/trailing blanks", value=raw)
        return stripped

    def __repr__(self) -> str:
        return f"{type(self).__name__}(value={self._value!r})"
