"""Validator restricting a string parameter to a fixed set of literals."""

from collections.abc import Iterable
from typing import Any

from paramregistry.exceptions import DeclarationError, ParameterValidationError
from paramregistry.models.value_type import ValueType

from .base import BaseValidator


class ChoiceValidator(BaseValidator):
    """
    Accepts only one of the given literals (case-sensitive).

    Example:
        ```python
        release = ChoiceValidator(["alpha", "beta", "gold"])
        release.convert_and_check("beta")
        ```
    """

    value_type = ValueType.STRING

    def __init__(self, choices: Iterable[str]) -> None:
        super().__init__()
        self.choices: tuple[str, ...] = tuple(choices)
        if not self.choices:
            raise DeclarationError(ValueType.STRING, "choice list is empty")

    def check(self, value: Any) -> None:
        if value is None:
            self._value = None
            return
        if value not in self.choices:
            allowed = ", ".join(self.choices)
            raise ParameterValidationError(f"'{value}' is not one of: {allowed}", value=value)
        self._value = value

    def convert_and_check(self, raw: str | None) -> None:
        if raw is None:
            self._value = None
            return
        self.check(self.normalize(raw))

    def __repr__(self) -> str:
        return f"ChoiceValidator({list(self.choices)!r}, value={self._value!r})"
