"""Built-in validators, one per supported value type."""

import logging
import math
from typing import Any

from paramregistry.exceptions import DeclarationError, ParameterValidationError
from paramregistry.models.value_type import ValueType

from .base import BaseValidator

logger = logging.getLogger(__name__)


class StringValidator(BaseValidator):
    """Accepts any non-blank string without surrounding whitespace."""

    value_type = ValueType.STRING

    def check(self, value: Any) -> None:
        if value is None:
            self._value = None
            return
        if not isinstance(value, str):
            raise ParameterValidationError(
                f"expected a string, got {type(value).__name__}", value=value
            )
        self._value = self.normalize(value)

    def convert_and_check(self, raw: str | None) -> None:
        self.check(raw)


class BooleanValidator(BaseValidator):
    """Accepts booleans; text must be 'true' or 'false' in any letter case."""

    value_type = ValueType.BOOLEAN

    def check(self, value: Any) -> None:
        if value is not None and not isinstance(value, bool):
            raise ParameterValidationError(
                f"expected a boolean, got {type(value).__name__}", value=value
            )
        self._value = value

    def convert_and_check(self, raw: str | None) -> None:
        if raw is None:
            self._value = None
            return
        text = self.normalize(raw)
        try:
            parsed = ValueType.BOOLEAN.parse(text)
        except ValueError as e:
            raise ParameterValidationError(str(e), value=raw) from e
        self.check(parsed)


class RangeValidator(BaseValidator):
    """
    Numeric validator with optional inclusive bounds.

    Omitting both bounds accepts any value of the type. Sized integer types
    are additionally held to their intrinsic width. NaN fails any bound;
    infinities fail the bound on their side.

    Example:
        ```python
        port = RangeValidator(ValueType.INTEGER, minimum=1024, maximum=65535)
        port.convert_and_check("8080")
        port.value  # 8080
        ```
    """

    def __init__(
        self,
        value_type: ValueType,
        minimum: int | float | None = None,
        maximum: int | float | None = None,
    ) -> None:
        """
        Initialize a range validator.

        Args:
            value_type: A numeric ValueType
            minimum: Inclusive lower bound (optional)
            maximum: Inclusive upper bound (optional)

        Raises:
            DeclarationError: If the type is not numeric, a bound does not
                fit the type, or minimum > maximum
        """
        super().__init__()
        if not value_type.is_numeric:
            raise DeclarationError(value_type, "range validation needs a numeric type")
        for bound in (minimum, maximum):
            if bound is not None and not value_type.accepts(bound):
                raise DeclarationError(
                    value_type, f"bound {bound!r} is not a valid {value_type.value}"
                )
            if isinstance(bound, float) and math.isnan(bound):
                raise DeclarationError(value_type, "bound must not be NaN")
        if minimum is not None and maximum is not None and minimum > maximum:
            raise DeclarationError(value_type, f"minimum {minimum} exceeds maximum {maximum}")
        self.value_type = value_type
        self.minimum = minimum
        self.maximum = maximum

    def check(self, value: Any) -> None:
        if value is None:
            self._value = None
            return
        if not self.value_type.accepts(value):
            low, high = self.value_type.bounds
            if self.value_type.is_integral and isinstance(value, int) and not isinstance(value, bool):
                reason = f"value out of range for {self.value_type.value}: {value}; must be in [{low}, {high}]"
            else:
                reason = f"expected {self.value_type.value}, got {type(value).__name__}"
            raise ParameterValidationError(reason, value=value)

        bounded = self.minimum is not None or self.maximum is not None
        if bounded and isinstance(value, float) and math.isnan(value):
            raise ParameterValidationError("value is not a number", value=value)
        if self.minimum is not None and value < self.minimum:
            raise ParameterValidationError(
                f"value too small: {value}; must be >= {self.minimum}", value=value
            )
        if self.maximum is not None and value > self.maximum:
            raise ParameterValidationError(
                f"value too large: {value}; must be <= {self.maximum}", value=value
            )
        self._value = self.value_type.python_type(value)

    def convert_and_check(self, raw: str | None) -> None:
        if raw is None:
            raise ParameterValidationError("value is null")
        text = self.normalize(raw)
        try:
            parsed = self.value_type.parse(text)
        except ValueError as e:
            logger.debug(f"Conversion to {self.value_type.value} failed: {e}")
            raise ParameterValidationError(str(e), value=raw) from e
        self.check(parsed)

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}({self.value_type.value}, minimum={self.minimum!r}, "
            f"maximum={self.maximum!r}, value={self._value!r})"
        )


class IntegerValidator(RangeValidator):
    """RangeValidator over 32-bit integers."""

    def __init__(self, minimum: int | None = None, maximum: int | None = None) -> None:
        super().__init__(ValueType.INTEGER, minimum, maximum)


class FloatValidator(RangeValidator):
    """RangeValidator over double precision floats."""

    def __init__(self, minimum: float | None = None, maximum: float | None = None) -> None:
        super().__init__(ValueType.DOUBLE, minimum, maximum)


def validator_for(
    value_type: ValueType,
    minimum: int | float | None = None,
    maximum: int | float | None = None,
) -> BaseValidator:
    """
    Pick the built-in validator for a value type.

    Args:
        value_type: Type of the parameter
        minimum: Inclusive lower bound, numeric types only
        maximum: Inclusive upper bound, numeric types only

    Returns:
        A fresh validator instance

    Raises:
        DeclarationError: If bounds are given for a non-numeric type
    """
    if value_type.is_numeric:
        return RangeValidator(value_type, minimum, maximum)
    if minimum is not None or maximum is not None:
        raise DeclarationError(value_type, "bounds are only supported for numeric types")
    if value_type is ValueType.BOOLEAN:
        return BooleanValidator()
    return StringValidator()
