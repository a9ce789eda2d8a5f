"""Semantic value types a parameter may hold."""

import re
from enum import Enum
from typing import Any

_INTEGER_TEXT = re.compile(r"[+-]?\d+")


class ValueType(str, Enum):
    """
    Closed set of value types.

    Sized integer types carry the range of a signed integer of that width,
    so a BYTE parameter can never hold 200 even though Python ints are
    unbounded.
    """

    STRING = "string"
    BOOLEAN = "boolean"
    BYTE = "byte"  # 8-bit signed
    SHORT = "short"  # 16-bit signed
    INTEGER = "integer"  # 32-bit signed
    LONG = "long"  # 64-bit signed
    FLOAT = "float"
    DOUBLE = "double"

    @property
    def python_type(self) -> type:
        """Python type used to store values of this type."""
        return _PYTHON_TYPES[self]

    @property
    def is_numeric(self) -> bool:
        """True for integer and floating point types."""
        return self.python_type in (int, float)

    @property
    def is_integral(self) -> bool:
        """True for the sized integer types."""
        return self.python_type is int

    @property
    def bounds(self) -> tuple[int | None, int | None]:
        """Intrinsic (minimum, maximum) of the type; (None, None) if unbounded."""
        return _INTEGER_BOUNDS.get(self, (None, None))

    def accepts(self, value: Any) -> bool:
        """
        Check whether a Python value may be stored in a parameter of this type.

        None is always accepted and means "unset". ``bool`` is never accepted
        for numeric types even though it subclasses ``int``; ``int`` is
        accepted for FLOAT and DOUBLE.

        Args:
            value: Candidate value

        Returns:
            True if the value is assignable
        """
        if value is None:
            return True
        if self is ValueType.STRING:
            return isinstance(value, str)
        if self is ValueType.BOOLEAN:
            return isinstance(value, bool)
        if isinstance(value, bool):
            return False
        if self.is_integral:
            if not isinstance(value, int):
                return False
            low, high = self.bounds
            return low <= value <= high
        return isinstance(value, (int, float))

    def parse(self, text: str) -> Any:
        """
        Convert already-trimmed text into a value of this type.

        Args:
            text: Non-blank text without surrounding whitespace

        Returns:
            The parsed value

        Raises:
            ValueError: If the text is not a valid literal of this type
        """
        if self is ValueType.STRING:
            return text
        if self is ValueType.BOOLEAN:
            lowered = text.lower()
            if lowered == "true":
                return True
            if lowered == "false":
                return False
            raise ValueError(f"Invalid boolean: '{text}'")
        if "_" in text:
            raise ValueError(f"Invalid {self.value}: '{text}'")
        if self.is_integral:
            if not _INTEGER_TEXT.fullmatch(text):
                raise ValueError(f"Invalid {self.value}: '{text}'")
            return int(text)
        try:
            return float(text)
        except ValueError:
            raise ValueError(f"Invalid {self.value}: '{text}'") from None


_PYTHON_TYPES: dict[ValueType, type] = {
    ValueType.STRING: str,
    ValueType.BOOLEAN: bool,
    ValueType.BYTE: int,
    ValueType.SHORT: int,
    ValueType.INTEGER: int,
    ValueType.LONG: int,
    ValueType.FLOAT: float,
    ValueType.DOUBLE: float,
}

_INTEGER_BOUNDS: dict[ValueType, tuple[int, int]] = {
    ValueType.BYTE: (-(2**7), 2**7 - 1),
    ValueType.SHORT: (-(2**15), 2**15 - 1),
    ValueType.INTEGER: (-(2**31), 2**31 - 1),
    ValueType.LONG: (-(2**63), 2**63 - 1),
}
