"""Validators that accept or reject parameter values.

- **Validator**: Protocol every validator implements
- **BaseValidator**: Shared state and blank/padding checks
- **StringValidator**, **BooleanValidator**: Non-numeric built-ins
- **RangeValidator**, **IntegerValidator**, **FloatValidator**: Numeric built-ins
- **ChoiceValidator**: String restricted to a set of literals
- **validator_for**: Picks the built-in validator for a ValueType
"""

from .base import BaseValidator, Validator
from .builtin import (
    BooleanValidator,
    FloatValidator,
    IntegerValidator,
    RangeValidator,
    StringValidator,
    validator_for,
)
from .choice import ChoiceValidator

__all__ = [
    "BaseValidator",
    "BooleanValidator",
    "ChoiceValidator",
    "FloatValidator",
    "IntegerValidator",
    "RangeValidator",
    "StringValidator",
    "Validator",
    "validator_for",
]
