"""paramregistry: typed, validated configuration parameters with an explicit lifecycle."""

__version__ = "0.1.0"

from .core import LifecycleState, Registry
from .models import (
    AllowedSource,
    Importance,
    LoadSummary,
    ParameterReport,
    Settable,
    ValueSource,
    ValueType,
)
from .validators import (
    BooleanValidator,
    ChoiceValidator,
    FloatValidator,
    IntegerValidator,
    RangeValidator,
    StringValidator,
    Validator,
)

__all__ = [
    "AllowedSource",
    "BooleanValidator",
    "ChoiceValidator",
    "FloatValidator",
    "Importance",
    "IntegerValidator",
    "LifecycleState",
    "LoadSummary",
    "ParameterReport",
    "RangeValidator",
    "Registry",
    "Settable",
    "StringValidator",
    "Validator",
    "ValueSource",
    "ValueType",
]
