"""Data models for paramregistry."""

from .enums import AllowedSource, Importance, Settable, ValueSource
from .parameter import Parameter
from .policy import SourcePolicy
from .report import LoadSummary, ParameterReport
from .value_type import ValueType

__all__ = [
    "AllowedSource",
    "Importance",
    "LoadSummary",
    "Parameter",
    "ParameterReport",
    "Settable",
    "SourcePolicy",
    "ValueSource",
    "ValueType",
]
