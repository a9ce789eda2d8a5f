"""Runtime state of a single declared parameter.

Parameter is a dataclass rather than a pydantic model because it owns a live
validator object and is mutated in place by the registry. Its serializable
view is ParameterReport.
"""

from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, Any

from .enums import Importance, Settable, ValueSource
from .report import ParameterReport
from .value_type import ValueType

if TYPE_CHECKING:
    from paramregistry.validators import Validator


@dataclass(slots=True)
class Parameter:
    """One named, typed, validated configuration slot."""

    key: Enum                     # Member of the registry's key enum
    external_name: str            # Name used in properties files and on the command line
    value_type: ValueType
    validator: "Validator"
    value: Any = None             # None means unset
    importance: Importance = Importance.OPTIONAL
    settable: Settable = Settable.STATIC
    source: ValueSource = ValueSource.DEFAULT

    @property
    def is_set(self) -> bool:
        """True if the parameter currently has a value."""
        return self.value is not None

    @property
    def is_required(self) -> bool:
        return self.importance is Importance.REQUIRED

    @property
    def is_dynamic(self) -> bool:
        return self.settable is Settable.DYNAMIC

    def assign(self, value: Any, source: ValueSource) -> None:
        """Store an already-validated value and record where it came from."""
        self.value = value
        self.source = source

    def to_report(self) -> ParameterReport:
        """Snapshot this parameter for rendering."""
        return ParameterReport(
            key=self.key.name,
            external_name=self.external_name,
            value=self.value,
            value_type=self.value_type,
            importance=self.importance,
            source=self.source,
            settable=self.settable,
        )
