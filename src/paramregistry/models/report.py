"""Serializable views of registry state."""

from pydantic import BaseModel, Field

from .enums import Importance, Settable, ValueSource
from .value_type import ValueType


class ParameterReport(BaseModel):
    """Snapshot of one parameter, used by the reporter."""

    key: str = Field(description="Name of the enum member identifying the parameter")
    external_name: str = Field(description="Name used in files and on the command line")
    value: str | bool | int | float | None = Field(
        default=None, description="Current value (None = unset)"
    )
    value_type: ValueType
    importance: Importance
    source: ValueSource
    settable: Settable


class LoadSummary(BaseModel):
    """Outcome of a successful load from a file or command-line tokens."""

    source: ValueSource = Field(description="FILE or COMMAND_LINE")
    applied: list[str] = Field(
        default_factory=list, description="External names assigned by this load, in order"
    )
    ignored: list[str] = Field(
        default_factory=list, description="Provider keys matching no parameter (file loads only)"
    )

    @property
    def applied_count(self) -> int:
        return len(self.applied)
