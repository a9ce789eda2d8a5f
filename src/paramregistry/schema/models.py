"""Pydantic models describing a registry declaratively (schema files)."""

import logging
from pathlib import Path

from pydantic import BaseModel, Field, ValidationError, field_validator, model_validator

from paramregistry.exceptions import SchemaError, wrap_pydantic_error
from paramregistry.models import AllowedSource, Importance, Settable, ValueType
from paramregistry.validators import BaseValidator, ChoiceValidator, validator_for

logger = logging.getLogger(__name__)


class ParameterSpec(BaseModel):
    """Declaration of one parameter."""

    key: str = Field(
        pattern=r"^[A-Za-z][A-Za-z0-9_]*$",
        description="Symbolic key, becomes an enum member name (e.g. PORT)",
    )
    name: str = Field(description="External name used in files and on the command line")
    type: ValueType = Field(description="Value type")
    default: str | bool | int | float | None = Field(
        default=None, description="Default value (None = unset)"
    )
    minimum: int | float | None = Field(default=None, description="Inclusive lower bound")
    maximum: int | float | None = Field(default=None, description="Inclusive upper bound")
    choices: list[str] | None = Field(default=None, description="Allowed literals (strings only)")
    settable: Settable = Field(default=Settable.STATIC, description="Whether set() is allowed")
    importance: Importance = Field(default=Importance.OPTIONAL, description="Whether a value is required")
    description: str | None = Field(default=None, description="Free text shown in reports")

    @model_validator(mode="after")
    def check_constraints(self) -> "ParameterSpec":
        """Bounds only on numeric types, choices only on strings, never both."""
        has_bounds = self.minimum is not None or self.maximum is not None
        if has_bounds and not self.type.is_numeric:
            raise ValueError(f"minimum/maximum need a numeric type, not {self.type.value}")
        if self.choices is not None:
            if self.type is not ValueType.STRING:
                raise ValueError("choices need type 'string'")
            if has_bounds:
                raise ValueError("choices and minimum/maximum are exclusive")
        return self

    def make_validator(self) -> BaseValidator:
        """Build a fresh validator for this parameter."""
        if self.choices is not None:
            return ChoiceValidator(self.choices)
        return validator_for(self.type, self.minimum, self.maximum)


class RegistrySchema(BaseModel):
    """A complete registry: allowed sources plus every parameter."""

    name: str = Field(
        default="Parameters",
        pattern=r"^[A-Za-z][A-Za-z0-9_]*$",
        description="Name of the generated key enum",
    )
    sources: list[AllowedSource] = Field(
        default_factory=list, description="Allowed sources (from_file, from_cmdline, dynamic)"
    )
    parameters: list[ParameterSpec] = Field(min_length=1, description="Parameter declarations")

    @field_validator("parameters")
    @classmethod
    def check_unique_keys(cls, parameters: list[ParameterSpec]) -> list[ParameterSpec]:
        seen: set[str] = set()
        for spec in parameters:
            if spec.key in seen:
                raise ValueError(f"duplicate key {spec.key}")
            seen.add(spec.key)
        return parameters

    @classmethod
    def from_json_file(cls, path: Path) -> "RegistrySchema":
        """
        Load and validate a schema from JSON.

        Raises:
            FileNotFoundError: If the file doesn't exist
            SchemaError: If the JSON is malformed or fails validation
        """
        if not path.exists():
            raise FileNotFoundError(f"File not found: {path}")

        content = path.read_text(encoding="utf-8")
        if not content.strip():
            raise SchemaError(str(path), "file is empty")

        try:
            schema = cls.model_validate_json(content)
        except ValidationError as e:
            logger.error(f"Validation error loading schema from {path}: {e}")
            raise wrap_pydantic_error(e, str(path)) from e

        logger.debug(f"Loaded schema {schema.name} with {len(schema.parameters)} parameter(s) from {path}")
        return schema
