"""Exceptions raised by source adapters and schema loading.

- ArgumentError: Command-line token sequence is malformed
- PropertiesFileError: Properties file cannot be read or parsed
- SchemaError: Schema file has invalid syntax or values
"""

from typing import Any

from .base import ParamRegistryError


class ArgumentError(ParamRegistryError):
    """Command-line tokens do not form name/value pairs."""

    def __init__(self, message: str, token: str | None = None):
        super().__init__(
            user_message=message,
            recoverable=True,
            recovery_hint="Pass parameters as '-name value' pairs",
        )
        self.token = token


class PropertiesFileError(ParamRegistryError):
    """Properties file is missing, unreadable or unparsable."""

    def __init__(self, file_path: str, reason: str):
        """
        Initialize properties file error.

        Args:
            file_path: Path to the properties file
            reason: What went wrong
        """
        super().__init__(
            user_message=f"Cannot read properties file '{file_path}': {reason}",
            technical_message=f"Properties file error in {file_path}: {reason}",
            recoverable=True,
            recovery_hint="Check the path and that the file uses 'key=value' lines",
        )
        self.file_path = file_path
        self.reason = reason


class SchemaError(ParamRegistryError):
    """Schema file is not valid JSON or fails validation."""

    def __init__(self, file_path: str, reason: str, field: str | None = None, value: Any = None):
        """
        Initialize schema error.

        Args:
            file_path: Path to the schema file
            reason: Why the schema is invalid
            field: The schema field that failed validation (optional)
            value: The invalid value (optional)
        """
        if field:
            user_msg = f"Invalid schema value for '{field}': {reason}"
        else:
            user_msg = f"Schema file is invalid: {reason}"

        recovery = f"Edit the schema file: {file_path}"
        if field and "type" in field:
            recovery += "\nValid types: string, boolean, byte, short, integer, long, float, double"

        super().__init__(
            user_message=user_msg,
            technical_message=f"Schema error in {file_path} at {field}={value!r}: {reason}",
            recoverable=True,
            recovery_hint=recovery,
        )
        self.file_path = file_path
        self.field = field
        self.value = value
