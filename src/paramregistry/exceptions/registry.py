"""Registry-related exceptions.

This module defines the errors raised by the registry core:
- StructuralError: The key enum or source flags are unusable
- DeclarationError: A parameter declaration is invalid
- SourcePermissionError: A source is not allowed for this registry
- OrderingError: An operation was invoked in the wrong lifecycle state
- ParameterValidationError: A validator rejected a value
- ParameterLookupError: Unknown key or external name
- UnsetParameterError: A parameter was read before it had a value
- CompletenessError: A required parameter never received a value
- MutabilityError: Dynamic write on a static parameter
"""

from typing import Any

from .base import ParamRegistryError


class StructuralError(ParamRegistryError):
    """Registry cannot be constructed from the given key set or source flags."""

    def __init__(self, message: str):
        super().__init__(
            user_message=message,
            recovery_hint="Pass an Enum subclass with at least one member and list each source flag once",
        )


class DeclarationError(ParamRegistryError):
    """A parameter declaration was rejected."""

    def __init__(self, key: Any, reason: str, state: Any = None):
        """
        Initialize declaration error.

        Args:
            key: The parameter key being declared
            reason: Why the declaration was rejected
            state: Lifecycle state, when the declaration came too late
        """
        name = getattr(key, "name", key)
        super().__init__(
            user_message=f"Cannot declare {name}: {reason}",
            technical_message=f"Declaration rejected: {reason}",
            key=key,
            state=state,
        )
        self.reason = reason


class SourcePermissionError(ParamRegistryError):
    """Operation needs a source the registry was not constructed with."""

    def __init__(self, message: str, source: Any = None):
        hint = None
        if source is not None:
            hint = f"Construct the registry with {getattr(source, 'name', source)} to allow this"
        super().__init__(user_message=message, recovery_hint=hint)
        self.source = source


class OrderingError(ParamRegistryError):
    """Operation invoked in a lifecycle state where it is not legal."""

    def __init__(self, message: str, state: Any = None):
        super().__init__(user_message=message, state=state)


class ParameterValidationError(ParamRegistryError):
    """A value was rejected by a validator or a type check."""

    def __init__(
        self, reason: str, name: str | None = None, value: Any = None, key: Any = None
    ):
        """
        Initialize validation error.

        Args:
            reason: Why the value was rejected
            name: External name of the parameter, when known
            value: The rejected value
            key: Key of the parameter, when known
        """
        if name:
            user_msg = f"Invalid value for '{name}': {reason}"
        else:
            user_msg = reason
        super().__init__(
            user_message=user_msg,
            technical_message=f"Validation failed for {name}={value!r}: {reason}",
            recoverable=True,
            key=key,
        )
        self.reason = reason
        self.name = name
        self.value = value

    def for_parameter(self, name: str, key: Any = None) -> "ParameterValidationError":
        """Return a copy of this error attributed to parameter ``name``."""
        return ParameterValidationError(self.reason, name=name, value=self.value, key=key)


class ParameterLookupError(ParamRegistryError, LookupError):
    """Key or external name does not identify a declared parameter."""

    def __init__(self, message: str, key: Any = None):
        super().__init__(user_message=message, key=key)


class UnsetParameterError(ParameterLookupError):
    """Parameter exists but has never been given a value."""

    def __init__(self, key: Any):
        name = getattr(key, "name", key)
        super().__init__(f"{name} has no value", key=key)
        self.recovery_hint = "Give it a default, or set it in the properties file or on the command line"


class CompletenessError(ParamRegistryError):
    """A REQUIRED parameter is still unset."""

    def __init__(self, name: str, key: Any = None):
        super().__init__(
            user_message=f"Required parameter {name} not initialized",
            recoverable=True,
            recovery_hint=f"Provide a value for {name}",
            key=key,
        )
        self.name = name


class MutabilityError(ParamRegistryError):
    """Dynamic write attempted on a STATIC parameter."""

    def __init__(self, key: Any):
        name = getattr(key, "name", key)
        super().__init__(user_message=f"{name} is not dynamic", key=key)
