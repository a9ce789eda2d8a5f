"""
Centralized error handling utilities.

## Quick Reference

| Scenario | Use This |
|----------|----------|
| Show an error on the command line | `format_error_for_display(e)` |
| Convert a pydantic error from a schema file | `wrap_pydantic_error(e, path)` |
| Registry operation with logging and context | `with ErrorContext("load properties", state=s): ...` |

## Architecture

```
CLI            formats error.user_message and error.recovery_hint
   ^
   | ParamRegistryError
   |
Registry       raises typed errors tagged with key and lifecycle state
   ^
   | ValueError, OSError, pydantic.ValidationError
   |
Adapters       parse text, read files, validate schema JSON
```
"""

import logging
from typing import Any, Optional

from .base import ParamRegistryError
from .sources import SchemaError

logger = logging.getLogger(__name__)


class ErrorContext:
    """
    Context manager around one registry operation.

    Errors always propagate. On the way out, a ParamRegistryError is tagged
    with the key and lifecycle state given here (unless the raiser already
    set them) and logged with that context. Other exceptions are logged with
    their traceback.

    Example:
        ```python
        with ErrorContext("load properties", logger_instance=logger, state=registry.state):
            registry.load_from_file(path)
        ```
    """

    def __init__(
        self,
        operation: str,
        logger_instance: Optional[logging.Logger] = None,
        key: Any = None,
        state: Any = None,
        level: int = logging.ERROR,
    ):
        """
        Initialize error context.

        Args:
            operation: Description of the operation, used as "Failed to <operation>"
            logger_instance: Logger to use (defaults to module logger)
            key: Parameter key the operation works on, if any
            state: Lifecycle state the operation starts from
            level: Level for failure records; the registry logs its own
                failures at DEBUG and leaves ERROR to the caller
        """
        self.operation = operation
        self.logger = logger_instance or logger
        self.key = key
        self.state = state
        self.level = level

    def __enter__(self):
        self.logger.debug(f"Starting: {self.operation}")
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        if exc_type is None:
            self.logger.debug(f"Completed: {self.operation}")
            return False

        if isinstance(exc_val, ParamRegistryError):
            exc_val.attach(key=self.key, state=self.state)
            self.logger.log(self.level, f"Failed to {self.operation}: {exc_val.technical_message}")
        else:
            self.logger.log(self.level, f"Failed to {self.operation}: {exc_val}", exc_info=True)
        return False


def wrap_pydantic_error(error: Exception, file_path: str) -> SchemaError:
    """
    Convert a pydantic validation error raised while reading a schema file.

    Args:
        error: The pydantic ValidationError
        file_path: Path to the schema file that failed validation

    Returns:
        A SchemaError with a user-friendly message
    """
    from pydantic import ValidationError

    error_msg = str(error)

    if "Invalid JSON" in error_msg or "json_invalid" in error_msg:
        if "Invalid JSON:" in error_msg:
            parse_error = error_msg.split("Invalid JSON:")[1].split("[type=")[0].strip()
        else:
            parse_error = error_msg
        return SchemaError(file_path, f"invalid JSON: {parse_error}")

    if isinstance(error, ValidationError):
        errors = error.errors()
        if len(errors) == 1:
            first_error = errors[0]
            field = ".".join(str(loc) for loc in first_error.get("loc", ("unknown",)))
            return SchemaError(
                file_path,
                first_error.get("msg", "validation failed"),
                field=field,
                value=first_error.get("input"),
            )
        if errors:
            error_lines = []
            for err in errors:
                field = ".".join(str(loc) for loc in err.get("loc", ("unknown",)))
                error_lines.append(f"  - {field}: {err.get('msg', 'validation failed')}")
            combined_msg = f"{len(errors)} validation errors:\n" + "\n".join(error_lines)
            return SchemaError(file_path, combined_msg)

    return SchemaError(file_path, error_msg)


def format_error_for_display(error: Exception) -> tuple[str, Optional[str]]:
    """
    Format an exception for user display.

    Args:
        error: The exception to format

    Returns:
        Tuple of (user_message, recovery_hint or None)
    """
    if isinstance(error, ParamRegistryError):
        return error.user_message, error.recovery_hint

    error_type = type(error).__name__
    return f"{error_type}: {error}", None
