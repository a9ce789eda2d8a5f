"""
Custom exception hierarchy for paramregistry.

## Exception Hierarchy

```
ParamRegistryError (base)
├── StructuralError
├── DeclarationError
├── SourcePermissionError
├── OrderingError
├── ParameterValidationError
├── ParameterLookupError (also a builtin LookupError)
│   └── UnsetParameterError
├── CompletenessError
├── MutabilityError
├── ArgumentError
├── PropertiesFileError
└── SchemaError
```

## Usage

All custom exceptions inherit from `ParamRegistryError`, which provides:

- `user_message`: Human-friendly message for display to users
- `technical_message`: Detailed message for logging
- `recoverable`: Whether the error can be recovered from
- `recovery_hint`: Optional suggestion for how to fix the issue
- `key` and `state`: The parameter and lifecycle state involved, when known;
  `technical_message` ends with them, e.g. `(key=PORT, state=DONE_FILE)`

### Example: Out-of-range command-line value

```python
from paramregistry.exceptions import ParameterValidationError

try:
    registry.load_from_args(["-port", "80"])
except ParameterValidationError as e:
    print(e.user_message)
    # Invalid value for 'port': value too small: 80; must be >= 1024
```
"""

from .base import ParamRegistryError
from .handlers import ErrorContext, format_error_for_display, wrap_pydantic_error
from .registry import (
    CompletenessError,
    DeclarationError,
    MutabilityError,
    OrderingError,
    ParameterLookupError,
    ParameterValidationError,
    SourcePermissionError,
    StructuralError,
    UnsetParameterError,
)
from .sources import ArgumentError, PropertiesFileError, SchemaError

__all__ = [
    # Base
    "ParamRegistryError",
    # Registry
    "CompletenessError",
    "DeclarationError",
    "MutabilityError",
    "OrderingError",
    "ParameterLookupError",
    "ParameterValidationError",
    "SourcePermissionError",
    "StructuralError",
    "UnsetParameterError",
    # Sources
    "ArgumentError",
    "PropertiesFileError",
    "SchemaError",
    # Handlers
    "ErrorContext",
    "format_error_for_display",
    "wrap_pydantic_error",
]
