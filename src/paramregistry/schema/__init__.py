"""Declarative registry schemas loaded from JSON.

Example schema:

```json
{
  "name": "Options",
  "sources": ["from_file", "from_cmdline", "dynamic"],
  "parameters": [
    {"key": "PORT", "name": "port", "type": "integer", "default": 5555,
     "minimum": 1024, "maximum": 65535, "importance": "required"},
    {"key": "DEBUG", "name": "debug", "type": "boolean", "default": true,
     "settable": "dynamic"}
  ]
}
```
"""

from .builder import build_registry
from .models import ParameterSpec, RegistrySchema

__all__ = ["ParameterSpec", "RegistrySchema", "build_registry"]
