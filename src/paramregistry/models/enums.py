"""Enumerations describing parameters and registries."""

from enum import Enum


class ValueSource(str, Enum):
    """Where a parameter's current value came from."""

    DEFAULT = "default"  # Value given at declaration
    COMMAND_LINE = "command_line"  # Value read from command-line tokens
    FILE = "file"  # Value read from the properties file
    DYNAMIC = "dynamic"  # Value written after loading completed


class Importance(str, Enum):
    """Whether a parameter must end up with a value."""

    REQUIRED = "required"
    OPTIONAL = "optional"


class Settable(str, Enum):
    """Whether a parameter may be changed after static loading."""

    STATIC = "static"
    DYNAMIC = "dynamic"


class AllowedSource(str, Enum):
    """Loading and mutation pathways a registry may permit."""

    FROM_FILE = "from_file"
    FROM_CMDLINE = "from_cmdline"
    DYNAMIC = "dynamic"
