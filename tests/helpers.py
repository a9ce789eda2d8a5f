"""Shared key enums and declarations for the test suite."""

from enum import Enum, auto

from paramregistry import (
    AllowedSource,
    BooleanValidator,
    ChoiceValidator,
    Importance,
    IntegerValidator,
    Registry,
    Settable,
    StringValidator,
    ValueType,
)

ALL_SOURCES = (AllowedSource.FROM_FILE, AllowedSource.FROM_CMDLINE, AllowedSource.DYNAMIC)


class Options(Enum):
    HOST = auto()
    PORT = auto()
    DEBUG = auto()
    RELEASE = auto()


class Color(Enum):
    RED = auto()
    BLUE = auto()


def declare_options(registry: Registry, dynamic: bool = True) -> None:
    """Declare every Options member; HOST and DEBUG are dynamic if allowed."""
    settable = Settable.DYNAMIC if dynamic else Settable.STATIC
    registry.declare(
        Options.HOST, "host", ValueType.STRING, "localhost", StringValidator(), settable
    )
    registry.declare(
        Options.PORT,
        "port",
        ValueType.INTEGER,
        5555,
        IntegerValidator(1024, 65535),
        Settable.STATIC,
        Importance.REQUIRED,
    )
    registry.declare(
        Options.DEBUG, "debug", ValueType.BOOLEAN, True, BooleanValidator(), settable
    )
    registry.declare(
        Options.RELEASE,
        "release",
        ValueType.STRING,
        "alpha",
        ChoiceValidator(["alpha", "beta", "gold"]),
        Settable.STATIC,
        Importance.REQUIRED,
    )
