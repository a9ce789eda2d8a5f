"""Base exception class for paramregistry.

Every registry error carries two kinds of information: messages for the
person running the program, and the registry context it was raised in.

- `user_message`: Human-friendly message for display to users
- `technical_message`: Log message, suffixed with the context when known
- `recoverable`: True when fixing the input and retrying can succeed
- `recovery_hint`: Optional suggestion for how to fix the issue
- `key`: The parameter key (or external name) involved, if any
- `state`: The lifecycle state the registry was in, if known

Context is filled in as the error travels outward: the code that raises
knows the key, and `ErrorContext` around a registry operation adds the
state without overwriting anything already set.
"""

from typing import Any, Optional, Self


def _label(value: Any) -> str:
    return str(getattr(value, "name", value))


class ParamRegistryError(Exception):
    """
    Base exception for all paramregistry errors.

    Attributes:
        user_message: Human-friendly message for display
        recoverable: Whether retrying with fixed input can succeed
        recovery_hint: Optional hint for how to fix the issue
        key: Parameter key or external name the error concerns
        state: Lifecycle state of the registry when the error was raised
    """

    def __init__(
        self,
        user_message: str,
        technical_message: Optional[str] = None,
        recoverable: bool = False,
        recovery_hint: Optional[str] = None,
        key: Any = None,
        state: Any = None,
    ):
        super().__init__(user_message)
        self.user_message = user_message
        self._technical_message = technical_message or user_message
        self.recoverable = recoverable
        self.recovery_hint = recovery_hint
        self.key = key
        self.state = state

    def __str__(self) -> str:
        return self.user_message

    @property
    def context(self) -> str:
        """Registry context as ``key=..., state=...``, or empty if unknown."""
        parts = []
        if self.key is not None:
            parts.append(f"key={_label(self.key)}")
        if self.state is not None:
            parts.append(f"state={_label(self.state)}")
        return ", ".join(parts)

    @property
    def technical_message(self) -> str:
        if not self.context:
            return self._technical_message
        return f"{self._technical_message} ({self.context})"

    def attach(self, key: Any = None, state: Any = None) -> Self:
        """Fill in registry context the raiser did not know; existing values win."""
        if self.key is None:
            self.key = key
        if self.state is None:
            self.state = state
        return self

    def get_full_message(self) -> str:
        """Get complete error message with recovery hint."""
        msg = self.user_message
        if self.recovery_hint:
            msg += f"\n\nSuggestion: {self.recovery_hint}"
        return msg
