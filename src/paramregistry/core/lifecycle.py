"""Lifecycle state machine for a parameter registry.

The registry moves through four ordered states:

```
START ──(last declaration)──> INITIALIZED ──load_from_file──> DONE_FILE
                                   │                              │
                                   └────────load_from_args────────┴──> DONE_CMDLINE
```

Whether an operation is legal depends only on the current state and the
registry's SourcePolicy. That rule is expressed by two pure functions,
`permission_violation` and `ordering_violation`, so it can be tested without
building a registry. `LifecycleController` wraps them: it raises the matching
error and performs the (monotonic) transitions.
"""

import logging
from enum import Enum, IntEnum

from paramregistry.exceptions import OrderingError, SourcePermissionError
from paramregistry.models import AllowedSource, SourcePolicy

logger = logging.getLogger(__name__)


class LifecycleState(IntEnum):
    """Registry phase. Ordered; never moves backwards."""

    START = 0  # Declaring parameters
    INITIALIZED = 1  # Every key declared, defaults in place
    DONE_FILE = 2  # Properties file applied
    DONE_CMDLINE = 3  # Command-line tokens applied


class Operation(str, Enum):
    """Registry operations gated by the lifecycle."""

    DECLARE = "declare"
    LOAD_FILE = "load_from_file"
    LOAD_ARGS = "load_from_args"
    READ = "get"
    SET = "set"
    CHECK_REQUIRED = "check_required"
    DUMP = "dump"


# Source each operation needs in the policy
_REQUIRED_SOURCE: dict[Operation, AllowedSource] = {
    Operation.LOAD_FILE: AllowedSource.FROM_FILE,
    Operation.LOAD_ARGS: AllowedSource.FROM_CMDLINE,
    Operation.SET: AllowedSource.DYNAMIC,
}

# State reached when an operation completes
TRANSITIONS: dict[Operation, LifecycleState] = {
    Operation.LOAD_FILE: LifecycleState.DONE_FILE,
    Operation.LOAD_ARGS: LifecycleState.DONE_CMDLINE,
}


def permission_violation(operation: Operation, policy: SourcePolicy) -> AllowedSource | None:
    """
    Return the source an operation needs but the policy lacks, or None.

    Args:
        operation: Operation about to run
        policy: The registry's allowed sources
    """
    needed = _REQUIRED_SOURCE.get(operation)
    if needed is not None and not policy.allows(needed):
        return needed
    return None


def ordering_violation(
    operation: Operation, state: LifecycleState, policy: SourcePolicy
) -> str | None:
    """
    Explain why an operation may not run in ``state``, or return None if it may.

    Args:
        operation: Operation about to run
        state: Current lifecycle state
        policy: The registry's allowed sources

    Returns:
        Human-readable reason, or None when the operation is in order
    """
    if operation is Operation.DECLARE:
        if state is not LifecycleState.START:
            return "All parameters are already declared"
        return None

    if state is LifecycleState.START:
        return f"Must declare all parameters before {operation.value}"

    if operation is Operation.LOAD_FILE:
        if state is LifecycleState.DONE_FILE:
            return "Properties file already loaded"
        if state is LifecycleState.DONE_CMDLINE:
            return "Properties file must be loaded before command line"
        return None

    if operation is Operation.LOAD_ARGS:
        if state is LifecycleState.DONE_CMDLINE:
            return "Command line arguments already parsed"
        if policy.file and state is LifecycleState.INITIALIZED:
            return "Parsing command line must occur after loading properties file"
        return None

    if operation is Operation.SET:
        if policy.cmdline and state is not LifecycleState.DONE_CMDLINE:
            return "Must parse command line before dynamic assignment"
        if policy.file and state < LifecycleState.DONE_FILE:
            return "Must load properties file before dynamic assignment"
        return None

    return None


def is_legal(operation: Operation, state: LifecycleState, policy: SourcePolicy) -> bool:
    """True if ``operation`` is both permitted by the policy and in order."""
    return (
        permission_violation(operation, policy) is None
        and ordering_violation(operation, state, policy) is None
    )


class LifecycleController:
    """
    Holds the current state of one registry and enforces its transitions.

    Not thread-safe; a registry and its controller belong to one owner.
    """

    def __init__(self, policy: SourcePolicy) -> None:
        self._policy = policy
        self._state = LifecycleState.START

    @property
    def state(self) -> LifecycleState:
        return self._state

    @property
    def policy(self) -> SourcePolicy:
        return self._policy

    def require(self, operation: Operation) -> None:
        """
        Check that ``operation`` may run now.

        Raises:
            SourcePermissionError: If the policy does not allow the operation
            OrderingError: If the current state does not allow it
        """
        missing = permission_violation(operation, self._policy)
        if missing is not None:
            raise SourcePermissionError(
                f"{operation.value} not permitted: registry does not allow {missing.name}",
                source=missing,
            )
        reason = ordering_violation(operation, self._state, self._policy)
        if reason is not None:
            raise OrderingError(reason, state=self._state)

    def advance(self, target: LifecycleState) -> None:
        """
        Move to ``target``.

        Raises:
            OrderingError: If ``target`` is behind the current state
        """
        if target < self._state:
            raise OrderingError(
                f"Cannot move from {self._state.name} back to {target.name}", state=self._state
            )
        if target is not self._state:
            logger.info(f"Registry state {self._state.name} -> {target.name}")
            self._state = target

    def complete(self, operation: Operation) -> None:
        """Apply the transition that follows a successful ``operation``."""
        target = TRANSITIONS.get(operation)
        if target is not None:
            self.advance(target)
