"""Registry core: lifecycle state machine and the registry itself."""

from .lifecycle import (
    LifecycleController,
    LifecycleState,
    Operation,
    is_legal,
    ordering_violation,
    permission_violation,
)
from .registry import Registry

__all__ = [
    "LifecycleController",
    "LifecycleState",
    "Operation",
    "Registry",
    "is_legal",
    "ordering_violation",
    "permission_violation",
]
