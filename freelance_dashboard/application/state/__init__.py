"""
State store: commands, the transition function and the store that owns the state.
"""

from .commands import (
    Command,
    AddClient,
    AddProject,
    AddPayment,
    MarkProjectPaid,
    UpdateProjectStatus,
    SetInitialData
)
from .transitions import (
    TransitionResult,
    transition,
    apply,
    INVALID_PAYMENT,
    PAYMENT_PROJECT_MISMATCH,
    PROJECT_NOT_FOUND
)
from .store import AppStateStore

__all__ = [
    "Command",
    "AddClient",
    "AddProject",
    "AddPayment",
    "MarkProjectPaid",
    "UpdateProjectStatus",
    "SetInitialData",
    "TransitionResult",
    "transition",
    "apply",
    "INVALID_PAYMENT",
    "PAYMENT_PROJECT_MISMATCH",
    "PROJECT_NOT_FOUND",
    "AppStateStore",
]
