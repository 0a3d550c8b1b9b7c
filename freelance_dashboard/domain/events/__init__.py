"""
Domain events for the freelance dashboard.
"""

from .base import (
    DomainEvent,
    EventHandler,
    CallbackHandler,
    EventDispatcher
)

from .dashboard_events import (
    ClientAdded,
    ProjectAdded,
    PaymentRecorded,
    ProjectMarkedPaid,
    PaymentRejected,
    ProjectStatusChanged,
    StateReplaced
)

__all__ = [
    # Base
    "DomainEvent",
    "EventHandler",
    "CallbackHandler",
    "EventDispatcher",

    # Dashboard events
    "ClientAdded",
    "ProjectAdded",
    "PaymentRecorded",
    "ProjectMarkedPaid",
    "PaymentRejected",
    "ProjectStatusChanged",
    "StateReplaced",
]
