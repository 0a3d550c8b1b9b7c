"""
Domain models for the freelance dashboard.
This module exports all domain entities and value types.
"""

from .base import (
    DomainException,
    ValidationError,
    first_present,
    parse_iso_datetime,
    to_iso_timestamp
)

from .client import Client

from .project import (
    Project,
    ProjectStatus,
    PaymentState
)

from .payment import Payment

from .app_state import AppState

__all__ = [
    # Base
    "DomainException",
    "ValidationError",
    "first_present",
    "parse_iso_datetime",
    "to_iso_timestamp",

    # Entities
    "Client",
    "Project",
    "ProjectStatus",
    "PaymentState",
    "Payment",
    "AppState",
]
