"""
Commands accepted by the state store.
One frozen dataclass per kind of requested state change.
"""

from dataclasses import dataclass
from typing import Union

from freelance_dashboard.domain.models import (
    AppState,
    Client,
    Payment,
    Project,
    ProjectStatus,
    ValidationError
)


@dataclass(frozen=True)
class AddClient:
    """Append a client. No validation is performed."""
    client: Client


@dataclass(frozen=True)
class AddProject:
    """Append a project. No validation is performed."""
    project: Project


@dataclass(frozen=True)
class AddPayment:
    """Append a payment record without touching any project's payment state."""
    payment: Payment


@dataclass(frozen=True)
class MarkProjectPaid:
    """Mark a project paid and record the payment, if the payment is valid."""
    project_id: str
    payment: Payment


@dataclass(frozen=True)
class UpdateProjectStatus:
    """Set the work status of a project."""
    project_id: str
    status: ProjectStatus

    def __post_init__(self):
        try:
            object.__setattr__(self, "status", ProjectStatus(self.status))
        except ValueError:
            raise ValidationError(f"Invalid project status: {self.status}", "status")


@dataclass(frozen=True)
class SetInitialData:
    """Replace the entire state."""
    state: AppState


Command = Union[
    AddClient,
    AddProject,
    AddPayment,
    MarkProjectPaid,
    UpdateProjectStatus,
    SetInitialData,
]
