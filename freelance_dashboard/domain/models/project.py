"""
Project domain model.
Represents a piece of work for a client with a budget and two independent states:
the work status and the payment state.
"""

from dataclasses import dataclass, replace
from enum import Enum

from freelance_dashboard.domain.models.base import ValidationError


class ProjectStatus(str, Enum):
    """Project work status. Any status may move to any other."""
    PENDING = "pending"
    IN_PROGRESS = "in-progress"
    COMPLETED = "completed"


class PaymentState(str, Enum):
    """Project payment state. The only transition is unpaid -> paid."""
    PAID = "paid"
    UNPAID = "unpaid"


@dataclass(frozen=True)
class Project:
    """
    Project entity.
    client_id is a non-owning reference and may point to no existing client.
    """

    id: str
    client_id: str
    title: str
    budget: float
    status: ProjectStatus = ProjectStatus.PENDING
    payment_status: PaymentState = PaymentState.UNPAID

    def __post_init__(self):
        """Coerce plain strings to the status enums."""
        try:
            object.__setattr__(self, "status", ProjectStatus(self.status))
        except ValueError:
            raise ValidationError(f"Invalid project status: {self.status}", "status")
        try:
            object.__setattr__(self, "payment_status", PaymentState(self.payment_status))
        except ValueError:
            raise ValidationError(
                f"Invalid payment status: {self.payment_status}", "payment_status"
            )

    @property
    def is_paid(self) -> bool:
        """Check if the project has been marked paid."""
        return self.payment_status == PaymentState.PAID

    def with_status(self, status: ProjectStatus) -> "Project":
        """Return a copy of this project with a new work status."""
        return replace(self, status=status)

    def mark_paid(self) -> "Project":
        """Return a copy of this project in the paid state."""
        return replace(self, payment_status=PaymentState.PAID)

    def to_dict(self) -> dict:
        """Convert to dictionary representation."""
        return {
            "id": self.id,
            "client_id": self.client_id,
            "title": self.title,
            "budget": self.budget,
            "status": self.status.value,
            "payment_status": self.payment_status.value,
        }
