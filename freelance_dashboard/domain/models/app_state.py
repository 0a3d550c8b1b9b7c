"""
Application state aggregate.
Holds the ordered clients, projects and payments of the dashboard.
"""

from dataclasses import dataclass, field
from typing import Iterable, Optional, Tuple

from freelance_dashboard.domain.models.client import Client
from freelance_dashboard.domain.models.payment import Payment
from freelance_dashboard.domain.models.project import Project


@dataclass(frozen=True)
class AppState:
    """
    Aggregate root for the dashboard.
    Sequences are append-only; projects may only be replaced in place by id.
    """

    clients: Tuple[Client, ...] = field(default_factory=tuple)
    projects: Tuple[Project, ...] = field(default_factory=tuple)
    payments: Tuple[Payment, ...] = field(default_factory=tuple)

    def __post_init__(self):
        """Normalise any iterable passed in to a tuple."""
        object.__setattr__(self, "clients", tuple(self.clients))
        object.__setattr__(self, "projects", tuple(self.projects))
        object.__setattr__(self, "payments", tuple(self.payments))

    @classmethod
    def empty(cls) -> "AppState":
        """Create a state with no entities."""
        return cls()

    @classmethod
    def create(
        cls,
        clients: Optional[Iterable[Client]] = None,
        projects: Optional[Iterable[Project]] = None,
        payments: Optional[Iterable[Payment]] = None
    ) -> "AppState":
        """Create a state from optional iterables."""
        return cls(
            clients=tuple(clients or ()),
            projects=tuple(projects or ()),
            payments=tuple(payments or ()),
        )

    def payments_for(self, project_id: str) -> Tuple[Payment, ...]:
        """Get the payment records whose project_id matches."""
        return tuple(p for p in self.payments if p.project_id == project_id)

    def to_dict(self) -> dict:
        """Convert to dictionary representation."""
        return {
            "clients": [c.to_dict() for c in self.clients],
            "projects": [p.to_dict() for p in self.projects],
            "payments": [p.to_dict() for p in self.payments],
        }
