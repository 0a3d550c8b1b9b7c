"""
Dashboard composition service.
Derives the stats header and the searched/filtered view the presentation
layer renders from a state snapshot.
"""

from dataclasses import dataclass
from datetime import datetime
from typing import Optional, Sequence

from freelance_dashboard.domain.models.app_state import AppState
from freelance_dashboard.domain.models.client import Client
from freelance_dashboard.domain.models.payment import Payment
from freelance_dashboard.domain.models.project import Project
from freelance_dashboard.domain.services.query_service import (
    ProjectFilter,
    count_payment_states,
    filter_projects,
    search_by_name
)


@dataclass(frozen=True)
class DashboardStats:
    """Summary counts shown at the top of the dashboard."""

    total_clients: int
    total_projects: int
    paid: int
    unpaid: int

    def to_dict(self) -> dict:
        """Convert to dictionary."""
        return {
            "total_clients": self.total_clients,
            "total_projects": self.total_projects,
            "paid": self.paid,
            "unpaid": self.unpaid,
        }


@dataclass(frozen=True)
class DashboardView:
    """Clients and projects selected for display, with the overall stats."""

    clients: Sequence[Client]
    projects: Sequence[Project]
    stats: DashboardStats


def compute_dashboard_stats(state: AppState) -> DashboardStats:
    """Compute client, project and payment-state totals."""
    counts = count_payment_states(state.projects)
    return DashboardStats(
        total_clients=len(state.clients),
        total_projects=len(state.projects),
        paid=counts.paid,
        unpaid=counts.unpaid,
    )


def build_dashboard_view(
    state: AppState,
    search_term: str = "",
    project_filter: Optional[ProjectFilter] = None
) -> DashboardView:
    """
    Build the view for a search term and project filter.
    Stats always describe the whole state, not the filtered view.
    """
    clients = search_by_name(state.clients, search_term)
    projects = filter_projects(search_by_name(state.projects, search_term), project_filter)

    return DashboardView(
        clients=clients,
        projects=projects,
        stats=compute_dashboard_stats(state),
    )


def build_full_payment(project: Project, paid_at: Optional[datetime] = None) -> Payment:
    """Build a payment settling the project's whole budget."""
    return Payment.create(project.id, project.budget, paid_at)
