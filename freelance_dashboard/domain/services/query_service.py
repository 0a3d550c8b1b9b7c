"""
Query functions over dashboard entities.
All functions are pure: they never mutate their arguments and never raise
for missing or dangling references.
"""

import math
from dataclasses import dataclass
from numbers import Real
from typing import Any, List, Mapping, NamedTuple, Optional, Sequence, TypeVar, Union

from freelance_dashboard.domain.models.base import first_present, parse_iso_datetime
from freelance_dashboard.domain.models.client import Client
from freelance_dashboard.domain.models.project import PaymentState, Project, ProjectStatus


T = TypeVar('T')


@dataclass(frozen=True)
class ProjectFilter:
    """Optional constraints on project status and payment state. None means no constraint."""

    status: Optional[ProjectStatus] = None
    payment_state: Optional[PaymentState] = None

    @property
    def is_empty(self) -> bool:
        """Check if the filter imposes no constraint."""
        return self.status is None and self.payment_state is None


class PaymentCounts(NamedTuple):
    """Number of paid and unpaid projects."""

    paid: int
    unpaid: int

    @property
    def total(self) -> int:
        return self.paid + self.unpaid


def _get_field(item: Any, key: str) -> Any:
    if isinstance(item, Mapping):
        return item.get(key)
    return getattr(item, key, None)


def search_by_name(items: Sequence[T], term: str) -> Union[Sequence[T], List[T]]:
    """
    Search clients or projects by name.

    Matching is a case-insensitive substring test against the item's name,
    falling back to its title when the name is absent. An empty or blank
    term returns the input unchanged.
    """
    query = (term or "").strip().lower()
    if not query:
        return items

    results = []
    for item in items:
        searchable = first_present(_get_field(item, "name"), _get_field(item, "title"), "")
        if query in str(searchable).lower():
            results.append(item)
    return results


def filter_projects(
    projects: Sequence[Project],
    project_filter: Optional[ProjectFilter] = None
) -> Union[Sequence[Project], List[Project]]:
    """
    Filter projects by status and/or payment state.
    Present filter fields must all match exactly; with no constraint the
    input is returned unchanged.
    """
    if project_filter is None or project_filter.is_empty:
        return projects

    return [
        project for project in projects
        if (project_filter.status is None or project.status == project_filter.status)
        and (
            project_filter.payment_state is None
            or project.payment_status == project_filter.payment_state
        )
    ]


def count_payment_states(projects: Sequence[Project]) -> PaymentCounts:
    """Count paid vs unpaid projects. Every project lands in exactly one bucket."""
    paid = sum(1 for project in projects if project.payment_status == PaymentState.PAID)
    return PaymentCounts(paid=paid, unpaid=len(projects) - paid)


def find_client_by_id(clients: Sequence[Client], client_id: Optional[str] = None) -> Optional[Client]:
    """Find a client by id. Returns None for an absent id or when no client matches."""
    if not client_id:
        return None

    return next((client for client in clients if client.id == client_id), None)


def is_valid_payment(payment: Any) -> bool:
    """
    Validate a payment record before it is allowed into the state.

    A payment is valid when its project_id is a non-blank string, its amount
    is a finite real number greater than zero and its date is a non-blank
    ISO-8601 date or date-time. Never raises.
    """
    if payment is None:
        return False

    project_id = getattr(payment, "project_id", None)
    if not isinstance(project_id, str) or not project_id.strip():
        return False

    amount = getattr(payment, "amount", None)
    if isinstance(amount, bool) or not isinstance(amount, Real):
        return False
    try:
        if not math.isfinite(amount) or amount <= 0:
            return False
    except (OverflowError, TypeError, ValueError):
        # ints beyond float range
        return False

    date = getattr(payment, "date", None)
    if not isinstance(date, str) or not date.strip():
        return False

    try:
        parse_iso_datetime(date)
    except ValueError:
        return False

    return True
