"""
Domain events raised by state transitions.
Events describe committed changes, plus rejected payments.
"""

from typing import Any, Dict, Optional

from .base import DomainEvent


class ClientAdded(DomainEvent):
    """Event fired when a client is appended to the state."""

    def __init__(self, client_id: str, name: str, **kwargs):
        super().__init__(**kwargs)
        self.client_id = client_id
        self.name = name

    def _get_event_data(self) -> Dict[str, Any]:
        return {
            "client_id": self.client_id,
            "name": self.name
        }


class ProjectAdded(DomainEvent):
    """Event fired when a project is appended to the state."""

    def __init__(self, project_id: str, client_id: str, title: str, budget: float, **kwargs):
        super().__init__(**kwargs)
        self.project_id = project_id
        self.client_id = client_id
        self.title = title
        self.budget = budget

    def _get_event_data(self) -> Dict[str, Any]:
        return {
            "project_id": self.project_id,
            "client_id": self.client_id,
            "title": self.title,
            "budget": self.budget
        }


class PaymentRecorded(DomainEvent):
    """Event fired when a payment record is appended to the state."""

    def __init__(self, project_id: Any, amount: Any, date: Any, **kwargs):
        super().__init__(**kwargs)
        self.project_id = project_id
        self.amount = amount
        self.date = date

    def _get_event_data(self) -> Dict[str, Any]:
        return {
            "project_id": self.project_id,
            "amount": self.amount,
            "date": self.date
        }


class ProjectMarkedPaid(DomainEvent):
    """
    Event fired when a mark-paid command is committed.
    matched is False when no project had the id; the payment is still recorded.
    """

    def __init__(self, project_id: str, amount: float, matched: bool, **kwargs):
        super().__init__(**kwargs)
        self.project_id = project_id
        self.amount = amount
        self.matched = matched

    def _get_event_data(self) -> Dict[str, Any]:
        return {
            "project_id": self.project_id,
            "amount": self.amount,
            "matched": self.matched
        }


class PaymentRejected(DomainEvent):
    """Event fired when a mark-paid command is refused; the state is unchanged."""

    def __init__(
        self,
        project_id: str,
        reason: str,
        error_code: str,
        payment: Optional[Dict[str, Any]] = None,
        **kwargs
    ):
        super().__init__(**kwargs)
        self.project_id = project_id
        self.reason = reason
        self.error_code = error_code
        self.payment = payment

    def _get_event_data(self) -> Dict[str, Any]:
        return {
            "project_id": self.project_id,
            "reason": self.reason,
            "error_code": self.error_code,
            "payment": self.payment
        }


class ProjectStatusChanged(DomainEvent):
    """Event fired when a project's work status is set."""

    def __init__(self, project_id: str, old_status: str, new_status: str, **kwargs):
        super().__init__(**kwargs)
        self.project_id = project_id
        self.old_status = old_status
        self.new_status = new_status

    def _get_event_data(self) -> Dict[str, Any]:
        return {
            "project_id": self.project_id,
            "old_status": self.old_status,
            "new_status": self.new_status
        }


class StateReplaced(DomainEvent):
    """Event fired when the whole state is replaced."""

    def __init__(self, clients: int, projects: int, payments: int, **kwargs):
        super().__init__(**kwargs)
        self.clients = clients
        self.projects = projects
        self.payments = payments

    def _get_event_data(self) -> Dict[str, Any]:
        return {
            "clients": self.clients,
            "projects": self.projects,
            "payments": self.payments
        }
