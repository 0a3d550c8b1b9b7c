"""
State transition function for the dashboard store.
Maps (current state, command) to the next state without mutating the input.
"""

import logging
from dataclasses import dataclass, field, replace
from typing import Optional, Tuple

from freelance_dashboard.application.state.commands import (
    AddClient,
    AddPayment,
    AddProject,
    Command,
    MarkProjectPaid,
    SetInitialData,
    UpdateProjectStatus
)
from freelance_dashboard.domain.events import (
    ClientAdded,
    DomainEvent,
    PaymentRecorded,
    PaymentRejected,
    ProjectAdded,
    ProjectMarkedPaid,
    ProjectStatusChanged,
    StateReplaced
)
from freelance_dashboard.domain.models import AppState, Payment
from freelance_dashboard.domain.services.query_service import is_valid_payment


logger = logging.getLogger(__name__)

INVALID_PAYMENT = "INVALID_PAYMENT"
PAYMENT_PROJECT_MISMATCH = "PAYMENT_PROJECT_MISMATCH"
PROJECT_NOT_FOUND = "PROJECT_NOT_FOUND"


@dataclass
class TransitionResult:
    """Result of applying a command: the next state plus any reported failure."""

    state: AppState
    success: bool = True
    error: Optional[str] = None
    error_code: Optional[str] = None
    events: Tuple[DomainEvent, ...] = field(default_factory=tuple)

    @classmethod
    def success_result(cls, state: AppState, *events: DomainEvent) -> "TransitionResult":
        """Create a successful result."""
        return cls(state=state, success=True, events=tuple(events))

    @classmethod
    def error_result(
        cls,
        state: AppState,
        error: str,
        *events: DomainEvent,
        error_code: Optional[str] = None
    ) -> "TransitionResult":
        """Create a rejected result. The state is the unchanged input state."""
        return cls(
            state=state,
            success=False,
            error=error,
            error_code=error_code,
            events=tuple(events)
        )


def _add_client(state: AppState, command: AddClient) -> TransitionResult:
    client = command.client
    return TransitionResult.success_result(
        replace(state, clients=state.clients + (client,)),
        ClientAdded(client_id=client.id, name=client.name)
    )


def _add_project(state: AppState, command: AddProject) -> TransitionResult:
    project = command.project
    return TransitionResult.success_result(
        replace(state, projects=state.projects + (project,)),
        ProjectAdded(
            project_id=project.id,
            client_id=project.client_id,
            title=project.title,
            budget=project.budget
        )
    )


def _add_payment(state: AppState, command: AddPayment) -> TransitionResult:
    # Recorded as given; the project's payment state is left alone.
    payment = command.payment
    return TransitionResult.success_result(
        replace(state, payments=state.payments + (payment,)),
        PaymentRecorded(project_id=payment.project_id, amount=payment.amount, date=payment.date)
    )


def _reject_payment(
    state: AppState,
    command: MarkProjectPaid,
    reason: str,
    error_code: str
) -> TransitionResult:
    payment = command.payment
    logger.warning(f"{reason} for project {command.project_id}: {payment!r}")
    return TransitionResult.error_result(
        state,
        reason,
        PaymentRejected(
            project_id=command.project_id,
            reason=reason,
            error_code=error_code,
            payment=payment.to_dict() if isinstance(payment, Payment) else None
        ),
        error_code=error_code
    )


def _mark_project_paid(
    state: AppState,
    command: MarkProjectPaid,
    require_matching_project: bool
) -> TransitionResult:
    payment = command.payment

    if not is_valid_payment(payment):
        return _reject_payment(state, command, "Invalid payment record", INVALID_PAYMENT)

    if require_matching_project and payment.project_id != command.project_id:
        return _reject_payment(
            state,
            command,
            f"Payment belongs to project {payment.project_id}",
            PAYMENT_PROJECT_MISMATCH
        )

    matched = False
    projects = []
    for project in state.projects:
        if project.id == command.project_id:
            project = project.mark_paid()
            matched = True
        projects.append(project)

    if not matched:
        logger.info(f"No project {command.project_id} to mark paid; payment recorded anyway")

    next_state = replace(
        state,
        projects=tuple(projects) if matched else state.projects,
        payments=state.payments + (payment,)
    )
    return TransitionResult.success_result(
        next_state,
        ProjectMarkedPaid(project_id=command.project_id, amount=payment.amount, matched=matched),
        PaymentRecorded(project_id=payment.project_id, amount=payment.amount, date=payment.date)
    )


def _update_project_status(state: AppState, command: UpdateProjectStatus) -> TransitionResult:
    events = []
    projects = []
    for project in state.projects:
        if project.id == command.project_id:
            events.append(ProjectStatusChanged(
                project_id=project.id,
                old_status=project.status.value,
                new_status=command.status.value
            ))
            project = project.with_status(command.status)
        projects.append(project)

    if not events:
        return TransitionResult.success_result(state)

    return TransitionResult.success_result(replace(state, projects=tuple(projects)), *events)


def _set_initial_data(command: SetInitialData) -> TransitionResult:
    new_state = command.state
    return TransitionResult.success_result(
        new_state,
        StateReplaced(
            clients=len(new_state.clients),
            projects=len(new_state.projects),
            payments=len(new_state.payments)
        )
    )


def transition(
    state: AppState,
    command: Command,
    *,
    require_matching_project: bool = False
) -> TransitionResult:
    """
    Apply a command to a state.

    The input state is never mutated. A rejected mark-paid command returns
    the input state itself with success=False; it is reported, never raised.
    With require_matching_project, a payment whose project_id differs from
    the command's project_id is rejected as well.

    Raises:
        TypeError: If the command is not one of the known command types.
    """
    if isinstance(command, AddClient):
        return _add_client(state, command)
    if isinstance(command, AddProject):
        return _add_project(state, command)
    if isinstance(command, AddPayment):
        return _add_payment(state, command)
    if isinstance(command, MarkProjectPaid):
        return _mark_project_paid(state, command, require_matching_project)
    if isinstance(command, UpdateProjectStatus):
        return _update_project_status(state, command)
    if isinstance(command, SetInitialData):
        return _set_initial_data(command)

    raise TypeError(f"Unknown command type: {type(command).__name__}")


def apply(state: AppState, command: Command) -> AppState:
    """Pure transition function: return the state that follows from applying command."""
    return transition(state, command).state
