"""
State store for the dashboard.
Owns the current AppState and commits commands one at a time.
"""

import logging
from datetime import datetime
from typing import Optional

from freelance_dashboard.application.state.commands import Command, MarkProjectPaid
from freelance_dashboard.application.state.transitions import (
    PROJECT_NOT_FOUND,
    TransitionResult,
    transition
)
from freelance_dashboard.domain.events import EventDispatcher
from freelance_dashboard.domain.models import AppState
from freelance_dashboard.domain.services.dashboard_service import build_full_payment


logger = logging.getLogger(__name__)


class AppStateStore:
    """
    Holds the current dashboard state and applies commands in sequence.

    The store is created explicitly and handed to whatever needs it; there is
    no process-wide instance. It is not thread-safe: all dispatches must come
    from a single owner.
    """

    def __init__(
        self,
        initial_state: Optional[AppState] = None,
        *,
        dispatcher: Optional[EventDispatcher] = None,
        require_matching_project: bool = False
    ):
        self._state = initial_state if initial_state is not None else AppState.empty()
        self.dispatcher = dispatcher or EventDispatcher()
        self.require_matching_project = require_matching_project

    @property
    def state(self) -> AppState:
        """Current state snapshot. Immutable; change it through dispatch()."""
        return self._state

    def dispatch(self, command: Command) -> TransitionResult:
        """
        Apply a command, commit the resulting state and publish its events.
        Returns once the new state is committed.
        """
        result = transition(
            self._state,
            command,
            require_matching_project=self.require_matching_project
        )
        self._state = result.state

        if result.success:
            logger.debug(f"Committed {type(command).__name__}")
        else:
            logger.debug(f"Rejected {type(command).__name__}: {result.error_code}")

        for event in result.events:
            self.dispatcher.dispatch(event)

        return result

    def mark_paid_in_full(
        self,
        project_id: str,
        paid_at: Optional[datetime] = None
    ) -> TransitionResult:
        """
        Mark a project paid with a payment for its whole budget.
        An unknown project id is reported as a failed result and changes nothing.
        """
        project = next((p for p in self._state.projects if p.id == project_id), None)
        if project is None:
            logger.warning(f"Project not found: {project_id}")
            return TransitionResult.error_result(
                self._state,
                f"Project {project_id} not found",
                error_code=PROJECT_NOT_FOUND
            )

        payment = build_full_payment(project, paid_at)
        return self.dispatch(MarkProjectPaid(project_id=project_id, payment=payment))
