"""
Seed data for the dashboard.
Provides the built-in sample state and loads or dumps states as JSON.
"""

import logging
from pathlib import Path
from typing import Union

from freelance_dashboard.application.dto import AppStateDTO
from freelance_dashboard.domain.models import (
    AppState,
    Client,
    Payment,
    PaymentState,
    Project,
    ProjectStatus
)


logger = logging.getLogger(__name__)


SEED_CLIENTS = (
    Client(id="c1", name="Tech Solutions Inc", country="USA", email="contact@techsolutions.com"),
    Client(id="c2", name="Global Designs", country="UK"),  # no email
)

SEED_PROJECTS = (
    Project(
        id="p1",
        client_id="c1",
        title="Website Redesign",
        budget=5000,
        status=ProjectStatus.IN_PROGRESS,
        payment_status=PaymentState.UNPAID
    ),
    Project(
        id="p2",
        client_id="c2",
        title="Mobile App Development",
        budget=12000,
        status=ProjectStatus.COMPLETED,
        payment_status=PaymentState.PAID
    ),
)

SEED_PAYMENTS = (
    Payment(project_id="p2", amount=12000, date="2024-10-15T10:30:00.000Z"),
)


def default_seed_state() -> AppState:
    """Get the built-in sample state."""
    return AppState(clients=SEED_CLIENTS, projects=SEED_PROJECTS, payments=SEED_PAYMENTS)


def load_seed_file(path: Union[str, Path]) -> AppState:
    """
    Load a state from a JSON file.

    The file holds an object with 'clients', 'projects' and 'payments' lists,
    using either camelCase ('clientId') or snake_case ('client_id') keys.

    Raises:
        OSError: If the file cannot be read.
        pydantic.ValidationError: If the content is not a valid state.
    """
    path = Path(path)
    state = AppStateDTO.model_validate_json(path.read_text(encoding="utf-8")).to_domain()
    logger.info(
        f"Loaded seed from {path}: {len(state.clients)} clients, "
        f"{len(state.projects)} projects, {len(state.payments)} payments"
    )
    return state


def dump_state(state: AppState, indent: int = 2) -> str:
    """Serialize a state to JSON in the camelCase shape load_seed_file accepts."""
    return AppStateDTO.from_domain(state).model_dump_json(by_alias=True, indent=indent)
