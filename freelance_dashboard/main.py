"""
Application entry point.
Configures logging and builds the state store the presentation layer drives.
"""

import logging
from typing import Optional

from freelance_dashboard.application.state import AppStateStore
from freelance_dashboard.config import Settings, get_settings
from freelance_dashboard.data.seed import default_seed_state, load_seed_file
from freelance_dashboard.domain.events import EventDispatcher
from freelance_dashboard.domain.services import compute_dashboard_stats, format_currency


logger = logging.getLogger(__name__)


def configure_logging(settings: Settings) -> None:
    """Configure root logging from settings."""
    logging.basicConfig(
        level=logging.DEBUG if settings.debug else getattr(logging, settings.log_level, logging.INFO),
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )


def create_store(settings: Optional[Settings] = None) -> AppStateStore:
    """
    Create the application's state store.
    Starts from the configured seed file, or the built-in sample state.
    """
    settings = settings or get_settings()

    if settings.seed_file:
        initial_state = load_seed_file(settings.seed_file)
    else:
        initial_state = default_seed_state()

    return AppStateStore(
        initial_state,
        dispatcher=EventDispatcher(),
        require_matching_project=settings.enforce_payment_project_match
    )


def main() -> None:
    """Build the store and log a summary of its state."""
    settings = get_settings()
    configure_logging(settings)

    logger.info(f"Starting {settings.app_title}")
    logger.info(f"Environment: {settings.environment}")

    store = create_store(settings)
    stats = compute_dashboard_stats(store.state)
    outstanding = sum(p.budget for p in store.state.projects if not p.is_paid)

    logger.info(
        f"{stats.total_clients} clients, {stats.total_projects} projects "
        f"({stats.paid} paid / {stats.unpaid} unpaid), "
        f"{format_currency(outstanding, settings.default_currency)} outstanding"
    )


if __name__ == "__main__":
    main()
