"""
Display helpers for the presentation layer.
Formats amounts and dates and maps states to the dashboard's CSS classes.
"""

from typing import Optional

from freelance_dashboard.domain.models.base import first_present, parse_iso_datetime
from freelance_dashboard.domain.models.client import Client
from freelance_dashboard.domain.models.project import PaymentState, ProjectStatus


CURRENCY_SYMBOLS = {
    "USD": "$",
    "EUR": "€",
    "GBP": "£",
    "CAD": "C$",
    "AUD": "A$",
    "JPY": "¥",
}

PROJECT_STATUS_COLORS = {
    ProjectStatus.PENDING: "text-yellow-600",
    ProjectStatus.IN_PROGRESS: "text-blue-600",
    ProjectStatus.COMPLETED: "text-green-600",
}

DEFAULT_STATUS_COLOR = "text-gray-600"

NO_EMAIL_PLACEHOLDER = "No email provided"


def format_currency(amount: float, currency: str = "USD") -> str:
    """Format an amount for display, e.g. 1200 -> '$1,200.00'."""
    sign = "-" if amount < 0 else ""
    digits = 0 if currency == "JPY" else 2
    value = f"{abs(amount):,.{digits}f}"

    symbol = CURRENCY_SYMBOLS.get(currency)
    if symbol is None:
        return f"{sign}{value} {currency}"
    return f"{sign}{symbol}{value}"


def format_date(iso_date: str) -> str:
    """
    Format an ISO date for display, e.g. '2024-10-15T10:30:00.000Z' -> 'Oct 15, 2024'.
    Values that do not parse are returned unchanged.
    """
    try:
        moment = parse_iso_datetime(iso_date)
    except (TypeError, ValueError, AttributeError):
        return str(iso_date)

    return f"{moment.strftime('%b')} {moment.day}, {moment.year}"


def get_project_status_color(status: Optional[ProjectStatus]) -> str:
    """Get the CSS class indicating a project status."""
    try:
        return PROJECT_STATUS_COLORS.get(ProjectStatus(status), DEFAULT_STATUS_COLOR)
    except ValueError:
        return DEFAULT_STATUS_COLOR


def get_payment_status_color(payment_status: Optional[PaymentState]) -> str:
    """Get the CSS class indicating a payment state."""
    return "text-green-600" if payment_status == PaymentState.PAID else "text-red-600"


def display_email(client: Client, placeholder: str = NO_EMAIL_PLACEHOLDER) -> str:
    """Get the client's email, or a placeholder when none was provided."""
    return first_present(client.email, placeholder)
