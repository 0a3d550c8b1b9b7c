"""
Domain services for the freelance dashboard.
This module exports the query, formatting and dashboard composition functions.
"""

from .query_service import (
    ProjectFilter,
    PaymentCounts,
    search_by_name,
    filter_projects,
    count_payment_states,
    find_client_by_id,
    is_valid_payment
)
from .formatting import (
    format_currency,
    format_date,
    get_project_status_color,
    get_payment_status_color,
    display_email
)
from .dashboard_service import (
    DashboardStats,
    DashboardView,
    compute_dashboard_stats,
    build_dashboard_view,
    build_full_payment
)

__all__ = [
    "ProjectFilter",
    "PaymentCounts",
    "search_by_name",
    "filter_projects",
    "count_payment_states",
    "find_client_by_id",
    "is_valid_payment",
    "format_currency",
    "format_date",
    "get_project_status_color",
    "get_payment_status_color",
    "display_email",
    "DashboardStats",
    "DashboardView",
    "compute_dashboard_stats",
    "build_dashboard_view",
    "build_full_payment",
]
