"""
Unit tests for the dashboard query functions.
"""

import math

import pytest

from freelance_dashboard.domain.models import (
    Client,
    Payment,
    PaymentState,
    Project,
    ProjectStatus
)
from freelance_dashboard.domain.services.query_service import (
    PaymentCounts,
    ProjectFilter,
    count_payment_states,
    filter_projects,
    find_client_by_id,
    is_valid_payment,
    search_by_name
)


CLIENTS = (
    Client(id="c1", name="Tech Solutions Inc", country="USA", email="contact@techsolutions.com"),
    Client(id="c2", name="Global Designs", country="UK"),
    Client(id="c3", name="Kigali Crafts", country="Rwanda"),
)

PROJECTS = (
    Project(id="p1", client_id="c1", title="Website Redesign", budget=5000,
            status=ProjectStatus.IN_PROGRESS, payment_status=PaymentState.UNPAID),
    Project(id="p2", client_id="c2", title="Mobile App Development", budget=12000,
            status=ProjectStatus.COMPLETED, payment_status=PaymentState.PAID),
    Project(id="p3", client_id="c9", title="Shopify Store", budget=800,
            status=ProjectStatus.PENDING, payment_status=PaymentState.UNPAID),
    Project(id="p4", client_id="c3", title="Brand Website", budget=1500,
            status=ProjectStatus.COMPLETED, payment_status=PaymentState.UNPAID),
)


class TestSearchByName:
    """Test cases for search_by_name."""

    def test_empty_term_returns_input_unchanged(self):
        """Test the identity law for empty and blank terms."""
        assert search_by_name(CLIENTS, "") is CLIENTS
        assert search_by_name(PROJECTS, "   ") is PROJECTS
        assert search_by_name([], "") == []

    def test_matches_client_names_case_insensitively(self):
        """Test case-insensitive substring matching on name."""
        result = search_by_name(CLIENTS, "  GLOBAL ")

        assert result == [CLIENTS[1]]

    def test_matches_project_titles(self):
        """Test fallback to title for items without a name."""
        result = search_by_name(PROJECTS, "website")

        assert result == [PROJECTS[0], PROJECTS[3]]

    def test_results_are_exactly_the_matching_items(self):
        """Test that every match contains the term and no excluded item does."""
        term = "s"
        result = search_by_name(CLIENTS, term)

        assert all(term in c.name.lower() for c in result)
        assert all(term not in c.name.lower() for c in CLIENTS if c not in result)

    def test_order_preserved(self):
        """Test that results keep input order."""
        result = search_by_name(CLIENTS, "i")

        assert result == [c for c in CLIENTS if "i" in c.name.lower()]

    def test_no_match(self):
        """Test searching for a term that matches nothing."""
        assert search_by_name(CLIENTS, "zzz") == []

    def test_input_not_mutated(self):
        """Test that the input list is left unchanged."""
        items = list(CLIENTS)

        search_by_name(items, "tech")

        assert items == list(CLIENTS)

    def test_mapping_items(self):
        """Test searching plain dictionaries."""
        items = [{"name": "Alpha"}, {"title": "Alpine Trip"}, {"title": "Beta"}]

        assert search_by_name(items, "alp") == [items[0], items[1]]

    def test_name_takes_precedence_over_title(self):
        """Test that title is used only when name is absent."""
        items = [{"name": "", "title": "Match me"}, {"name": None, "title": "Match me"}]

        assert search_by_name(items, "match") == [items[1]]

    def test_items_without_name_or_title(self):
        """Test that items with neither field never match."""
        assert search_by_name([{"id": "x"}], "x") == []


class TestFilterProjects:
    """Test cases for filter_projects."""

    def test_empty_filter_returns_input_unchanged(self):
        """Test that no constraint returns all projects."""
        assert filter_projects(PROJECTS, ProjectFilter()) is PROJECTS
        assert filter_projects(PROJECTS) is PROJECTS

    def test_filter_by_status(self):
        """Test that every result has the requested status."""
        result = filter_projects(PROJECTS, ProjectFilter(status=ProjectStatus.COMPLETED))

        assert result == [PROJECTS[1], PROJECTS[3]]
        assert all(p.status == ProjectStatus.COMPLETED for p in result)

    def test_filter_by_payment_state(self):
        """Test filtering by payment state."""
        result = filter_projects(PROJECTS, ProjectFilter(payment_state=PaymentState.PAID))

        assert result == [PROJECTS[1]]

    def test_filter_by_both(self):
        """Test that present fields are combined with AND."""
        result = filter_projects(
            PROJECTS,
            ProjectFilter(status=ProjectStatus.COMPLETED, payment_state=PaymentState.UNPAID)
        )

        assert result == [PROJECTS[3]]

    def test_filter_with_string_values(self):
        """Test that plain string values match enum fields."""
        result = filter_projects(PROJECTS, ProjectFilter(status="pending"))

        assert result == [PROJECTS[2]]

    def test_filter_no_match(self):
        """Test a filter nothing satisfies."""
        result = filter_projects(
            PROJECTS,
            ProjectFilter(status=ProjectStatus.PENDING, payment_state=PaymentState.PAID)
        )

        assert result == []

    @pytest.mark.parametrize("status", list(ProjectStatus))
    def test_status_filter_holds_for_every_status(self, status):
        """Test the status filter property for every status."""
        result = filter_projects(PROJECTS, ProjectFilter(status=status))

        assert all(p.status == status for p in result)
        assert len(result) == sum(1 for p in PROJECTS if p.status == status)


class TestCountPaymentStates:
    """Test cases for count_payment_states."""

    def test_counts(self):
        """Test counting paid and unpaid projects."""
        counts = count_payment_states(PROJECTS)

        assert counts == PaymentCounts(paid=1, unpaid=3)
        assert counts.paid + counts.unpaid == len(PROJECTS)
        assert counts.total == len(PROJECTS)

    def test_empty(self):
        """Test counting an empty sequence."""
        assert count_payment_states([]) == PaymentCounts(paid=0, unpaid=0)

    def test_all_paid(self):
        """Test a sequence of paid projects."""
        paid = [p.mark_paid() for p in PROJECTS]

        assert count_payment_states(paid) == PaymentCounts(paid=4, unpaid=0)


class TestFindClientById:
    """Test cases for find_client_by_id."""

    def test_found(self):
        """Test finding an existing client."""
        assert find_client_by_id(CLIENTS, "c2") == CLIENTS[1]

    def test_empty_clients(self):
        """Test lookup in an empty sequence."""
        assert find_client_by_id([], "c1") is None

    def test_absent_id(self):
        """Test lookup without an id."""
        assert find_client_by_id(CLIENTS) is None
        assert find_client_by_id(CLIENTS, None) is None
        assert find_client_by_id(CLIENTS, "") is None

    def test_dangling_reference(self):
        """Test that a project's dangling client reference resolves to None."""
        assert find_client_by_id(CLIENTS, PROJECTS[2].client_id) is None

    def test_first_match_wins(self):
        """Test that duplicates resolve to the first client."""
        first = Client(id="dup", name="First", country="X")
        second = Client(id="dup", name="Second", country="Y")

        assert find_client_by_id([first, second], "dup") is first


class TestIsValidPayment:
    """Test cases for is_valid_payment."""

    def test_valid_zulu_timestamp(self):
        """Test a well-formed payment."""
        payment = Payment(project_id="p1", amount=100, date="2024-01-01T00:00:00.000Z")

        assert is_valid_payment(payment) is True

    def test_valid_date_only(self):
        """Test that a calendar date is accepted."""
        assert is_valid_payment(Payment(project_id="p1", amount=0.01, date="2024-01-01")) is True

    def test_zero_amount(self):
        """Test that a zero amount is rejected."""
        assert is_valid_payment(Payment(project_id="p1", amount=0, date="2024-01-01")) is False

    def test_invalid_date(self):
        """Test that an unparsable date is rejected."""
        assert is_valid_payment(Payment(project_id="p1", amount=100, date="not-a-date")) is False

    @pytest.mark.parametrize("amount", [-1, -0.01, math.nan, math.inf, -math.inf, "100", None, True])
    def test_bad_amounts(self, amount):
        """Test amounts that are not finite positive numbers."""
        assert is_valid_payment(Payment(project_id="p1", amount=amount, date="2024-01-01")) is False

    @pytest.mark.parametrize("amount", [10 ** 400, -(10 ** 400)])
    def test_amount_beyond_float_range(self, amount):
        """Test that ints too large for a float are rejected without raising."""
        assert is_valid_payment(Payment(project_id="p1", amount=amount, date="2024-01-01")) is False

    @pytest.mark.parametrize("project_id", ["", "   ", None, 1])
    def test_bad_project_ids(self, project_id):
        """Test project ids that are not non-empty strings."""
        assert is_valid_payment(Payment(project_id=project_id, amount=10, date="2024-01-01")) is False

    @pytest.mark.parametrize("date", ["", "  ", None, 20240101, "2024-02-30"])
    def test_bad_dates(self, date):
        """Test dates that are missing or not calendar dates."""
        assert is_valid_payment(Payment(project_id="p1", amount=10, date=date)) is False

    def test_not_a_payment(self):
        """Test that arbitrary objects are rejected without raising."""
        assert is_valid_payment(None) is False
        assert is_valid_payment(object()) is False
        assert is_valid_payment("p1") is False
