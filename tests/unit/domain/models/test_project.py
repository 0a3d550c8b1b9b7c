"""
Unit tests for Project domain model.
"""

import dataclasses

import pytest

from freelance_dashboard.domain.models.base import ValidationError
from freelance_dashboard.domain.models.project import PaymentState, Project, ProjectStatus


class TestProject:
    """Test cases for Project domain model."""

    def setup_method(self):
        """Set up test fixtures."""
        self.project = Project(
            id="p1",
            client_id="c1",
            title="Website Redesign",
            budget=5000,
            status=ProjectStatus.IN_PROGRESS,
            payment_status=PaymentState.UNPAID
        )

    def test_defaults(self):
        """Test default status and payment state."""
        project = Project(id="p9", client_id="c1", title="Logo", budget=300)

        assert project.status == ProjectStatus.PENDING
        assert project.payment_status == PaymentState.UNPAID
        assert project.is_paid is False

    def test_string_states_are_coerced(self):
        """Test that plain strings become enum members."""
        project = Project(
            id="p9", client_id="c1", title="Logo", budget=300,
            status="completed", payment_status="paid"
        )

        assert project.status is ProjectStatus.COMPLETED
        assert project.payment_status is PaymentState.PAID

    def test_invalid_status_raises(self):
        """Test that an unknown status is rejected."""
        with pytest.raises(ValidationError, match="Invalid project status"):
            Project(id="p9", client_id="c1", title="Logo", budget=300, status="archived")

        with pytest.raises(ValidationError, match="Invalid payment status"):
            Project(id="p9", client_id="c1", title="Logo", budget=300, payment_status="partial")

    def test_mark_paid_returns_new_project(self):
        """Test that mark_paid leaves the original untouched."""
        paid = self.project.mark_paid()

        assert paid.payment_status == PaymentState.PAID
        assert paid.is_paid is True
        assert self.project.payment_status == PaymentState.UNPAID
        assert paid.id == self.project.id
        assert paid.status == self.project.status

    def test_with_status(self):
        """Test that any status may move to any other."""
        completed = self.project.with_status(ProjectStatus.COMPLETED)
        back_to_pending = completed.with_status("pending")

        assert completed.status == ProjectStatus.COMPLETED
        assert back_to_pending.status == ProjectStatus.PENDING
        assert self.project.status == ProjectStatus.IN_PROGRESS

    def test_project_is_immutable(self):
        """Test that fields cannot be assigned."""
        with pytest.raises(dataclasses.FrozenInstanceError):
            self.project.payment_status = PaymentState.PAID

    def test_to_dict(self):
        """Test dictionary representation uses enum values."""
        data = self.project.to_dict()

        assert data["status"] == "in-progress"
        assert data["payment_status"] == "unpaid"
        assert data["client_id"] == "c1"


class TestProjectEnums:
    """Test cases for Project-related enums."""

    def test_project_status_values(self):
        """Test ProjectStatus enum values."""
        assert ProjectStatus.PENDING.value == "pending"
        assert ProjectStatus.IN_PROGRESS.value == "in-progress"
        assert ProjectStatus.COMPLETED.value == "completed"

    def test_payment_state_values(self):
        """Test PaymentState enum values."""
        assert PaymentState.PAID.value == "paid"
        assert PaymentState.UNPAID.value == "unpaid"

    def test_enums_compare_with_strings(self):
        """Test that enum members equal their string values."""
        assert ProjectStatus.IN_PROGRESS == "in-progress"
        assert PaymentState.PAID == "paid"
