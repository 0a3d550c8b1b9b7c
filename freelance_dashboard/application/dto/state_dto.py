"""
State DTOs for the application layer.
Validate seed data and snapshots in the dashboard's JSON shape and convert
them to and from domain entities.
"""

from typing import List, Optional

from pydantic import Field, field_validator

from .base_dto import BaseDTO
from freelance_dashboard.domain.models import (
    AppState,
    Client,
    Payment,
    PaymentState,
    Project,
    ProjectStatus,
    parse_iso_datetime
)


class ClientDTO(BaseDTO):
    """DTO for a client."""

    id: str = Field(min_length=1, description="Client ID")
    name: str = Field(min_length=1, max_length=255, description="Client name")
    country: str = Field(description="Country")
    email: Optional[str] = Field(default=None, description="Contact email")

    @field_validator('email')
    @classmethod
    def validate_email(cls, v):
        if v is not None and ('@' not in v or '.' not in v.split('@')[-1]):
            raise ValueError(f"Invalid email format: {v}")
        return v

    def to_domain(self) -> Client:
        """Convert to a domain entity."""
        return Client(id=self.id, name=self.name, country=self.country, email=self.email)

    @classmethod
    def from_domain(cls, client: Client) -> "ClientDTO":
        """Create from a domain entity without validating it."""
        return cls.model_construct(
            id=client.id,
            name=client.name,
            country=client.country,
            email=client.email
        )


class ProjectDTO(BaseDTO):
    """DTO for a project."""

    id: str = Field(min_length=1, description="Project ID")
    client_id: str = Field(alias="clientId", description="Referenced client ID")
    title: str = Field(min_length=1, max_length=255, description="Project title")
    budget: float = Field(gt=0, description="Budget amount")
    status: ProjectStatus = Field(default=ProjectStatus.PENDING, description="Work status")
    payment_status: PaymentState = Field(
        default=PaymentState.UNPAID,
        alias="paymentStatus",
        description="Payment state"
    )

    def to_domain(self) -> Project:
        """Convert to a domain entity."""
        return Project(
            id=self.id,
            client_id=self.client_id,
            title=self.title,
            budget=self.budget,
            status=self.status,
            payment_status=self.payment_status
        )

    @classmethod
    def from_domain(cls, project: Project) -> "ProjectDTO":
        """Create from a domain entity without validating it."""
        return cls.model_construct(
            id=project.id,
            clientId=project.client_id,
            title=project.title,
            budget=project.budget,
            status=project.status,
            paymentStatus=project.payment_status
        )


class PaymentDTO(BaseDTO):
    """DTO for a payment record."""

    project_id: str = Field(min_length=1, alias="projectId", description="Project ID")
    amount: float = Field(gt=0, description="Amount paid")
    date: str = Field(description="ISO-8601 payment date")

    @field_validator('date')
    @classmethod
    def validate_date(cls, v):
        try:
            parse_iso_datetime(v)
        except ValueError:
            raise ValueError(f"Invalid ISO date: {v}")
        return v

    def to_domain(self) -> Payment:
        """Convert to a domain entity."""
        return Payment(project_id=self.project_id, amount=self.amount, date=self.date)

    @classmethod
    def from_domain(cls, payment: Payment) -> "PaymentDTO":
        """Create from a domain entity without validating it."""
        return cls.model_construct(
            projectId=payment.project_id,
            amount=payment.amount,
            date=payment.date
        )


class AppStateDTO(BaseDTO):
    """DTO for a complete state snapshot."""

    clients: List[ClientDTO] = Field(default_factory=list, description="Clients")
    projects: List[ProjectDTO] = Field(default_factory=list, description="Projects")
    payments: List[PaymentDTO] = Field(default_factory=list, description="Payments")

    def to_domain(self) -> AppState:
        """Convert to the domain aggregate, preserving order."""
        return AppState.create(
            clients=[c.to_domain() for c in self.clients],
            projects=[p.to_domain() for p in self.projects],
            payments=[p.to_domain() for p in self.payments]
        )

    @classmethod
    def from_domain(cls, state: AppState) -> "AppStateDTO":
        """
        Create from the domain aggregate.
        Export is not validated: any state the store can hold is accepted,
        including payments recorded without validation.
        """
        return cls.model_construct(
            clients=[ClientDTO.from_domain(c) for c in state.clients],
            projects=[ProjectDTO.from_domain(p) for p in state.projects],
            payments=[PaymentDTO.from_domain(p) for p in state.payments]
        )
