"""
Payment domain model.
A payment record has no identity of its own; a project may accumulate many.
"""

from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Any, Optional

from freelance_dashboard.domain.models.base import to_iso_timestamp


@dataclass(frozen=True)
class Payment:
    """
    Payment record.
    Construction performs no validation: records added directly are accepted
    as given, and the store re-validates before marking a project paid.
    """

    project_id: Any
    amount: Any
    date: Any

    @classmethod
    def create(
        cls,
        project_id: str,
        amount: float,
        paid_at: Optional[datetime] = None
    ) -> "Payment":
        """Create a payment stamped with paid_at, or the current UTC time."""
        moment = paid_at or datetime.now(timezone.utc)
        return cls(project_id=project_id, amount=amount, date=to_iso_timestamp(moment))

    def to_dict(self) -> dict:
        """Convert to dictionary representation."""
        return {
            "project_id": self.project_id,
            "amount": self.amount,
            "date": self.date,
        }
