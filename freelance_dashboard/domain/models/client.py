"""
Client domain model.
Represents a client/customer that hires the freelancer.
"""

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class Client:
    """
    Client entity.
    Identity is the id; a client is never updated or deleted once added.
    """

    id: str
    name: str
    country: str
    email: Optional[str] = None

    @property
    def has_email(self) -> bool:
        """Check if an email address was provided."""
        return self.email is not None

    def to_dict(self) -> dict:
        """Convert to dictionary representation."""
        return {
            "id": self.id,
            "name": self.name,
            "country": self.country,
            "email": self.email,
        }
