"""
Base DTOs for the application layer.
Provides the common pydantic configuration for data transfer objects.
"""

from typing import Any, Dict

from pydantic import BaseModel, ConfigDict


class BaseDTO(BaseModel):
    """Base DTO with common configuration."""

    model_config = ConfigDict(
        # Allow population by field name or alias
        populate_by_name=True,
        # Convert enum values to their values
        use_enum_values=True,
        # Validate assignment
        validate_assignment=True,
        # Reject unknown fields
        extra="forbid",
    )


def to_dict(dto: BaseDTO, by_alias: bool = True) -> Dict[str, Any]:
    """Convert a DTO to a JSON-compatible dictionary."""
    return dto.model_dump(mode="json", by_alias=by_alias)
