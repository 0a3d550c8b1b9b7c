"""
Base exceptions and helpers for the domain layer.
Entities in this package are immutable values; changes produce new instances.
"""

from datetime import datetime, timezone
from typing import Any, Optional


class DomainException(Exception):
    """Base exception for domain errors."""

    def __init__(self, message: str, code: Optional[str] = None):
        self.message = message
        self.code = code or self.__class__.__name__
        super().__init__(self.message)


class ValidationError(DomainException):
    """Exception raised when a value cannot be accepted by the domain."""

    def __init__(self, message: str, field: Optional[str] = None):
        super().__init__(message, "VALIDATION_ERROR")
        self.field = field


def first_present(*values: Any) -> Any:
    """
    Return the first value that is not None.
    Empty strings count as present; only None is treated as absent.
    """
    for value in values:
        if value is not None:
            return value
    return None


def parse_iso_datetime(value: str) -> datetime:
    """
    Parse an ISO-8601 date or date-time string.

    Accepts what datetime.fromisoformat accepts on Python 3.11+: extended
    ('2024-01-01') and basic ('20240101') dates, an optional time part with
    fractional seconds, and UTC offsets such as '+00:00', '+0000' or a
    trailing 'Z' as produced by JavaScript's toISOString().
    Raises ValueError if the value is not a valid calendar date/time.
    """
    return datetime.fromisoformat(value.strip().replace("Z", "+00:00"))


def to_iso_timestamp(moment: datetime) -> str:
    """
    Format a datetime as 'YYYY-MM-DDTHH:MM:SS.mmmZ' with millisecond precision.
    Naive datetimes are taken to be UTC already.
    """
    if moment.tzinfo is not None:
        moment = moment.astimezone(timezone.utc).replace(tzinfo=None)
    return moment.strftime("%Y-%m-%dT%H:%M:%S.") + f"{moment.microsecond // 1000:03d}Z"
