"""
Utility functions for the application.
"""
from typing import Any, Dict
from datetime import datetime, timezone


def utc_now() -> datetime:
    """Current UTC time as a naive datetime, the form stored in the database."""
    return datetime.now(timezone.utc).replace(tzinfo=None)


def to_naive_utc(value: datetime) -> datetime:
    """Convert an aware datetime to naive UTC; naive values are assumed UTC."""
    if value.tzinfo is not None:
        return value.astimezone(timezone.utc).replace(tzinfo=None)
    return value


def format_error(message: str, details: Any = None) -> Dict[str, Any]:
    """Format error response."""
    response = {"message": message}
    if details:
        response["details"] = details
    return response
