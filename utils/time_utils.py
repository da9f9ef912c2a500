"""Date parsing and display helpers."""

from datetime import date, datetime
from typing import Any


def parse_date(value: Any) -> date | None:
    """Parse an ISO date (or datetime) value. Returns None if unparseable."""
    if value is None or value == "":
        return None
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if not isinstance(value, str):
        return None
    text = value.strip()
    try:
        return date.fromisoformat(text[:10])
    except ValueError:
        return None


def format_date(value: date | None) -> str:
    """Format a date for display."""
    if value is None:
        return "N/A"
    return value.strftime("%b %d, %Y")
