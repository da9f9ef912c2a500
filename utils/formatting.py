"""Text formatting, list splitting and email validation."""

import re
from typing import Any

from config.constants import LIST_DELIMITER

_EMAIL_PATTERN = re.compile(r"^[A-Za-z0-9._%+-]+@[A-Za-z0-9-]+(?:\.[A-Za-z0-9-]+)*\.[A-Za-z]{2,}$")


def validate_email(email: str | None) -> str | None:
    """Validate and normalize an email address. Returns None if invalid."""
    if not email:
        return None
    email = email.strip()
    if _EMAIL_PATTERN.match(email) and ".." not in email:
        return email
    return None


def split_delimited(text: str, delimiter: str = LIST_DELIMITER) -> list[str]:
    """Split a delimited string, trimming parts and dropping empty ones."""
    return [part.strip() for part in text.split(delimiter) if part.strip()]


def clean_entries(values: Any) -> list[str]:
    """Coerce a server list value into a list of non-blank strings.

    Strings are split on the list delimiter; sequences keep their order with
    blank and non-string entries dropped; anything else becomes an empty list.
    """
    if isinstance(values, str):
        return split_delimited(values)
    if isinstance(values, (list, tuple)):
        return [v for v in values if isinstance(v, str) and v.strip()]
    return []


def format_list(values: list[str], empty: str = "None recorded") -> str:
    """Join list entries for display."""
    return ", ".join(values) if values else empty


def truncate(text: str, max_length: int = 1024) -> str:
    """Truncate text to max_length, adding ellipsis if needed."""
    if len(text) <= max_length:
        return text
    return text[: max_length - 3] + "..."
