"""Notification types and data classes."""

from dataclasses import dataclass, field
from datetime import UTC, datetime
from config.constants import NotificationType, NotificationVariant


@dataclass
class Notification:
    """A transient toast shown to the user."""
    type: NotificationType
    title: str
    description: str
    variant: NotificationVariant = NotificationVariant.DEFAULT
    created_at: datetime = field(default_factory=lambda: datetime.now(UTC))

    @property
    def is_error(self) -> bool:
        return self.variant == NotificationVariant.DESTRUCTIVE
