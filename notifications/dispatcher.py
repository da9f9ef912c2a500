"""Deliver transient notifications to subscribed listeners."""

import inspect
from collections import deque
from collections.abc import Awaitable, Callable
import structlog
from config.constants import NotificationType, NotificationVariant
from config.settings import settings
from notifications.types import Notification

log = structlog.get_logger(__name__)

Listener = Callable[[Notification], Awaitable[None] | None]


class NotificationDispatcher:
    """Fan out toasts to listeners and keep the most recent ones."""

    def __init__(self, history_size: int | None = None) -> None:
        self._listeners: list[Listener] = []
        self.history: deque[Notification] = deque(maxlen=history_size or settings.notification_history_size)

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """Register a listener. Returns a function that unsubscribes it."""
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    async def dispatch(self, notif: Notification) -> int:
        """Dispatch a notification. Returns count of listeners notified."""
        self.history.append(notif)
        sent_count = 0
        for listener in list(self._listeners):
            try:
                result = listener(notif)
                if inspect.isawaitable(result):
                    await result
                sent_count += 1
            except Exception as e:
                log.error("notification_listener_error", type=notif.type.value, error=str(e))
        log.info("notification_dispatched", type=notif.type.value, listeners=sent_count)
        return sent_count

    async def toast(
        self,
        type: NotificationType,
        title: str,
        description: str = "",
        destructive: bool = False,
    ) -> Notification:
        """Build and dispatch a notification in one call."""
        notif = Notification(
            type=type,
            title=title,
            description=description,
            variant=NotificationVariant.DESTRUCTIVE if destructive else NotificationVariant.DEFAULT,
        )
        await self.dispatch(notif)
        return notif

    def clear(self) -> None:
        self.history.clear()
