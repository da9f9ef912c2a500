"""Current salon selection: the scope profiles are namespaced under."""

from dataclasses import dataclass
import structlog
from config.settings import settings

log = structlog.get_logger(__name__)


@dataclass(frozen=True)
class Salon:
    id: str
    name: str = ""


class SalonContext:
    """Tracks the salon the operator is currently working in."""

    def __init__(self, current: Salon | None = None) -> None:
        self._current = current

    @classmethod
    def from_settings(cls) -> "SalonContext":
        if settings.default_salon_id:
            return cls(Salon(id=settings.default_salon_id))
        return cls()

    @property
    def current(self) -> Salon | None:
        return self._current

    @property
    def scope_id(self) -> str | None:
        return self._current.id if self._current else None

    def select(self, salon: Salon) -> None:
        log.info("salon_selected", salon_id=salon.id)
        self._current = salon

    def clear(self) -> None:
        self._current = None
