"""In-memory editable profile with list mutations and dirtiness tracking."""

import copy
from datetime import date
from typing import Any

import structlog

from config.constants import LIST_FIELDS, SCALAR_FIELDS, SkinType
from profiles.models import ConcernPhoto, Profile
from utils.time_utils import parse_date

log = structlog.get_logger(__name__)


class EditableProfileModel:
    """Holds the profile being edited.

    Every mutation bumps ``revision``. ``is_dirty`` compares the current
    profile with the baseline captured on the last ``replace`` or
    ``mark_clean``.
    """

    def __init__(self, profile: Profile | None = None) -> None:
        self._profile = profile or Profile()
        self._baseline = copy.deepcopy(self._profile)
        self.revision = 0

    @property
    def profile(self) -> Profile:
        return self._profile

    @property
    def is_dirty(self) -> bool:
        return self._profile != self._baseline

    def snapshot(self) -> Profile:
        return copy.deepcopy(self._profile)

    def replace(self, profile: Profile) -> None:
        """Swap in a whole profile, e.g. after a load."""
        self._profile = copy.deepcopy(profile)
        self._baseline = copy.deepcopy(profile)
        self.revision += 1

    def mark_clean(self, saved: Profile | None = None) -> None:
        """Record what the backend now holds. Defaults to the current profile."""
        self._baseline = copy.deepcopy(saved if saved is not None else self._profile)

    def set_scalar(self, field: str, value: Any) -> None:
        if field not in SCALAR_FIELDS:
            raise ValueError(f"Unknown scalar field: {field}")

        if field == "date_of_birth":
            if isinstance(value, str):
                text = value.strip()
                value = parse_date(text)
                if text and value is None:
                    raise ValueError(f"Invalid date_of_birth: {text!r}, expected YYYY-MM-DD")
            elif value is not None and not isinstance(value, date):
                raise TypeError("date_of_birth must be a date, ISO string or None")
        elif field == "skin_type":
            if value == "" or value is None:
                value = None
            else:
                value = SkinType(value)
        elif field == "notes":
            if not isinstance(value, str):
                raise TypeError("notes must be a string")

        setattr(self._profile, field, value)
        self.revision += 1

    def _list(self, field: str) -> list[str]:
        if field not in LIST_FIELDS:
            raise ValueError(f"Unknown list field: {field}")
        return getattr(self._profile, field)

    def add_list_item(self, field: str, value: str) -> bool:
        """Append a trimmed entry. Blank values are ignored."""
        entries = self._list(field)
        value = value.strip()
        if not value:
            return False
        entries.append(value)
        self.revision += 1
        return True

    def remove_list_item(self, field: str, index: int) -> bool:
        """Remove the entry at index. Out-of-range indices are ignored."""
        entries = self._list(field)
        if not 0 <= index < len(entries):
            log.debug("list_remove_out_of_range", field=field, index=index, length=len(entries))
            return False
        del entries[index]
        self.revision += 1
        return True

    def set_concern_photo(self, url: str, asset_id: str) -> None:
        self._profile.concern_photo = ConcernPhoto(url=url, asset_id=asset_id)
        self.revision += 1
