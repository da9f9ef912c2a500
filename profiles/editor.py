"""Customer health profile editor: the mountable unit embedders use."""

from collections.abc import Awaitable, Callable
from datetime import date
import inspect

import structlog

from api.uploads import UploadFile
from config.constants import LIST_FIELDS, SkinType
from notifications.dispatcher import NotificationDispatcher
from profiles.controller import ProfileFormController
from profiles.models import Profile
from profiles.store import RemoteProfileStore
from salon.context import SalonContext

log = structlog.get_logger(__name__)


class CustomerHealthProfileEditor:
    """Edits one customer's health profile within the current salon.

    ``mount()`` loads the profile. List entries are typed into per-field
    drafts and committed with ``commit_draft``; a committed draft is
    cleared, a blank one is left as it is. ``on_close`` runs after a
    successful save and on ``cancel()``.
    """

    def __init__(
        self,
        subject_id: str,
        display_name: str,
        on_close: Callable[[], Awaitable[None] | None] | None = None,
        *,
        store: RemoteProfileStore,
        salon: SalonContext,
        dispatcher: NotificationDispatcher,
    ) -> None:
        self.subject_id = subject_id
        self.display_name = display_name
        self._on_close = on_close
        self.drafts: dict[str, str] = {name: "" for name in LIST_FIELDS}
        self.controller = ProfileFormController(
            store=store,
            dispatcher=dispatcher,
            subject_id=subject_id,
            salon=salon,
            on_saved=on_close,
        )
        self.mounted = False

    @property
    def profile(self) -> Profile:
        return self.controller.model.profile

    @property
    def is_dirty(self) -> bool:
        return self.controller.model.is_dirty

    # Control enablement
    @property
    def can_reload(self) -> bool:
        return not self.controller.loading

    @property
    def can_upload(self) -> bool:
        return not self.controller.uploading

    @property
    def can_save(self) -> bool:
        return not self.controller.saving

    async def mount(self) -> None:
        self.mounted = True
        log.debug("profile_editor_mounted", subject_id=self.subject_id)
        await self.controller.load()

    async def unmount(self) -> None:
        self.mounted = False
        await self.controller.close()

    async def reload(self) -> bool:
        return await self.controller.load()

    # ── Scalar fields ──

    def set_date_of_birth(self, value: date | str | None) -> None:
        self.controller.model.set_scalar("date_of_birth", value)

    def set_skin_type(self, value: SkinType | str | None) -> None:
        self.controller.model.set_scalar("skin_type", value)

    def set_notes(self, value: str) -> None:
        self.controller.model.set_scalar("notes", value)

    # ── List fields ──

    def set_draft(self, field: str, text: str) -> None:
        if field not in self.drafts:
            raise ValueError(f"Unknown list field: {field}")
        self.drafts[field] = text

    def commit_draft(self, field: str) -> bool:
        """Add the field's draft to the list and clear it."""
        if field not in self.drafts:
            raise ValueError(f"Unknown list field: {field}")
        added = self.controller.model.add_list_item(field, self.drafts[field])
        if added:
            self.drafts[field] = ""
        return added

    def remove_item(self, field: str, index: int) -> bool:
        return self.controller.model.remove_list_item(field, index)

    # ── Remote operations ──

    async def upload_photo(self, file: UploadFile) -> bool:
        return await self.controller.upload(file)

    async def save(self) -> bool:
        return await self.controller.save()

    async def cancel(self) -> None:
        """Close without saving."""
        if self._on_close is None:
            return
        result = self._on_close()
        if inspect.isawaitable(result):
            await result
