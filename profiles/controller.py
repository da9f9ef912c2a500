"""Load / upload / save lifecycle for a remote-backed profile form."""

import asyncio
import inspect
from collections.abc import Awaitable, Callable
from typing import Any

import structlog

from api.uploads import UploadFile
from config.constants import (
    NotificationType,
    OperationState,
    PHOTO_UPLOADED_MESSAGE,
    PHOTO_UPLOADED_TITLE,
    PROFILE_SAVED_MESSAGE,
    PROFILE_SAVED_TITLE,
    SAVE_FAILED_FALLBACK,
    SAVE_FAILED_TITLE,
    UPLOAD_FAILED_TITLE,
)
from notifications.dispatcher import NotificationDispatcher
from profiles.editable import EditableProfileModel
from profiles.errors import LoadError, PhotoUploadError, ProfileError, SaveError
from profiles.normalizer import normalize
from profiles.store import RemoteProfileStore
from salon.context import SalonContext

log = structlog.get_logger(__name__)

Callback = Callable[[], Awaitable[None] | None]


def _error_message(error: BaseException) -> str:
    message = getattr(error, "message", None)
    if isinstance(message, str):
        return message
    return str(error)


class ProfileFormController:
    """Drives an EditableProfileModel against a RemoteProfileStore.

    Each operation category has its own OperationState:

    * load:   IDLE -> LOADING -> READY
    * save:   READY -> SAVING -> READY
    * upload: READY -> UPLOADING -> READY

    Every operation returns to READY whatever the outcome. A second load
    supersedes (cancels) the one in flight; a second save or upload while
    one of the same kind is running is rejected. Save and upload may
    overlap, and the later one to resolve wins on the shared model.
    """

    def __init__(
        self,
        store: RemoteProfileStore,
        dispatcher: NotificationDispatcher,
        subject_id: str,
        salon: SalonContext,
        model: EditableProfileModel | None = None,
        on_saved: Callback | None = None,
    ) -> None:
        self._store = store
        self._dispatcher = dispatcher
        self._salon = salon
        self._on_saved = on_saved
        self.subject_id = subject_id
        self.model = model or EditableProfileModel()

        self.load_state = OperationState.IDLE
        self.save_state = OperationState.READY
        self.upload_state = OperationState.READY
        self.last_error: ProfileError | None = None

        self._load_generation = 0
        self._load_task: asyncio.Future[Any] | None = None

    @property
    def loading(self) -> bool:
        return self.load_state == OperationState.LOADING

    @property
    def saving(self) -> bool:
        return self.save_state == OperationState.SAVING

    @property
    def uploading(self) -> bool:
        return self.upload_state == OperationState.UPLOADING

    # ── Load ──

    async def load(self) -> bool:
        """Fetch the profile and replace the model. Failures are logged only."""
        scope_id = self._salon.scope_id
        if scope_id is None:
            log.debug("profile_load_skipped", subject_id=self.subject_id, reason="no_salon")
            return False

        self._load_generation += 1
        generation = self._load_generation
        if self._load_task is not None and not self._load_task.done():
            self._load_task.cancel()
            log.info("profile_load_superseded", subject_id=self.subject_id)

        self.load_state = OperationState.LOADING
        task = asyncio.ensure_future(self._store.get_profile(self.subject_id, scope_id))
        self._load_task = task
        try:
            raw = await task
        except asyncio.CancelledError:
            if generation != self._load_generation:
                return False
            raise
        except Exception as e:
            if generation != self._load_generation:
                return False
            self.last_error = LoadError(_error_message(e), cause=e)
            log.error("profile_load_failed", subject_id=self.subject_id, salon_id=scope_id, error=str(e))
            return False
        finally:
            if generation == self._load_generation:
                self.load_state = OperationState.READY
                self._load_task = None

        if generation != self._load_generation:
            log.debug("profile_load_stale_response", subject_id=self.subject_id)
            return False

        self.model.replace(normalize(raw))
        log.info("profile_loaded", subject_id=self.subject_id, salon_id=scope_id, found=raw is not None)
        return True

    # ── Upload ──

    async def upload(self, file: UploadFile) -> bool:
        """Upload a concern photo and attach it to the model."""
        if self.uploading:
            log.warning("profile_upload_rejected", subject_id=self.subject_id, reason="in_flight")
            return False

        self.upload_state = OperationState.UPLOADING
        try:
            result = await self._store.upload_asset(file)
        except Exception as e:
            message = _error_message(e)
            self.last_error = PhotoUploadError(message, cause=e)
            log.error("profile_upload_failed", subject_id=self.subject_id, filename=file.filename, error=message)
            await self._dispatcher.toast(
                NotificationType.PHOTO_UPLOAD_FAILED, UPLOAD_FAILED_TITLE, message, destructive=True
            )
            return False
        finally:
            self.upload_state = OperationState.READY

        self.model.set_concern_photo(result.url, result.asset_id)
        await self._dispatcher.toast(NotificationType.PHOTO_UPLOADED, PHOTO_UPLOADED_TITLE, PHOTO_UPLOADED_MESSAGE)
        return True

    # ── Save ──

    async def save(self) -> bool:
        """Persist the whole model. Invokes on_saved after a successful save."""
        scope_id = self._salon.scope_id
        if scope_id is None:
            log.debug("profile_save_skipped", subject_id=self.subject_id, reason="no_salon")
            return False
        if self.saving:
            log.warning("profile_save_rejected", subject_id=self.subject_id, reason="in_flight")
            return False

        snapshot = self.model.snapshot()
        self.save_state = OperationState.SAVING
        try:
            await self._store.save_profile(snapshot, self.subject_id, scope_id)
        except Exception as e:
            message = _error_message(e) or SAVE_FAILED_FALLBACK
            self.last_error = SaveError(message, cause=e)
            log.error("profile_save_failed", subject_id=self.subject_id, salon_id=scope_id, error=str(e))
            await self._dispatcher.toast(
                NotificationType.PROFILE_SAVE_FAILED, SAVE_FAILED_TITLE, message, destructive=True
            )
            return False
        finally:
            self.save_state = OperationState.READY

        self.model.mark_clean(snapshot)
        await self._dispatcher.toast(NotificationType.PROFILE_SAVED, PROFILE_SAVED_TITLE, PROFILE_SAVED_MESSAGE)
        if self._on_saved is not None:
            result = self._on_saved()
            if inspect.isawaitable(result):
                await result
        return True

    async def close(self) -> None:
        """Abandon an in-flight load. Pending saves and uploads run to completion."""
        if self._load_task is not None and not self._load_task.done():
            self._load_generation += 1
            self._load_task.cancel()
            self._load_task = None
            self.load_state = OperationState.READY
