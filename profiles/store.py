"""Remote profile store: the network boundary the controller talks to."""

from typing import Any, Protocol

from api.client import ApiClient
from api.uploads import UploadFile, UploadResult
from profiles.models import Profile


class RemoteProfileStore(Protocol):
    async def get_profile(self, subject_id: str, scope_id: str) -> dict[str, Any] | None: ...

    async def save_profile(self, profile: Profile, subject_id: str, scope_id: str) -> dict[str, Any]: ...

    async def upload_asset(self, file: UploadFile) -> UploadResult: ...


class HttpProfileStore:
    """RemoteProfileStore backed by the REST API."""

    def __init__(self, api: ApiClient) -> None:
        self._api = api

    async def get_profile(self, subject_id: str, scope_id: str) -> dict[str, Any] | None:
        return await self._api.customer_records.get_profile(subject_id, scope_id)

    async def save_profile(self, profile: Profile, subject_id: str, scope_id: str) -> dict[str, Any]:
        return await self._api.customer_records.save_profile(profile.to_payload(subject_id, scope_id))

    async def upload_asset(self, file: UploadFile) -> UploadResult:
        return await self._api.uploads.upload(file)
