"""Customer records routes: health profile fetch and save."""

from typing import Any
import structlog
from api.base import BaseApiClient

log = structlog.get_logger(__name__)

PROFILE_PATH = "customer-records/profile"


class CustomerRecordsClient(BaseApiClient):
    api_name = "customer_records"

    async def get_profile(self, user_id: str, salon_id: str) -> dict[str, Any] | None:
        """Fetch the raw profile envelope's payload. None when no record exists."""
        data = await self._request("GET", PROFILE_PATH, params={"user_id": user_id, "salon_id": salon_id})
        if not isinstance(data, dict):
            return None
        profile = data.get("profile")
        return profile if isinstance(profile, dict) else None

    async def save_profile(self, payload: dict[str, Any]) -> dict[str, Any]:
        """Persist a full profile payload (replace, not patch)."""
        data = await self._request("POST", PROFILE_PATH, json=payload)
        log.info("profile_saved", user_id=payload.get("user_id"), salon_id=payload.get("salon_id"))
        return data if isinstance(data, dict) else {}
