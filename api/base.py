"""Base API client with session management and error mapping."""

import asyncio
from typing import Any
import aiohttp
import structlog
from config.settings import settings

log = structlog.get_logger(__name__)


class ApiError(Exception):
    """Raised when the backend answers with a non-success status."""

    def __init__(self, status: int, message: str) -> None:
        self.status = status
        self.message = message
        super().__init__(message)


class NetworkError(ApiError):
    """Transport failure: connection refused, DNS, timeout."""

    def __init__(self, message: str) -> None:
        super().__init__(0, message)


class ServerError(ApiError):
    """5xx responses, or a success status carrying an error body."""


class ValidationError(ApiError):
    """The backend rejected the request payload (400/422)."""


class UploadError(ApiError):
    """An asset could not be uploaded."""


def _error_message(status: int, body: Any) -> str:
    if isinstance(body, dict):
        for key in ("error", "message"):
            value = body.get(key)
            if isinstance(value, str) and value:
                return value
    if isinstance(body, str) and body.strip():
        return body.strip()
    return f"HTTP {status}"


def raise_for_status(status: int, body: Any) -> None:
    """Map a response status to the client error taxonomy."""
    if 200 <= status < 300:
        return
    message = _error_message(status, body)
    if status in (400, 422):
        raise ValidationError(status, message)
    if status >= 500:
        raise ServerError(status, message)
    raise ApiError(status, message)


class BaseApiClient:
    """Shared HTTP plumbing for the backend route groups."""

    api_name: str = "unknown"

    def __init__(self, base_url: str | None = None, token: str | None = None) -> None:
        self.base_url = (base_url or settings.api_base_url).rstrip("/")
        self._token = settings.api_token if token is None else token
        self._session: aiohttp.ClientSession | None = None

    def _headers(self) -> dict[str, str]:
        headers = {"User-Agent": "SalonBooking/0.1 (Profile Client)", "Accept": "application/json"}
        if self._token:
            headers["Authorization"] = f"Bearer {self._token}"
        return headers

    async def get_session(self) -> aiohttp.ClientSession:
        if self._session is None or self._session.closed:
            self._session = aiohttp.ClientSession(
                timeout=aiohttp.ClientTimeout(total=settings.request_timeout),
                headers=self._headers(),
            )
        return self._session

    async def close(self) -> None:
        if self._session and not self._session.closed:
            await self._session.close()

    def url(self, path: str) -> str:
        return f"{self.base_url}/{path.lstrip('/')}"

    async def _request(
        self,
        method: str,
        path: str,
        params: dict[str, Any] | None = None,
        json: Any = None,
        data: aiohttp.FormData | None = None,
    ) -> Any:
        """Make a single HTTP request and return the decoded JSON body."""
        url = self.url(path)
        session = await self.get_session()
        try:
            async with session.request(method, url, params=params, json=json, data=data) as resp:
                try:
                    body: Any = await resp.json(content_type=None)
                except ValueError:
                    body = await resp.text()
                if resp.status >= 400:
                    log.warning("api_error_response", api=self.api_name, method=method, url=url, status=resp.status)
                raise_for_status(resp.status, body)
                return body
        except (aiohttp.ClientError, asyncio.TimeoutError) as e:
            log.warning("api_transport_error", api=self.api_name, method=method, url=url, error=str(e))
            raise NetworkError(str(e) or type(e).__name__) from e
