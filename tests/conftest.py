"""Shared test fixtures for the salon booking client test suite."""

import json
import pytest
from typing import Any
from unittest.mock import AsyncMock, MagicMock

from api.uploads import UploadFile, UploadResult
from notifications.dispatcher import NotificationDispatcher
from salon.context import Salon, SalonContext


# ── HTTP Session Mock ──


class FakeResponse:
    """Mimics an aiohttp response used as an async context manager."""

    def __init__(self, status: int = 200, body: Any = None, text: str | None = None):
        self.status = status
        self._body = body
        self._text = text

    async def json(self, content_type: str | None = "application/json") -> Any:
        if self._text is not None:
            return json.loads(self._text)
        return self._body

    async def text(self) -> str:
        if self._text is not None:
            return self._text
        return json.dumps(self._body)

    async def __aenter__(self):
        return self

    async def __aexit__(self, *args):
        pass


class FakeSession:
    """Mock aiohttp.ClientSession recording requests and replaying responses."""

    def __init__(self):
        self.responses: list[FakeResponse | Exception] = []
        self.calls: list[dict[str, Any]] = []
        self.closed = False

    def request(self, method, url, **kwargs):
        self.calls.append({"method": method, "url": url, **kwargs})
        response = self.responses.pop(0) if self.responses else FakeResponse(200, {})
        if isinstance(response, Exception):
            raise response
        return response

    async def close(self):
        self.closed = True


@pytest.fixture
def fake_session():
    return FakeSession()


@pytest.fixture
def attach_session(fake_session):
    """Make a BaseApiClient use the fake session."""

    def attach(client):
        client.get_session = AsyncMock(return_value=fake_session)
        return client

    return attach


@pytest.fixture
def respond(fake_session):
    """Queue a response on the fake session."""

    def queue(status: int = 200, body: Any = None, text: str | None = None):
        fake_session.responses.append(FakeResponse(status, body, text))

    return queue


# ── Profile Store Mock ──


@pytest.fixture
def raw_profile() -> dict[str, Any]:
    """Server-shaped profile with comma-joined list fields."""
    return {
        "user_id": "cust-1",
        "salon_id": "salon-9",
        "date_of_birth": "1990-04-12",
        "skin_type": "combination",
        "skin_issues": " acne, redness ,",
        "allergy_records": "latex,  fragrance",
        "medical_conditions": ["eczema"],
        "notes": "Prefers morning appointments",
        "concern_photo_url": "https://cdn.example.com/p/abc.jpg",
        "concern_photo_public_id": "p/abc",
    }


@pytest.fixture
def mock_store(raw_profile):
    """RemoteProfileStore with all methods as AsyncMock."""
    store = MagicMock()
    store.get_profile = AsyncMock(return_value=raw_profile)
    store.save_profile = AsyncMock(return_value={"message": "saved"})
    store.upload_asset = AsyncMock(return_value=UploadResult(
        url="https://cdn.example.com/p/new.jpg", asset_id="p/new",
    ))
    return store


@pytest.fixture
def dispatcher():
    return NotificationDispatcher(history_size=10)


@pytest.fixture
def salon():
    return SalonContext(Salon(id="salon-9", name="Glow Studio"))


@pytest.fixture
def photo():
    return UploadFile(filename="concern.jpg", content=b"\xff\xd8\xff" + b"0" * 64, content_type="image/jpeg")
