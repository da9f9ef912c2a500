"""Asset upload route for concern photos."""

import mimetypes
from dataclasses import dataclass
from pathlib import Path
import aiohttp
import structlog
from api.base import ApiError, BaseApiClient, UploadError
from config.constants import IMAGE_CONTENT_TYPE, UPLOAD_NOT_IMAGE, UPLOAD_TOO_LARGE
from config.settings import settings

log = structlog.get_logger(__name__)

UPLOAD_PATH = "uploads"


@dataclass(frozen=True)
class UploadFile:
    """An in-memory file selected for upload."""
    filename: str
    content: bytes
    content_type: str = "application/octet-stream"

    @property
    def size(self) -> int:
        return len(self.content)

    @classmethod
    def from_path(cls, path: str | Path) -> "UploadFile":
        path = Path(path)
        content_type, _ = mimetypes.guess_type(path.name)
        return cls(
            filename=path.name,
            content=path.read_bytes(),
            content_type=content_type or "application/octet-stream",
        )


@dataclass(frozen=True)
class UploadResult:
    url: str
    asset_id: str


class UploadsClient(BaseApiClient):
    api_name = "uploads"

    def __init__(self, base_url: str | None = None, token: str | None = None, max_bytes: int | None = None) -> None:
        super().__init__(base_url, token)
        self.max_bytes = max_bytes or settings.upload_max_bytes

    def check(self, file: UploadFile) -> None:
        """Reject files the backend would refuse before sending them."""
        if not IMAGE_CONTENT_TYPE.match(file.content_type):
            raise UploadError(415, UPLOAD_NOT_IMAGE)
        if file.size > self.max_bytes:
            raise UploadError(413, UPLOAD_TOO_LARGE)

    async def upload(self, file: UploadFile) -> UploadResult:
        """Upload an image and return its public URL and asset id."""
        self.check(file)
        form = aiohttp.FormData()
        form.add_field("file", file.content, filename=file.filename, content_type=file.content_type)
        try:
            data = await self._request("POST", UPLOAD_PATH, data=form)
        except UploadError:
            raise
        except ApiError as e:
            raise UploadError(e.status, e.message) from e

        url = data.get("url") if isinstance(data, dict) else None
        asset_id = data.get("public_id") if isinstance(data, dict) else None
        if not url or not asset_id:
            raise UploadError(502, "Upload response missing url or public_id")
        log.info("asset_uploaded", filename=file.filename, size=file.size, asset_id=asset_id)
        return UploadResult(url=str(url), asset_id=str(asset_id))
