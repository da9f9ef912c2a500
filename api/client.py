"""API client facade: groups the backend route clients."""

import structlog
from api.customer_records import CustomerRecordsClient
from api.diagnostics import DiagnosticsClient
from api.newsletter import NewsletterClient
from api.uploads import UploadsClient

log = structlog.get_logger(__name__)


class ApiClient:
    """Entry point to every backend route group."""

    def __init__(self, base_url: str | None = None, token: str | None = None) -> None:
        self.customer_records = CustomerRecordsClient(base_url, token)
        self.uploads = UploadsClient(base_url, token)
        self.newsletter = NewsletterClient(base_url, token)
        self.diagnostics = DiagnosticsClient(base_url, token)

    async def close(self) -> None:
        """Close all client sessions."""
        for client in (self.customer_records, self.uploads, self.newsletter, self.diagnostics):
            await client.close()
        log.info("api_client_closed")

    async def __aenter__(self) -> "ApiClient":
        return self

    async def __aexit__(self, *args: object) -> None:
        await self.close()
