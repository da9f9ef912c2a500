"""Backend diagnostics: database table introspection."""

from api.base import BaseApiClient, ServerError


class DiagnosticsClient(BaseApiClient):
    api_name = "diagnostics"

    async def list_tables(self) -> list[str]:
        """List the tables present in the backend database."""
        data = await self._request("GET", "check_tables")
        if not isinstance(data, dict):
            raise ServerError(502, "Unexpected table listing response")
        # The backend reports database failures with a 200 and an error body
        if "error" in data:
            raise ServerError(500, str(data["error"]))
        tables = data.get("tables", [])
        return [str(t) for t in tables] if isinstance(tables, list) else []

    async def health_check(self) -> bool:
        try:
            await self.list_tables()
            return True
        except Exception:
            return False
