"""HTTP client for the dashboard endpoint."""

from __future__ import annotations

import logging

import httpx

from domain.dashboard import DASHBOARD_PATH, DashboardDocument
from domain.errors import NetworkOrStatusError

logger = logging.getLogger(__name__)


class DashboardClient:
    """Fetches the aggregated dashboard document; one GET per call, no retries."""

    def __init__(
        self,
        base_url: str,
        *,
        timeout: float = 10.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._base_url = str(base_url).rstrip("/")
        self._timeout = timeout
        self._transport = transport

    @property
    def base_url(self) -> str:
        return self._base_url

    async def fetch_dashboard(self) -> DashboardDocument:
        async with httpx.AsyncClient(
            base_url=self._base_url,
            timeout=self._timeout,
            transport=self._transport,
        ) as client:
            try:
                response = await client.get(DASHBOARD_PATH)
            except httpx.TimeoutException as exc:
                raise NetworkOrStatusError("Request timed out") from exc
            except httpx.RequestError as exc:
                raise NetworkOrStatusError(f"Request failed: {exc!s}") from exc

        if not response.is_success:
            logger.warning("Dashboard request returned status %s", response.status_code)
            raise NetworkOrStatusError(
                f"Request failed with status {response.status_code}",
                status_code=response.status_code,
            )

        try:
            return DashboardDocument.model_validate(response.json())
        except ValueError as exc:
            raise NetworkOrStatusError(f"Invalid dashboard payload: {exc}") from exc
