"""HTTP row source: a small JSON GET client plus fetcher factories."""

from __future__ import annotations

import logging
from collections.abc import Awaitable, Callable
from typing import Any

import httpx

from gridkit import config
from gridkit.models.paging import PagedResponse

logger = logging.getLogger(__name__)


class ApiError(Exception):
    """Non-2xx response from the row source."""

    def __init__(self, status: int, message: str) -> None:
        super().__init__(message)
        self.status = status
        self.message = message


class ApiClient:
    """
    JSON GET client for a row source API.

    Query parameters whose value is None are dropped, so partially filled
    filter objects can be passed straight through.
    """

    def __init__(self, base_url: str | None = None, timeout: float | None = None) -> None:
        self.base_url = (base_url if base_url is not None else config.settings.API_URL).rstrip("/")
        self.timeout = timeout if timeout is not None else config.settings.API_TIMEOUT

    def _headers(self, custom: dict[str, str] | None = None) -> dict[str, str]:
        headers = {"Content-Type": "application/json"}
        if custom:
            headers.update(custom)
        return headers

    def build_params(self, params: dict[str, Any] | None) -> dict[str, str]:
        """Drop None values and stringify the rest (booleans as true/false)."""
        if not params:
            return {}
        built: dict[str, str] = {}
        for key, value in params.items():
            if value is None:
                continue
            if isinstance(value, bool):
                built[key] = "true" if value else "false"
            else:
                built[key] = str(value)
        return built

    async def get(
        self,
        endpoint: str,
        params: dict[str, Any] | None = None,
        headers: dict[str, str] | None = None,
    ) -> Any:
        """
        GET `endpoint` and decode the JSON body.

        Raises:
            ApiError: If the server answers with a non-2xx status
            httpx.HTTPError: If the server is unreachable
        """
        url = f"{self.base_url}{endpoint}"
        async with httpx.AsyncClient(timeout=self.timeout) as client:
            response = await client.get(
                url,
                params=self.build_params(params),
                headers=self._headers(headers),
            )
            if not response.is_success:
                logger.warning("api_client: GET %s returned %d", endpoint, response.status_code)
                raise ApiError(response.status_code, response.reason_phrase)
            return response.json()

    async def get_page(self, endpoint: str, params: dict[str, Any] | None = None) -> PagedResponse:
        payload = await self.get(endpoint, params=params)
        return PagedResponse.model_validate(payload)


def rows_fetcher(
    client: ApiClient,
    endpoint: str,
    params: dict[str, Any] | None = None,
) -> Callable[[], Awaitable[list[dict[str, Any]]]]:
    """Fetcher returning just the rows of a paged endpoint."""

    async def fetch() -> list[dict[str, Any]]:
        page = await client.get_page(endpoint, params)
        return page.content

    return fetch


def paged_fetcher(
    client: ApiClient,
    endpoint: str,
    params: dict[str, Any],
) -> Callable[[], Awaitable[PagedResponse]]:
    """
    Fetcher returning the whole PagedResponse. Reads `params` on every call,
    so mutating params["page"] between calls moves to another page.
    """

    async def fetch() -> PagedResponse:
        return await client.get_page(endpoint, dict(params))

    return fetch
