"""Tests for ApiClient and the fetcher factories with mocked HTTP."""

from __future__ import annotations

from unittest.mock import AsyncMock, MagicMock, patch

import pytest

from gridkit.models.paging import PagedResponse
from gridkit.services.api_client import ApiClient, ApiError, paged_fetcher, rows_fetcher

pytestmark = pytest.mark.asyncio

PAGE_PAYLOAD = {
    "content": [
        {"id": 1, "year": 1980, "title": "Can't Stop the Music", "winner": True},
        {"id": 2, "year": 1980, "title": "Cruising", "winner": False},
    ],
    "pageable": {"pageNumber": 0, "pageSize": 2},
    "totalElements": 6,
    "totalPages": 3,
}


def mock_http(payload=None, status_code=200, reason="OK"):
    """Patch httpx.AsyncClient; returns (patcher, client mock)."""
    mock_response = MagicMock()
    mock_response.status_code = status_code
    mock_response.is_success = 200 <= status_code < 300
    mock_response.reason_phrase = reason
    mock_response.json.return_value = payload

    mock_client = AsyncMock()
    mock_client.__aenter__ = AsyncMock(return_value=mock_client)
    mock_client.__aexit__ = AsyncMock(return_value=None)
    mock_client.get = AsyncMock(return_value=mock_response)

    patcher = patch("httpx.AsyncClient", return_value=mock_client)
    return patcher, mock_client


async def test_get_returns_json():
    """get() decodes the JSON body."""
    client = ApiClient("http://api.test")
    patcher, mock_client = mock_http({"ok": True})

    with patcher:
        result = await client.get("/api/movies")

    assert result == {"ok": True}
    call = mock_client.get.call_args
    assert call.args[0] == "http://api.test/api/movies"
    assert call.kwargs["headers"]["Content-Type"] == "application/json"


async def test_get_drops_none_params():
    """None-valued params are not sent; booleans are lowercase."""
    client = ApiClient("http://api.test")
    patcher, mock_client = mock_http([])

    with patcher:
        await client.get("/api/movies", params={"page": 0, "size": 99, "year": None, "winner": True})

    assert mock_client.get.call_args.kwargs["params"] == {"page": "0", "size": "99", "winner": "true"}


async def test_custom_headers_merged():
    client = ApiClient("http://api.test")
    patcher, mock_client = mock_http([])

    with patcher:
        await client.get("/api/movies", headers={"X-Trace": "abc"})

    headers = mock_client.get.call_args.kwargs["headers"]
    assert headers["X-Trace"] == "abc"
    assert headers["Content-Type"] == "application/json"


async def test_non_2xx_raises_api_error():
    """A 404 becomes ApiError carrying status and reason."""
    client = ApiClient("http://api.test")
    patcher, _ = mock_http(None, status_code=404, reason="Not Found")

    with patcher, pytest.raises(ApiError) as exc_info:
        await client.get("/api/missing")

    assert exc_info.value.status == 404
    assert exc_info.value.message == "Not Found"
    assert str(exc_info.value) == "Not Found"


async def test_base_url_trailing_slash_trimmed():
    client = ApiClient("http://api.test/")
    assert client.base_url == "http://api.test"


async def test_defaults_from_settings():
    client = ApiClient()
    assert client.base_url == "http://rows.test"
    assert client.timeout == 5.0


async def test_get_page_parses_paged_response():
    client = ApiClient("http://api.test")
    patcher, _ = mock_http(PAGE_PAYLOAD)

    with patcher:
        page = await client.get_page("/api/movies", {"page": 0, "size": 2})

    assert isinstance(page, PagedResponse)
    assert page.total_pages == 3
    assert page.total_elements == 6
    assert page.pageable.page_size == 2
    assert page.content[0]["title"] == "Can't Stop the Music"


async def test_rows_fetcher_returns_content():
    client = ApiClient("http://api.test")
    patcher, _ = mock_http(PAGE_PAYLOAD)
    fetch = rows_fetcher(client, "/api/movies", {"page": 0, "size": 99})

    with patcher:
        rows = await fetch()

    assert [r["id"] for r in rows] == [1, 2]


async def test_paged_fetcher_reads_params_per_call():
    """Mutating the shared params between calls moves to another page."""
    client = ApiClient("http://api.test")
    patcher, mock_client = mock_http(PAGE_PAYLOAD)
    params = {"page": 0, "size": 2}
    fetch = paged_fetcher(client, "/api/movies", params)

    with patcher:
        await fetch()
        params["page"] = 2
        await fetch()

    pages = [c.kwargs["params"]["page"] for c in mock_client.get.call_args_list]
    assert pages == ["0", "2"]
