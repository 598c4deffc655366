"""API client for the tasktrack server."""

import asyncio
import logging
from typing import Any

import httpx

from tasktrack.config import APIConfig, get_config_manager

logger = logging.getLogger(__name__)

IDEMPOTENT_METHODS = frozenset({"GET", "PUT", "DELETE"})


def _is_retryable(method: str, error: httpx.HTTPError) -> bool:
    """Network failures and 5xx responses are worth another try; 4xx are not.

    Only idempotent methods are ever retried.
    """
    if method.upper() not in IDEMPOTENT_METHODS:
        return False
    if isinstance(error, httpx.HTTPStatusError):
        return error.response.status_code >= 500
    return True


class APIClient:
    """HTTP client for the tasktrack API.

    ``transport`` lets callers plug in ``httpx.MockTransport`` or
    ``httpx.ASGITransport`` instead of the network.
    """

    def __init__(
        self,
        api_config: APIConfig | None = None,
        *,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        if api_config is None:
            api_config = get_config_manager().config.api
        self.config = api_config
        self.base_url = api_config.endpoint.rstrip("/")
        self.timeout = api_config.timeout
        self._transport = transport
        self._client: httpx.AsyncClient | None = None

    async def __aenter__(self) -> "APIClient":
        """Enter the async context manager."""
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        """Exit the async context manager and ensure the client is closed."""
        await self.close()

    def _get_headers(self) -> dict[str, str]:
        """Get HTTP headers."""
        return {
            "Content-Type": "application/json",
            "Accept": "application/json",
        }

    async def _get_client(self) -> httpx.AsyncClient:
        """Get or create the HTTP client."""
        if self._client is None:
            self._client = httpx.AsyncClient(
                base_url=self.base_url,
                timeout=self.timeout,
                follow_redirects=True,
                headers=self._get_headers(),
                transport=self._transport,
            )
        return self._client

    async def close(self) -> None:
        """Close the HTTP client."""
        if self._client is not None:
            await self._client.aclose()
            self._client = None

    async def request(
        self,
        method: str,
        path: str,
        *,
        json: dict[str, Any] | None = None,
        params: dict[str, Any] | None = None,
        retry: int | None = None,
    ) -> httpx.Response:
        """Make an HTTP request to the API.

        Server errors and network errors on GET, PUT and DELETE are retried
        with exponential backoff. Client errors (4xx) and any POST failure
        are raised immediately.
        """
        attempts = (self.config.retry if retry is None else retry) + 1
        client = await self._get_client()
        url = path if path.startswith("/") else f"/{path}"

        for attempt in range(1, attempts + 1):
            try:
                response = await client.request(method, url, json=json, params=params)
                response.raise_for_status()
                return response
            except (httpx.HTTPStatusError, httpx.RequestError) as e:
                if attempt == attempts or not _is_retryable(method, e):
                    raise
                logger.warning(
                    "%s %s failed (attempt %d/%d), retrying: %s",
                    method,
                    url,
                    attempt,
                    attempts,
                    e,
                )
                await asyncio.sleep(2 ** (attempt - 1))
        raise AssertionError("unreachable")

    async def get(
        self, path: str, *, params: dict[str, Any] | None = None
    ) -> httpx.Response:
        """Make a GET request."""
        return await self.request("GET", path, params=params)

    async def post(
        self, path: str, *, json: dict[str, Any] | None = None
    ) -> httpx.Response:
        """Make a POST request."""
        return await self.request("POST", path, json=json)

    async def put(
        self, path: str, *, json: dict[str, Any] | None = None
    ) -> httpx.Response:
        """Make a PUT request."""
        return await self.request("PUT", path, json=json)

    async def delete(self, path: str) -> httpx.Response:
        """Make a DELETE request."""
        return await self.request("DELETE", path)


def get_client(profile: str = "default") -> APIClient:
    """Get an API client configured from the given profile."""
    return APIClient(get_config_manager(profile).config.api)
