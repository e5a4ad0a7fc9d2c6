"""Finboard API Client — httpx.AsyncClient wrapper that sends the caller's bearer token.

Invariants:
    - Single-shot requests: no retries, httpx default timeout
    - Transport failures mapped to ApiTransportError (client/errors.py)
    - Non-2xx responses are returned, not raised: queries/mutations decide the message

Design Decisions:
    - Token supplied by a zero-arg callable so a refreshed session token is
      picked up per request without rebuilding the client
    - transport injectable: tests drive the real FastAPI app via ASGITransport
"""

import logging
from typing import Any, Callable

import httpx

from finboard.client.errors import ApiTransportError
from finboard.config import Settings
from finboard.core.domain_types import ResourceKind

logger = logging.getLogger(__name__)

TokenProvider = Callable[[], str | None]


def collection_path(kind: ResourceKind) -> str:
    return f"/api/{kind.collection}"


def item_path(kind: ResourceKind, row_id: str) -> str:
    return f"{collection_path(kind)}/{row_id}"


class FinboardApiClient:
    """Async HTTP client for the Finboard resource API."""

    def __init__(
        self,
        base_url: str,
        token_provider: TokenProvider | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self._token_provider = token_provider
        self._client = httpx.AsyncClient(base_url=base_url, transport=transport)

    @classmethod
    def from_settings(
        cls, settings: Settings, token_provider: TokenProvider | None = None,
    ) -> "FinboardApiClient":
        return cls(settings.api_base_url, token_provider)

    async def __aenter__(self) -> "FinboardApiClient":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        await self._client.aclose()

    def _headers(self) -> dict[str, str]:
        token = self._token_provider() if self._token_provider else None
        return {"Authorization": f"Bearer {token}"} if token else {}

    async def request(
        self,
        method: str,
        path: str,
        *,
        json: Any = None,
        params: dict | None = None,
    ) -> httpx.Response:
        try:
            response = await self._client.request(
                method, path, json=json, params=params, headers=self._headers(),
            )
        except httpx.TransportError as e:
            logger.error(f"{method} {path} failed: {e}")
            raise ApiTransportError(f"Request to {path} failed")
        if not response.is_success:
            logger.warning(
                f"{method} {path} returned {response.status_code}",
                extra={"path": path},
            )
        return response

    async def get(self, path: str, params: dict | None = None) -> httpx.Response:
        return await self.request("GET", path, params=params)

    async def post(self, path: str, json: Any = None) -> httpx.Response:
        return await self.request("POST", path, json=json)

    async def patch(self, path: str, json: Any = None) -> httpx.Response:
        return await self.request("PATCH", path, json=json)

    async def delete(self, path: str) -> httpx.Response:
        return await self.request("DELETE", path)
