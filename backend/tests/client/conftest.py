"""Client test fixtures — FinboardApiClient wired to the in-process app.

Design Decisions:
    - ASGITransport drives the real FastAPI app against the test database,
      so queries/mutations are exercised end to end without a server
    - failing_api uses httpx.MockTransport for status codes the app never emits
"""

import httpx
import pytest
from httpx import ASGITransport

from finboard.client.api_client import FinboardApiClient
from finboard.client.query_client import QueryClient

ALICE = "user_alice"


@pytest.fixture
async def api(app_with_test_db, token_for):
    token = token_for(ALICE)
    async with FinboardApiClient(
        "http://test",
        token_provider=lambda: token,
        transport=ASGITransport(app=app_with_test_db),
    ) as client:
        yield client


@pytest.fixture
def requests_seen():
    return []


@pytest.fixture
async def failing_api(requests_seen):
    """Every request answers 500 and is recorded."""
    def handler(request: httpx.Request) -> httpx.Response:
        requests_seen.append(request)
        return httpx.Response(500, json={"error": {"message": "boom"}})

    async with FinboardApiClient(
        "http://test", transport=httpx.MockTransport(handler),
    ) as client:
        yield client


@pytest.fixture
def query_client():
    return QueryClient()
