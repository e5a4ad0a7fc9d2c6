"""Check Order — id presence is checked before authentication on /{id} routes.

Invariants verified:
    - Blank id -> 400 "Missing id" even without credentials (GET, PATCH, DELETE)
    - Present id without credentials -> 401
    - Neither check lets a query run: no row changes on rejected requests
    - Collection routes check auth before schema validation (anonymous
      well-formed but invalid body -> 401)
    - JSON decoding precedes every check: malformed JSON -> 400 json_invalid,
      even anonymous, and nothing is written
"""

import pytest
from sqlalchemy import func, select

from finboard.models import Account, Category, Transaction

MALFORMED = b"{not json"
JSON_HEADERS = {"Content-Type": "application/json"}

ALICE = "user_alice"
RESOURCES = ["accounts", "categories", "transactions"]
MODELS = {"accounts": Account, "categories": Category, "transactions": Transaction}


@pytest.mark.parametrize("resource", RESOURCES)
@pytest.mark.parametrize("method", ["GET", "DELETE"])
async def test_blank_id_is_400_before_auth(client, resource, method):
    res = await client.request(method, f"/api/{resource}/%20")
    assert res.status_code == 400
    assert res.json()["error"]["message"] == "Missing id"


@pytest.mark.parametrize("resource", RESOURCES)
async def test_blank_id_patch_is_400_before_auth_and_body(client, resource):
    res = await client.patch(f"/api/{resource}/%20", json={})
    assert res.status_code == 400
    assert res.json()["error"]["message"] == "Missing id"


@pytest.mark.parametrize("resource", RESOURCES)
async def test_blank_id_with_auth_is_400(client, auth, resource):
    res = await client.get(f"/api/{resource}/%20", headers=auth(ALICE))
    assert res.status_code == 400


@pytest.mark.parametrize("resource", RESOURCES)
@pytest.mark.parametrize("method", ["GET", "DELETE"])
async def test_present_id_without_auth_is_401(client, resource, method):
    res = await client.request(method, f"/api/{resource}/some-id")
    assert res.status_code == 401


@pytest.mark.parametrize("resource", RESOURCES)
async def test_collection_auth_checked_before_body(client, resource):
    res = await client.post(f"/api/{resource}", json={"unexpected": True})
    assert res.status_code == 401


async def test_unauthenticated_delete_leaves_row(client, seed_account, fetch_scalar):
    account = await seed_account(ALICE)
    res = await client.delete(f"/api/accounts/{account.id}")
    assert res.status_code == 401
    assert await fetch_scalar(select(Account.id).where(Account.id == account.id)) == account.id


async def test_non_bearer_scheme_is_401(client, token_for):
    res = await client.get(
        "/api/accounts", headers={"Authorization": f"Basic {token_for(ALICE)}"},
    )
    assert res.status_code == 401


@pytest.mark.parametrize("resource", RESOURCES)
async def test_anonymous_malformed_json_is_400_json_invalid(
    client, resource, fetch_scalar,
):
    res = await client.post(
        f"/api/{resource}", content=MALFORMED, headers=JSON_HEADERS,
    )

    assert res.status_code == 400
    error = res.json()["error"]
    assert error["code"] == "VALIDATION_ERROR"
    assert [d["type"] for d in error["details"]] == ["json_invalid"]
    assert await fetch_scalar(select(func.count()).select_from(MODELS[resource])) == 0


async def test_authenticated_malformed_json_is_400(client, auth):
    res = await client.post(
        "/api/accounts/bulk-delete",
        content=MALFORMED,
        headers={**JSON_HEADERS, **auth(ALICE)},
    )
    assert res.status_code == 400
    assert res.json()["error"]["details"][0]["type"] == "json_invalid"


async def test_anonymous_schema_invalid_json_is_401(client):
    res = await client.post("/api/accounts/bulk-delete", json={"ids": "not-a-list"})
    assert res.status_code == 401
