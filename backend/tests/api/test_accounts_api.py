"""Accounts API — owner-scoped CRUD over /api/accounts.

Invariants verified:
    - Another user's account answers 404 exactly like a missing one
    - Created ids are server-assigned even when the body carries an id
    - PATCH never changes id/owner; a foreign PATCH is 404 and leaves the row as-is
    - Bulk delete removes only owned ids and reports exactly those
"""

from sqlalchemy import select

from finboard.models import Account

ALICE = "user_alice"
BOB = "user_bob"


async def test_list_requires_auth(client):
    res = await client.get("/api/accounts")
    assert res.status_code == 401
    assert res.json()["error"]["code"] == "UNAUTHORIZED"


async def test_list_returns_only_callers_rows(client, auth, seed_account):
    mine = await seed_account(ALICE, "Checking")
    await seed_account(BOB, "Bob's Savings")

    res = await client.get("/api/accounts", headers=auth(ALICE))

    assert res.status_code == 200
    assert res.json() == {"data": [{"id": mine.id, "name": "Checking"}]}


async def test_list_projects_stable_fields(client, auth, seed_account):
    await seed_account(ALICE, "Cash")
    res = await client.get("/api/accounts", headers=auth(ALICE))
    assert set(res.json()["data"][0]) == {"id", "name"}


async def test_get_own_account(client, auth, seed_account):
    account = await seed_account(ALICE, "Checking")
    res = await client.get(f"/api/accounts/{account.id}", headers=auth(ALICE))
    assert res.status_code == 200
    assert res.json() == {"data": {"id": account.id, "name": "Checking"}}


async def test_get_foreign_account_is_indistinguishable_from_missing(
    client, auth, seed_account,
):
    foreign = await seed_account(BOB, "Bob's")

    foreign_res = await client.get(f"/api/accounts/{foreign.id}", headers=auth(ALICE))
    missing_res = await client.get("/api/accounts/does-not-exist", headers=auth(ALICE))

    assert foreign_res.status_code == missing_res.status_code == 404
    foreign_err = foreign_res.json()["error"]
    missing_err = missing_res.json()["error"]
    assert foreign_err["message"] == missing_err["message"] == "Account not found"
    assert "Bob's" not in foreign_res.text


async def test_create_assigns_server_id_and_owner(client, auth, fetch_scalar):
    res = await client.post(
        "/api/accounts",
        json={"name": "Savings", "id": "client-chosen", "user_id": BOB},
        headers=auth(ALICE),
    )

    assert res.status_code == 200
    data = res.json()["data"]
    assert data["name"] == "Savings"
    assert data["id"] != "client-chosen"
    owner = await fetch_scalar(select(Account.user_id).where(Account.id == data["id"]))
    assert owner == ALICE
    assert await fetch_scalar(select(Account.id).where(Account.id == "client-chosen")) is None


async def test_create_invalid_body_is_400_with_field_details(client, auth):
    res = await client.post("/api/accounts", json={"name": ""}, headers=auth(ALICE))
    assert res.status_code == 400
    error = res.json()["error"]
    assert error["code"] == "VALIDATION_ERROR"
    assert [d["field"] for d in error["details"]] == ["body.name"]


async def test_create_requires_auth(client):
    res = await client.post("/api/accounts", json={"name": "Savings"})
    assert res.status_code == 401


async def test_patch_renames_own_account(client, auth, seed_account):
    account = await seed_account(ALICE, "Old")
    res = await client.patch(
        f"/api/accounts/{account.id}", json={"name": "New"}, headers=auth(ALICE),
    )
    assert res.status_code == 200
    assert res.json() == {"data": {"id": account.id, "name": "New"}}


async def test_patch_ignores_id_and_owner_in_body(client, auth, seed_account, fetch_scalar):
    account = await seed_account(ALICE, "Old")

    res = await client.patch(
        f"/api/accounts/{account.id}",
        json={"name": "New", "id": "hijack", "user_id": BOB},
        headers=auth(ALICE),
    )

    assert res.status_code == 200
    assert res.json()["data"]["id"] == account.id
    owner = await fetch_scalar(select(Account.user_id).where(Account.id == account.id))
    assert owner == ALICE


async def test_patch_foreign_account_is_404_and_row_unchanged(
    client, auth, seed_account, fetch_scalar,
):
    foreign = await seed_account(BOB, "Bob's")

    res = await client.patch(
        f"/api/accounts/{foreign.id}", json={"name": "Pwned"}, headers=auth(ALICE),
    )

    assert res.status_code == 404
    name = await fetch_scalar(select(Account.name).where(Account.id == foreign.id))
    assert name == "Bob's"


async def test_delete_own_account(client, auth, seed_account, fetch_scalar):
    account = await seed_account(ALICE)
    res = await client.delete(f"/api/accounts/{account.id}", headers=auth(ALICE))
    assert res.status_code == 200
    assert res.json() == {"data": {"id": account.id}}
    assert await fetch_scalar(select(Account.id).where(Account.id == account.id)) is None


async def test_delete_foreign_account_is_404_and_row_kept(
    client, auth, seed_account, fetch_scalar,
):
    foreign = await seed_account(BOB)
    res = await client.delete(f"/api/accounts/{foreign.id}", headers=auth(ALICE))
    assert res.status_code == 404
    assert await fetch_scalar(select(Account.id).where(Account.id == foreign.id)) == foreign.id


async def test_delete_missing_account_is_404(client, auth):
    res = await client.delete("/api/accounts/nope", headers=auth(ALICE))
    assert res.status_code == 404


async def test_bulk_delete_skips_foreign_ids(client, auth, seed_account, fetch_scalar):
    owned = await seed_account(ALICE)
    foreign = await seed_account(BOB)

    res = await client.post(
        "/api/accounts/bulk-delete",
        json={"ids": [owned.id, foreign.id]},
        headers=auth(ALICE),
    )

    assert res.status_code == 200
    assert res.json() == {"data": [{"id": owned.id}]}
    assert await fetch_scalar(select(Account.id).where(Account.id == foreign.id)) == foreign.id


async def test_bulk_delete_unknown_ids_is_empty_success(client, auth):
    res = await client.post(
        "/api/accounts/bulk-delete", json={"ids": ["a", "b"]}, headers=auth(ALICE),
    )
    assert res.status_code == 200
    assert res.json() == {"data": []}


async def test_bulk_delete_empty_list(client, auth):
    res = await client.post(
        "/api/accounts/bulk-delete", json={"ids": []}, headers=auth(ALICE),
    )
    assert res.json() == {"data": []}


async def test_bulk_delete_requires_ids_list(client, auth):
    res = await client.post(
        "/api/accounts/bulk-delete", json={"ids": "a"}, headers=auth(ALICE),
    )
    assert res.status_code == 400


async def test_invalid_token_is_401(client):
    res = await client.get(
        "/api/accounts", headers={"Authorization": "Bearer not-a-token"},
    )
    assert res.status_code == 401


async def test_expired_token_is_401(client, token_for):
    from datetime import timedelta

    token = token_for(ALICE, expires_delta=timedelta(seconds=-1))
    res = await client.get(
        "/api/accounts", headers={"Authorization": f"Bearer {token}"},
    )
    assert res.status_code == 401
