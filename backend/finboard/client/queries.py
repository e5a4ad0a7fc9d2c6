"""Queries — one Query factory per read endpoint.

Invariants:
    - Detail queries are disabled (idle) until their id is present
    - A non-2xx response raises QueryError with the fixed per-query message
    - Transaction amounts are converted from minor units exactly once, right
      after the envelope is unwrapped
"""

from typing import Any

from finboard.client.api_client import FinboardApiClient, collection_path, item_path
from finboard.client.errors import QueryError
from finboard.client.query_client import Query
from finboard.core.amounts import convert_amount_from_minor_units
from finboard.core.domain_types import ResourceKind


async def _fetch_data(
    api: FinboardApiClient, path: str, message: str, params: dict | None = None,
) -> Any:
    response = await api.get(path, params=params)
    if not response.is_success:
        raise QueryError(message)
    return response.json()["data"]


def transaction_from_wire(row: dict) -> dict:
    """Wire row (minor units) -> display row (Decimal amount)."""
    return {**row, "amount": convert_amount_from_minor_units(row["amount"])}


# ─── Accounts ────────────────────────────────────────────────────

def accounts_query(api: FinboardApiClient) -> Query:
    async def fn():
        return await _fetch_data(
            api, collection_path(ResourceKind.ACCOUNT), "Failed to fetch accounts",
        )
    return Query(key=("accounts",), fn=fn)


def account_query(api: FinboardApiClient, row_id: str | None) -> Query:
    async def fn():
        return await _fetch_data(
            api, item_path(ResourceKind.ACCOUNT, row_id), "Failed to fetch account",
        )
    return Query(key=("account", row_id), fn=fn, enabled=bool(row_id))


# ─── Categories ──────────────────────────────────────────────────

def categories_query(api: FinboardApiClient) -> Query:
    async def fn():
        return await _fetch_data(
            api, collection_path(ResourceKind.CATEGORY), "Failed to fetch categories",
        )
    return Query(key=("categories",), fn=fn)


def category_query(api: FinboardApiClient, row_id: str | None) -> Query:
    async def fn():
        return await _fetch_data(
            api, item_path(ResourceKind.CATEGORY, row_id), "Failed to fetch category",
        )
    return Query(key=("category", row_id), fn=fn, enabled=bool(row_id))


# ─── Transactions ────────────────────────────────────────────────

def transactions_query(
    api: FinboardApiClient, account_id: str | None = None,
) -> Query:
    async def fn():
        params = {"account_id": account_id} if account_id else None
        rows = await _fetch_data(
            api,
            collection_path(ResourceKind.TRANSACTION),
            "Failed to fetch transactions",
            params=params,
        )
        return [transaction_from_wire(row) for row in rows]
    return Query(key=("transactions", account_id), fn=fn)


def transaction_query(api: FinboardApiClient, row_id: str | None) -> Query:
    async def fn():
        row = await _fetch_data(
            api,
            item_path(ResourceKind.TRANSACTION, row_id),
            "Failed to fetch transaction",
        )
        return transaction_from_wire(row)
    return Query(key=("transaction", row_id), fn=fn, enabled=bool(row_id))
