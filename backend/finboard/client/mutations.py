"""Mutations — create / edit / delete / bulk-delete factories for every resource.

Invariants:
    - Payloads are validated locally against the server's whitelist schema;
      an invalid payload raises ClientValidationError and sends nothing
    - Transaction amounts go out as minor units (converted once, here) and
      come back as Decimal display values
    - A non-2xx response raises MutationError with a fixed message
      ("Failed to create account", "Failed to delete transactions", ...)
    - Each Mutation carries the MutationKind that selects its invalidation row
"""

from typing import Any

from pydantic import BaseModel

from finboard.client.api_client import FinboardApiClient, collection_path, item_path
from finboard.client.errors import ClientValidationError, MutationError
from finboard.client.invalidation import MutationKind
from finboard.client.queries import transaction_from_wire
from finboard.client.query_client import Mutation
from finboard.core.amounts import convert_amount_to_minor_units
from finboard.core.domain_types import ResourceKind
from finboard.core.validation import FieldError, Invalid, validate_input
from finboard.schemas.common import BulkDeleteRequest
from finboard.schemas.named import AccountInput, CategoryInput
from finboard.schemas.transaction import TransactionInput

_INPUT_SCHEMAS: dict[ResourceKind, type[BaseModel]] = {
    ResourceKind.ACCOUNT: AccountInput,
    ResourceKind.CATEGORY: CategoryInput,
    ResourceKind.TRANSACTION: TransactionInput,
}


def _validated(schema: type[BaseModel], payload: Any) -> dict:
    result = validate_input(schema, payload)
    if isinstance(result, Invalid):
        raise ClientValidationError(result.errors)
    return result.value.model_dump(mode="json")


def _to_wire(kind: ResourceKind, values: dict) -> dict:
    if kind is not ResourceKind.TRANSACTION or "amount" not in values:
        return values
    try:
        amount = convert_amount_to_minor_units(values["amount"])
    except (TypeError, ValueError) as e:
        raise ClientValidationError(
            (FieldError(field="amount", message=str(e), type="decimal_parsing"),),
        )
    return {**values, "amount": amount}


def _from_wire(kind: ResourceKind, row: dict) -> dict:
    if kind is ResourceKind.TRANSACTION:
        return transaction_from_wire(row)
    return row


def create_mutation(api: FinboardApiClient, kind: ResourceKind) -> Mutation:
    async def fn(values: dict) -> dict:
        body = _validated(_INPUT_SCHEMAS[kind], _to_wire(kind, values))
        response = await api.post(collection_path(kind), json=body)
        if not response.is_success:
            raise MutationError(f"Failed to create {kind.value}")
        return _from_wire(kind, response.json()["data"])
    return Mutation(kind=MutationKind(f"create_{kind.value}"), fn=fn)


def edit_mutation(
    api: FinboardApiClient, kind: ResourceKind, row_id: str,
) -> Mutation:
    async def fn(values: dict) -> dict:
        body = _validated(_INPUT_SCHEMAS[kind], _to_wire(kind, values))
        response = await api.patch(item_path(kind, row_id), json=body)
        if not response.is_success:
            raise MutationError(f"Failed to edit {kind.value}")
        return _from_wire(kind, response.json()["data"])
    return Mutation(
        kind=MutationKind(f"edit_{kind.value}"), fn=fn, target_id=row_id,
    )


def delete_mutation(
    api: FinboardApiClient, kind: ResourceKind, row_id: str,
) -> Mutation:
    async def fn(_: Any = None) -> dict:
        response = await api.delete(item_path(kind, row_id))
        if not response.is_success:
            raise MutationError(f"Failed to delete {kind.value}")
        return response.json()["data"]
    return Mutation(
        kind=MutationKind(f"delete_{kind.value}"), fn=fn, target_id=row_id,
    )


def bulk_delete_mutation(api: FinboardApiClient, kind: ResourceKind) -> Mutation:
    async def fn(ids: list[str]) -> list[dict]:
        body = _validated(BulkDeleteRequest, {"ids": ids})
        response = await api.post(f"{collection_path(kind)}/bulk-delete", json=body)
        if not response.is_success:
            raise MutationError(f"Failed to delete {kind.collection}")
        return response.json()["data"]
    return Mutation(kind=MutationKind(f"bulk_delete_{kind.collection}"), fn=fn)
