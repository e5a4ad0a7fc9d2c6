"""Transactions — owner-scoped CRUD routes for /api/transactions.

Invariants:
    - Amounts travel as integer minor units in both directions
    - Writes referencing a foreign/missing account or category answer 404
      for that reference and leave the database untouched
    - List rows carry joined account and category names, newest first

Design Decisions:
    - Optional ?account_id= filter on list: the account detail view needs it,
      and it is applied on top of (never instead of) the owner filter
"""

from fastapi import APIRouter, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession

from finboard.api.dependencies import (
    OwnedTarget, get_current_user_id, get_owned_target,
)
from finboard.core.domain_types import UserId
from finboard.infrastructure.database import get_db
from finboard.schemas.common import BulkDeleteRequest, DataEnvelope, DeletedId
from finboard.schemas.transaction import (
    TransactionInput, TransactionListItem, TransactionRead,
)
from finboard.services.resources import TransactionRepository

router = APIRouter(prefix="/api/transactions", tags=["transactions"])


@router.get("", response_model=DataEnvelope[list[TransactionListItem]])
async def list_transactions(
    account_id: str | None = Query(None),
    user_id: UserId = Depends(get_current_user_id),
    db: AsyncSession = Depends(get_db),
):
    """List the caller's transactions, optionally for one account."""
    repo = TransactionRepository(db, user_id)
    return {"data": await repo.list_all(account_id=account_id)}


@router.get("/{id}", response_model=DataEnvelope[TransactionRead])
async def get_transaction(
    target: OwnedTarget = Depends(get_owned_target),
    db: AsyncSession = Depends(get_db),
):
    """Get one transaction; 404 when absent or owned by someone else."""
    repo = TransactionRepository(db, target.user_id)
    return {"data": await repo.get_by_id(target.id)}


@router.post("", response_model=DataEnvelope[TransactionRead])
async def create_transaction(
    body: TransactionInput,
    user_id: UserId = Depends(get_current_user_id),
    db: AsyncSession = Depends(get_db),
):
    """Create a transaction on one of the caller's accounts."""
    return {"data": await TransactionRepository(db, user_id).create(body)}


@router.post("/bulk-delete", response_model=DataEnvelope[list[DeletedId]])
async def bulk_delete_transactions(
    body: BulkDeleteRequest,
    user_id: UserId = Depends(get_current_user_id),
    db: AsyncSession = Depends(get_db),
):
    """Delete the listed transactions the caller owns."""
    repo = TransactionRepository(db, user_id)
    return {"data": await repo.bulk_delete(body.ids)}


@router.patch("/{id}", response_model=DataEnvelope[TransactionRead])
async def update_transaction(
    body: TransactionInput,
    target: OwnedTarget = Depends(get_owned_target),
    db: AsyncSession = Depends(get_db),
):
    """Replace a transaction's fields; references must stay owned."""
    repo = TransactionRepository(db, target.user_id)
    return {"data": await repo.update(target.id, body)}


@router.delete("/{id}", response_model=DataEnvelope[DeletedId])
async def delete_transaction(
    target: OwnedTarget = Depends(get_owned_target),
    db: AsyncSession = Depends(get_db),
):
    """Delete one transaction."""
    repo = TransactionRepository(db, target.user_id)
    return {"data": await repo.delete(target.id)}
