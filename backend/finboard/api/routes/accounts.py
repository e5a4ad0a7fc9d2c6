"""Accounts — owner-scoped CRUD routes for /api/accounts.

Invariants:
    - Every route resolves the caller before touching the database
    - Create/update bodies are AccountInput (name only); owner and id are server-side
    - Bulk delete returns only the ids actually deleted (foreign ids skipped)

Design Decisions:
    - Routes are thin: validation by Pydantic, scoping by AccountRepository
    - 200 on create to keep every success response a plain {"data": ...}
"""

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from finboard.api.dependencies import (
    OwnedTarget, get_current_user_id, get_owned_target,
)
from finboard.core.domain_types import UserId
from finboard.infrastructure.database import get_db
from finboard.schemas.common import BulkDeleteRequest, DataEnvelope, DeletedId
from finboard.schemas.named import AccountInput, AccountRead
from finboard.services.resources import AccountRepository

router = APIRouter(prefix="/api/accounts", tags=["accounts"])


@router.get("", response_model=DataEnvelope[list[AccountRead]])
async def list_accounts(
    user_id: UserId = Depends(get_current_user_id),
    db: AsyncSession = Depends(get_db),
):
    """List the caller's accounts."""
    return {"data": await AccountRepository(db, user_id).list_all()}


@router.get("/{id}", response_model=DataEnvelope[AccountRead])
async def get_account(
    target: OwnedTarget = Depends(get_owned_target),
    db: AsyncSession = Depends(get_db),
):
    """Get one account; 404 when absent or owned by someone else."""
    repo = AccountRepository(db, target.user_id)
    return {"data": await repo.get_by_id(target.id)}


@router.post("", response_model=DataEnvelope[AccountRead])
async def create_account(
    body: AccountInput,
    user_id: UserId = Depends(get_current_user_id),
    db: AsyncSession = Depends(get_db),
):
    """Create an account owned by the caller."""
    return {"data": await AccountRepository(db, user_id).create(body)}


@router.post("/bulk-delete", response_model=DataEnvelope[list[DeletedId]])
async def bulk_delete_accounts(
    body: BulkDeleteRequest,
    user_id: UserId = Depends(get_current_user_id),
    db: AsyncSession = Depends(get_db),
):
    """Delete the listed accounts the caller owns."""
    return {"data": await AccountRepository(db, user_id).bulk_delete(body.ids)}


@router.patch("/{id}", response_model=DataEnvelope[AccountRead])
async def update_account(
    body: AccountInput,
    target: OwnedTarget = Depends(get_owned_target),
    db: AsyncSession = Depends(get_db),
):
    """Rename an account."""
    repo = AccountRepository(db, target.user_id)
    return {"data": await repo.update(target.id, body)}


@router.delete("/{id}", response_model=DataEnvelope[DeletedId])
async def delete_account(
    target: OwnedTarget = Depends(get_owned_target),
    db: AsyncSession = Depends(get_db),
):
    """Delete one account (its transactions cascade)."""
    repo = AccountRepository(db, target.user_id)
    return {"data": await repo.delete(target.id)}
