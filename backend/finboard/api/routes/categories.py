"""Categories — owner-scoped CRUD routes for /api/categories (same contract as accounts)."""

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from finboard.api.dependencies import (
    OwnedTarget, get_current_user_id, get_owned_target,
)
from finboard.core.domain_types import UserId
from finboard.infrastructure.database import get_db
from finboard.schemas.common import BulkDeleteRequest, DataEnvelope, DeletedId
from finboard.schemas.named import CategoryInput, CategoryRead
from finboard.services.resources import CategoryRepository

router = APIRouter(prefix="/api/categories", tags=["categories"])


@router.get("", response_model=DataEnvelope[list[CategoryRead]])
async def list_categories(
    user_id: UserId = Depends(get_current_user_id),
    db: AsyncSession = Depends(get_db),
):
    """List the caller's categories."""
    return {"data": await CategoryRepository(db, user_id).list_all()}


@router.get("/{id}", response_model=DataEnvelope[CategoryRead])
async def get_category(
    target: OwnedTarget = Depends(get_owned_target),
    db: AsyncSession = Depends(get_db),
):
    """Get one category; 404 when absent or owned by someone else."""
    repo = CategoryRepository(db, target.user_id)
    return {"data": await repo.get_by_id(target.id)}


@router.post("", response_model=DataEnvelope[CategoryRead])
async def create_category(
    body: CategoryInput,
    user_id: UserId = Depends(get_current_user_id),
    db: AsyncSession = Depends(get_db),
):
    """Create a category owned by the caller."""
    return {"data": await CategoryRepository(db, user_id).create(body)}


@router.post("/bulk-delete", response_model=DataEnvelope[list[DeletedId]])
async def bulk_delete_categories(
    body: BulkDeleteRequest,
    user_id: UserId = Depends(get_current_user_id),
    db: AsyncSession = Depends(get_db),
):
    """Delete the listed categories the caller owns."""
    return {"data": await CategoryRepository(db, user_id).bulk_delete(body.ids)}


@router.patch("/{id}", response_model=DataEnvelope[CategoryRead])
async def update_category(
    body: CategoryInput,
    target: OwnedTarget = Depends(get_owned_target),
    db: AsyncSession = Depends(get_db),
):
    """Rename a category."""
    repo = CategoryRepository(db, target.user_id)
    return {"data": await repo.update(target.id, body)}


@router.delete("/{id}", response_model=DataEnvelope[DeletedId])
async def delete_category(
    target: OwnedTarget = Depends(get_owned_target),
    db: AsyncSession = Depends(get_db),
):
    """Delete one category (its transactions become uncategorized)."""
    repo = CategoryRepository(db, target.user_id)
    return {"data": await repo.delete(target.id)}
