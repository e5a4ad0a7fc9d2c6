"""Owned Repository — the CRUD template shared by every owner-scoped resource.

Invariants:
    - Every statement is built by OwnerScope (owner predicate always present)
    - Reads and writes return the resource's projection, never raw ORM rows
    - Each write method issues exactly one write statement, then commits
    - Absent and foreign rows both raise ResourceNotFoundError
    - bulk_delete is owner-filtered, not existence-checked: foreign or unknown
      ids are skipped and only the deleted ids are returned

Design Decisions:
    - Template-method class: subclasses declare model, kind and projection;
      transactions override list_all() and _check_references()
    - Ids assigned here (infrastructure/ids.py), never taken from input
"""

import logging
from typing import Any, ClassVar, Sequence

from pydantic import BaseModel
from sqlalchemy.ext.asyncio import AsyncSession

from finboard.core.domain_types import ResourceKind, UserId
from finboard.core.errors import ErrorContext, ResourceNotFoundError
from finboard.infrastructure.ids import new_id
from finboard.services.owner_scope import OwnerScope

logger = logging.getLogger(__name__)


class OwnedRepository:
    """Owner-scoped CRUD for one model, bound to one caller and one DB session."""

    model: ClassVar[Any]
    kind: ClassVar[ResourceKind]

    def __init__(self, db: AsyncSession, user_id: UserId):
        self.db = db
        self.user_id = user_id
        self.scope = OwnerScope(self.model, user_id)

    # ─── Projection ──────────────────────────────────────────────

    def projection(self) -> Sequence[Any]:
        """Columns exposed to callers. Override per resource."""
        return (self.model.id, self.model.name)

    def _not_found(self, row_id: str) -> ResourceNotFoundError:
        return ResourceNotFoundError(
            self.kind.label, row_id, ErrorContext(user_id=self.user_id),
        )

    def _log_extra(self, **fields: object) -> dict:
        return {"user_id": self.user_id, "resource": self.kind.value, **fields}

    # ─── Reads ───────────────────────────────────────────────────

    async def list_all(self) -> list[dict]:
        result = await self.db.execute(self.scope.select(*self.projection()))
        return [dict(row) for row in result.mappings().all()]

    async def get_by_id(self, row_id: str) -> dict:
        result = await self.db.execute(
            self.scope.select_by_id(row_id, *self.projection()),
        )
        row = result.mappings().one_or_none()
        if row is None:
            raise self._not_found(row_id)
        return dict(row)

    # ─── Writes ──────────────────────────────────────────────────

    async def create(self, body: BaseModel) -> dict:
        values = body.model_dump()
        await self._check_references(values)
        row_id = new_id()
        result = await self.db.execute(
            self.scope.insert({**values, "id": row_id})
            .returning(*self.projection()),
        )
        row = dict(result.mappings().one())
        await self.db.commit()
        logger.info(
            f"Created {self.kind.value} {row_id}",
            extra=self._log_extra(resource_id=row_id),
        )
        return row

    async def update(self, row_id: str, body: BaseModel) -> dict:
        values = body.model_dump()
        await self._check_references(values)
        result = await self.db.execute(
            self.scope.update_by_id(row_id, values)
            .returning(*self.projection()),
        )
        row = result.mappings().one_or_none()
        if row is None:
            await self.db.rollback()
            raise self._not_found(row_id)
        row = dict(row)
        await self.db.commit()
        logger.info(
            f"Updated {self.kind.value} {row_id}",
            extra=self._log_extra(resource_id=row_id),
        )
        return row

    async def delete(self, row_id: str) -> dict:
        result = await self.db.execute(
            self.scope.delete_by_id(row_id).returning(self.model.id),
        )
        row = result.mappings().one_or_none()
        if row is None:
            await self.db.rollback()
            raise self._not_found(row_id)
        row = dict(row)
        await self.db.commit()
        logger.info(
            f"Deleted {self.kind.value} {row_id}",
            extra=self._log_extra(resource_id=row_id),
        )
        return row

    async def bulk_delete(self, row_ids: list[str]) -> list[dict]:
        if not row_ids:
            return []
        result = await self.db.execute(
            self.scope.delete_by_ids(row_ids).returning(self.model.id),
        )
        rows = [dict(row) for row in result.mappings().all()]
        await self.db.commit()
        logger.info(
            f"Bulk deleted {len(rows)}/{len(row_ids)} {self.kind.collection}",
            extra=self._log_extra(count=len(rows)),
        )
        return rows

    # ─── Hooks ───────────────────────────────────────────────────

    async def _check_references(self, values: dict) -> None:
        """Verify referenced rows are owned by the caller. No-op by default."""
        return None
