"""Resource Repositories — per-resource declarations over the OwnedRepository template.

Invariants:
    - Accounts and categories project (id, name)
    - Transactions project (id, amount, payee, notes, date, account_id, category_id)
    - A transaction write referencing a foreign or missing account/category
      raises ResourceNotFoundError for that reference and writes nothing

Design Decisions:
    - Reference checks are reads through the referenced resource's own
      OwnerScope, so "foreign" and "missing" stay indistinguishable
    - Transaction listing joins account/category names (outer join for category)
      and orders newest first
"""

from typing import Any, Sequence

from finboard.core.domain_types import ResourceKind
from finboard.models.account import Account
from finboard.models.category import Category
from finboard.models.transaction import Transaction
from finboard.services.owned_repository import OwnedRepository
from finboard.services.owner_scope import OwnerScope


class AccountRepository(OwnedRepository):
    model = Account
    kind = ResourceKind.ACCOUNT


class CategoryRepository(OwnedRepository):
    model = Category
    kind = ResourceKind.CATEGORY


class TransactionRepository(OwnedRepository):
    model = Transaction
    kind = ResourceKind.TRANSACTION

    def projection(self) -> Sequence[Any]:
        return (
            Transaction.id,
            Transaction.amount,
            Transaction.payee,
            Transaction.notes,
            Transaction.date,
            Transaction.account_id,
            Transaction.category_id,
        )

    async def list_all(self, account_id: str | None = None) -> list[dict]:
        query = (
            self.scope.select(
                *self.projection(),
                Account.name.label("account"),
                Category.name.label("category"),
            )
            .join(Account, Transaction.account_id == Account.id)
            .outerjoin(Category, Transaction.category_id == Category.id)
            .order_by(Transaction.date.desc(), Transaction.id)
        )
        if account_id:
            query = query.where(Transaction.account_id == account_id)
        result = await self.db.execute(query)
        return [dict(row) for row in result.mappings().all()]

    async def _check_references(self, values: dict) -> None:
        await self._require_owned(
            AccountRepository, values["account_id"],
        )
        if values.get("category_id"):
            await self._require_owned(
                CategoryRepository, values["category_id"],
            )

    async def _require_owned(
        self, repository: type[OwnedRepository], row_id: str,
    ) -> None:
        scope = OwnerScope(repository.model, self.user_id)
        result = await self.db.execute(
            scope.select_by_id(row_id, repository.model.id),
        )
        if result.scalar_one_or_none() is None:
            raise repository(self.db, self.user_id)._not_found(row_id)
