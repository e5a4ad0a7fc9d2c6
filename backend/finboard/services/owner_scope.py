"""Owner Scope — the single place the owner predicate is attached to a statement.

Invariants:
    - Every select/update/delete built through OwnerScope carries model.user_id == caller
    - Insert values always take user_id from the scope, overriding anything in values
    - No statement builder here accepts a user id from its arguments

Design Decisions:
    - Combinator object over ad hoc and_(...) at call sites: a handler cannot
      forget the filter because it never writes one
    - synchronize_session=False on writes: no ORM identity map is in play,
      rows come back through RETURNING
"""

from typing import Any, Iterable

from sqlalchemy import Delete, Insert, Select, Update, delete, insert, select, update

from finboard.core.domain_types import UserId


class OwnerScope:
    """Statement builders for one model, bound to one caller."""

    def __init__(self, model: Any, user_id: UserId):
        self.model = model
        self.user_id = user_id

    def predicate(self):
        return self.model.user_id == self.user_id

    def select(self, *columns) -> Select:
        return select(*columns).where(self.predicate())

    def select_by_id(self, row_id: str, *columns) -> Select:
        return self.select(*columns).where(self.model.id == row_id)

    def insert(self, values: dict) -> Insert:
        return insert(self.model).values({**values, "user_id": self.user_id})

    def update_by_id(self, row_id: str, values: dict) -> Update:
        return (
            update(self.model)
            .where(self.predicate(), self.model.id == row_id)
            .values(values)
            .execution_options(synchronize_session=False)
        )

    def delete_by_id(self, row_id: str) -> Delete:
        return (
            delete(self.model)
            .where(self.predicate(), self.model.id == row_id)
            .execution_options(synchronize_session=False)
        )

    def delete_by_ids(self, row_ids: Iterable[str]) -> Delete:
        return (
            delete(self.model)
            .where(self.predicate(), self.model.id.in_(list(row_ids)))
            .execution_options(synchronize_session=False)
        )
