"""Account ORM — a named money container owned by one user.

Invariants:
    - id is a server-generated string primary key (never client-supplied)
    - user_id is the identity-provider subject of the owner, indexed for scoping
    - name is non-nullable text

Design Decisions:
    - String ids over native UUID columns: ids are opaque to clients and
      portable across Postgres and SQLite (tests)
"""

from sqlalchemy import String, Text
from sqlalchemy.orm import Mapped, mapped_column

from finboard.db.base import Base


class Account(Base):
    """Account entity — owner-scoped."""
    __tablename__ = "accounts"

    id: Mapped[str] = mapped_column(String(64), primary_key=True)
    user_id: Mapped[str] = mapped_column(
        String(255), nullable=False, index=True,
    )
    name: Mapped[str] = mapped_column(Text, nullable=False)
