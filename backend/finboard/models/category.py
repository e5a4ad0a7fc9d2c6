"""Category ORM — same shape and invariants as Account, distinct resource."""

from sqlalchemy import String, Text
from sqlalchemy.orm import Mapped, mapped_column

from finboard.db.base import Base


class Category(Base):
    """Category entity — owner-scoped."""
    __tablename__ = "categories"

    id: Mapped[str] = mapped_column(String(64), primary_key=True)
    user_id: Mapped[str] = mapped_column(
        String(255), nullable=False, index=True,
    )
    name: Mapped[str] = mapped_column(Text, nullable=False)
