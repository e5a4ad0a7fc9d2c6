"""ORM Models — SQLAlchemy declarative models for all domain entities.

Invariants:
    - All models inherit from Base (db/base.py)
    - Every entity carries a user_id owner column

Design Decisions:
    - One file per entity for locality
    - All models imported here so Base.metadata is complete before
      create_all / Alembic autogenerate runs
"""

from finboard.models.account import Account  # noqa: F401
from finboard.models.category import Category  # noqa: F401
from finboard.models.transaction import Transaction  # noqa: F401
