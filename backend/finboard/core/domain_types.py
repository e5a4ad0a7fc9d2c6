"""Domain Types — rich types that replace bare primitives across the codebase.

Invariants:
    - UserId is the identity-provider subject; never taken from a request body
    - AccountId, CategoryId, TransactionId are server-generated opaque strings
    - MinorUnits is an integer count of the smallest currency unit
    - All resource kinds encoded as an Enum — no raw string matching

Design Decisions:
    - NewType over dataclass wrappers: zero runtime cost, full type-checker support
    - str Enums: serialize to JSON and log extras without custom encoders
"""

from enum import Enum
from typing import NewType


# ─── Identity Types ──────────────────────────────────────────────

UserId = NewType("UserId", str)
AccountId = NewType("AccountId", str)
CategoryId = NewType("CategoryId", str)
TransactionId = NewType("TransactionId", str)


# ─── Value Types ─────────────────────────────────────────────────

MinorUnits = NewType("MinorUnits", int)   # 1 unit == MINOR_UNITS_PER_UNIT


# ─── Enums ───────────────────────────────────────────────────────

class ResourceKind(str, Enum):
    """Owner-scoped resources exposed by the API."""
    ACCOUNT = "account"
    CATEGORY = "category"
    TRANSACTION = "transaction"

    @property
    def label(self) -> str:
        """Human label used in error messages ("Account not found")."""
        return self.value.capitalize()

    @property
    def collection(self) -> str:
        """Plural path segment and list cache key."""
        return "categories" if self is ResourceKind.CATEGORY else f"{self.value}s"
