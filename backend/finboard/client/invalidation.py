"""Invalidation Table — which cached queries each mutation makes stale.

Invariants:
    - Every MutationKind has an entry (checked by tests)
    - TARGET_ID in a key is replaced by the mutated row's id; a kind whose keys
      use TARGET_ID cannot be invalidated without one
    - Account/category writes also invalidate transaction lists (they embed names)
    - Account/category deletes also invalidate every transaction detail: the
      server cascades (account) or nulls category_id (category) on those rows

Design Decisions:
    - Explicit table over implicit refetch-on-write: a new mutation with no
      entry fails loudly (KeyError) instead of silently leaving stale data
"""

from enum import Enum


class MutationKind(str, Enum):
    CREATE_ACCOUNT = "create_account"
    EDIT_ACCOUNT = "edit_account"
    DELETE_ACCOUNT = "delete_account"
    BULK_DELETE_ACCOUNTS = "bulk_delete_accounts"
    CREATE_CATEGORY = "create_category"
    EDIT_CATEGORY = "edit_category"
    DELETE_CATEGORY = "delete_category"
    BULK_DELETE_CATEGORIES = "bulk_delete_categories"
    CREATE_TRANSACTION = "create_transaction"
    EDIT_TRANSACTION = "edit_transaction"
    DELETE_TRANSACTION = "delete_transaction"
    BULK_DELETE_TRANSACTIONS = "bulk_delete_transactions"


TARGET_ID = "<target-id>"

INVALIDATIONS: dict[MutationKind, tuple[tuple, ...]] = {
    MutationKind.CREATE_ACCOUNT: (("accounts",),),
    MutationKind.EDIT_ACCOUNT: (
        ("account", TARGET_ID), ("accounts",), ("transactions",),
    ),
    MutationKind.DELETE_ACCOUNT: (
        ("account", TARGET_ID), ("accounts",),
        ("transaction",), ("transactions",),
    ),
    MutationKind.BULK_DELETE_ACCOUNTS: (
        ("account",), ("accounts",), ("transaction",), ("transactions",),
    ),
    MutationKind.CREATE_CATEGORY: (("categories",),),
    MutationKind.EDIT_CATEGORY: (
        ("category", TARGET_ID), ("categories",), ("transactions",),
    ),
    MutationKind.DELETE_CATEGORY: (
        ("category", TARGET_ID), ("categories",),
        ("transaction",), ("transactions",),
    ),
    MutationKind.BULK_DELETE_CATEGORIES: (
        ("category",), ("categories",), ("transaction",), ("transactions",),
    ),
    MutationKind.CREATE_TRANSACTION: (("transactions",),),
    MutationKind.EDIT_TRANSACTION: (
        ("transaction", TARGET_ID), ("transactions",),
    ),
    MutationKind.DELETE_TRANSACTION: (
        ("transaction", TARGET_ID), ("transactions",),
    ),
    MutationKind.BULK_DELETE_TRANSACTIONS: (
        ("transaction",), ("transactions",),
    ),
}


def invalidation_keys(
    kind: MutationKind, target_id: str | None = None,
) -> tuple[tuple, ...]:
    """Resolve the key prefixes to invalidate for one mutation."""
    keys = []
    for key in INVALIDATIONS[kind]:
        if TARGET_ID in key:
            if target_id is None:
                raise ValueError(f"{kind.value} invalidation requires a target id")
            key = tuple(target_id if part == TARGET_ID else part for part in key)
        keys.append(key)
    return tuple(keys)
