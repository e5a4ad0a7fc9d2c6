"""Identity Generation — globally unique opaque ids for new rows."""

import uuid


def new_id() -> str:
    """Server-side id for a freshly created row (UUID4, canonical string form)."""
    return str(uuid.uuid4())
