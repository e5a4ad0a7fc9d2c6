"""Common Schemas — response envelope and shared request bodies.

Invariants:
    - Every success body is {"data": ...}
    - Bulk delete accepts only a list of string ids

Design Decisions:
    - Generic DataEnvelope: one envelope type reused as response_model for all routes
"""

from typing import Generic, TypeVar

from pydantic import BaseModel

T = TypeVar("T")


class DataEnvelope(BaseModel, Generic[T]):
    """Success envelope."""
    data: T


class BulkDeleteRequest(BaseModel):
    ids: list[str]


class DeletedId(BaseModel):
    id: str
