"""Named Resource Schemas — accounts and categories share one whitelist shape.

Invariants:
    - NamedResourceInput.name: 1-255 chars, stripped, non-empty
    - Unknown fields (id, user_id, ...) are dropped, never rejected or stored

Design Decisions:
    - extra="ignore" mirrors a pick() whitelist: the body may carry anything,
      only whitelisted fields survive validation
"""

from pydantic import BaseModel, ConfigDict, Field, field_validator


class NamedResourceInput(BaseModel):
    """Create/update body for accounts and categories."""
    model_config = ConfigDict(extra="ignore")

    name: str = Field(min_length=1, max_length=255)

    @field_validator("name")
    @classmethod
    def strip_name(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("name cannot be empty or whitespace")
        return v


class NamedResourceRead(BaseModel):
    """Projected account/category row."""
    id: str
    name: str


AccountInput = NamedResourceInput
AccountRead = NamedResourceRead
CategoryInput = NamedResourceInput
CategoryRead = NamedResourceRead
