"""Input Validation — schema-driven validation with a discriminated result.

Invariants:
    - validate_input never raises for bad input: it returns Valid or Invalid
    - Invalid always carries >= 1 FieldError
    - FieldError shape is shared by the API error handler and the client

Design Decisions:
    - Result type over exceptions at this seam: callers branch with isinstance
      and never need try/except around form input
    - Pydantic schemas remain the single source of the field whitelist
"""

from dataclasses import dataclass
from typing import Any, Generic, Iterable, TypeVar, Union

from pydantic import BaseModel, ValidationError

T = TypeVar("T", bound=BaseModel)


@dataclass(frozen=True)
class FieldError:
    """One structured validation failure."""
    field: str
    message: str
    type: str

    def to_dict(self) -> dict:
        return {"field": self.field, "message": self.message, "type": self.type}


@dataclass(frozen=True)
class Valid(Generic[T]):
    value: T


@dataclass(frozen=True)
class Invalid:
    errors: tuple[FieldError, ...]


ValidationResult = Union[Valid[T], Invalid]


def field_errors(errors: Iterable[dict]) -> tuple[FieldError, ...]:
    """Flatten pydantic error dicts (loc/msg/type) into FieldErrors."""
    return tuple(
        FieldError(
            field=".".join(str(loc) for loc in e["loc"]),
            message=e["msg"],
            type=e["type"],
        )
        for e in errors
    )


def validate_input(schema: type[T], payload: Any) -> ValidationResult:
    """Validate payload against schema. Pure, no IO."""
    try:
        return Valid(schema.model_validate(payload))
    except ValidationError as e:
        return Invalid(field_errors(e.errors()))
