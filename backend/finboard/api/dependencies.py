"""Request Dependencies — caller identity and owned-target resolution for routes.

Invariants:
    - Absent, non-bearer or unverifiable credentials -> UnauthenticatedError (401)
    - On /{id} routes the id-presence check runs BEFORE authentication:
      blank id -> MissingIdError (400) even for anonymous callers
    - Both checks complete before any route body (and so any query) runs
    - On body routes FastAPI decodes the JSON first: malformed JSON -> 400
      json_invalid before authentication; well-formed JSON that fails the
      schema -> 401 first for anonymous callers

Design Decisions:
    - HTTPBearer(auto_error=False): FastAPI's own 403 for a missing header is
      replaced by the uniform 401 envelope
    - One dependency (get_owned_target) performs both checks so their order is
      explicit in code rather than implied by parameter order
"""

from dataclasses import dataclass

from fastapi import Depends, Path
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from finboard.config import Settings, get_settings
from finboard.core.domain_types import UserId
from finboard.core.errors import MissingIdError, UnauthenticatedError
from finboard.infrastructure.auth import decode_user_id

_bearer = HTTPBearer(auto_error=False)


@dataclass(frozen=True)
class OwnedTarget:
    """Authenticated caller plus the validated path id."""
    user_id: UserId
    id: str


def resolve_user_id(
    credentials: HTTPAuthorizationCredentials | None, settings: Settings,
) -> UserId:
    if credentials is None or not credentials.credentials:
        raise UnauthenticatedError()
    user_id = decode_user_id(credentials.credentials, settings)
    if user_id is None:
        raise UnauthenticatedError()
    return user_id


async def get_current_user_id(
    credentials: HTTPAuthorizationCredentials | None = Depends(_bearer),
    settings: Settings = Depends(get_settings),
) -> UserId:
    """Caller identity for collection routes (list, create, bulk-delete)."""
    return resolve_user_id(credentials, settings)


async def get_owned_target(
    id: str = Path(...),
    credentials: HTTPAuthorizationCredentials | None = Depends(_bearer),
    settings: Settings = Depends(get_settings),
) -> OwnedTarget:
    """Id presence first, then caller identity."""
    if not id.strip():
        raise MissingIdError()
    return OwnedTarget(
        user_id=resolve_user_id(credentials, settings), id=id,
    )
