"""Identity Provider Boundary — verifies bearer tokens and yields the caller's UserId.

Invariants:
    - decode_user_id returns a UserId or None; it never raises for bad tokens
    - The `sub` claim is the only source of caller identity
    - Expired, malformed, wrongly-signed or audience-mismatched tokens are all None

Design Decisions:
    - python-jose for JWT verification (HS256 shared secret with the provider)
    - create_access_token exists for local development and tests; production
      tokens are minted by the identity provider
"""

import logging
from datetime import datetime, timedelta, timezone

from jose import JWTError, jwt

from finboard.config import Settings
from finboard.core.domain_types import UserId

logger = logging.getLogger(__name__)


def create_access_token(
    user_id: str,
    settings: Settings,
    expires_delta: timedelta | None = None,
) -> str:
    """Mint a signed token for user_id."""
    expire = datetime.now(timezone.utc) + (
        expires_delta or timedelta(minutes=settings.access_token_expire_minutes)
    )
    claims: dict = {"sub": user_id, "exp": expire}
    if settings.auth_audience:
        claims["aud"] = settings.auth_audience
    return jwt.encode(
        claims, settings.auth_secret_key, algorithm=settings.auth_algorithm,
    )


def decode_user_id(token: str, settings: Settings) -> UserId | None:
    """Verify token and return its subject, or None when it is not acceptable."""
    options = {"verify_aud": settings.auth_audience is not None}
    try:
        payload = jwt.decode(
            token,
            settings.auth_secret_key,
            algorithms=[settings.auth_algorithm],
            audience=settings.auth_audience,
            options=options,
        )
    except JWTError as e:
        logger.warning(f"Rejected bearer token: {e}")
        return None
    subject = payload.get("sub")
    if not isinstance(subject, str) or not subject:
        return None
    return UserId(subject)
