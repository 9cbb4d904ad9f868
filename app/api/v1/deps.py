"""Request identity dependencies: token verification (get_current_identity) and the admin gate."""

import logging
from datetime import UTC, datetime
from typing import Annotated, Any

from fastapi import Depends, Path, Request
from fastapi.security import APIKeyHeader

from app.core.errors import AuthenticationError
from app.core.security import TokenError, decode_access_token
from app.models.base import MAX_INTEGER
from app.schemas.auth import RequestIdentity

logger = logging.getLogger(__name__)

# The client sends the raw token as the Authorization header value.
authorization_header = APIKeyHeader(name="Authorization", auto_error=False)

TOKEN_REQUIRED = "Token required"
INVALID_TOKEN = "Invalid or expired token"


def _extract_token(header_value: str | None) -> str | None:
    if not header_value or not header_value.strip():
        return None
    token = header_value.strip()
    # Tolerate clients that send the standard "Bearer <token>" form.
    scheme, _, rest = token.partition(" ")
    if rest and scheme.lower() == "bearer":
        token = rest.strip()
    return token or None


def _identity_from_claims(claims: dict[str, Any]) -> RequestIdentity:
    try:
        user_id = int(claims["sub"])
    except (KeyError, TypeError, ValueError):
        raise AuthenticationError(INVALID_TOKEN)
    role = claims.get("role")
    return RequestIdentity(
        user_id=user_id,
        role=role if isinstance(role, str) else None,
        issued_at=datetime.fromtimestamp(claims["iat"], UTC),
        expires_at=datetime.fromtimestamp(claims["exp"], UTC),
    )


def get_current_identity(
    request: Request,
    authorization: Annotated[str | None, Depends(authorization_header)],
) -> RequestIdentity:
    """
    Dependency: verify the request's token and return its identity.

    Missing header -> 401 "Token required". Malformed, tampered and expired
    tokens all -> 401 "Invalid or expired token"; which one is only logged.
    The identity is also stored on request.state for the rest of this request.
    """
    token = _extract_token(authorization)
    if token is None:
        raise AuthenticationError(TOKEN_REQUIRED)
    try:
        claims = decode_access_token(token)
    except TokenError as e:
        logger.info("Token rejected: %s", type(e).__name__)
        raise AuthenticationError(INVALID_TOKEN) from e
    identity = _identity_from_claims(claims)
    request.state.identity = identity
    return identity


def require_admin(
    identity: Annotated[RequestIdentity, Depends(get_current_identity)],
) -> RequestIdentity:
    """Dependency: require role 'admin'. Non-admins get the same 401 as a bad token."""
    if not identity.is_admin:
        logger.warning("Admin-only route refused for user_id=%s", identity.user_id)
        raise AuthenticationError(INVALID_TOKEN)
    return identity


CurrentIdentity = Annotated[RequestIdentity, Depends(get_current_identity)]
AdminIdentity = Annotated[RequestIdentity, Depends(require_admin)]
ResourceId = Annotated[int, Path(le=MAX_INTEGER)]
