"""Password hashing and JWT creation/verification for authentication."""

from datetime import UTC, datetime, timedelta
from functools import lru_cache
from typing import Any

import bcrypt
import jwt

from app.core.config import settings

# bcrypt only looks at the first 72 bytes of its input.
BCRYPT_MAX_BYTES = 72

# Claims owned by the token service; extra claims may not replace them.
RESERVED_CLAIMS = frozenset({"sub", "iat", "exp"})


class TokenError(Exception):
    """Base class for token verification failures."""

    def __init__(self, message: str, cause: Exception | None = None) -> None:
        self.message = message
        self.cause = cause
        super().__init__(message)


class MalformedTokenError(TokenError):
    """Token is not a parseable JWT or lacks required claims."""


class BadSignatureError(TokenError):
    """Signature does not match (tampered token or wrong secret)."""


class TokenExpiredError(TokenError):
    """Current time is at or past the token's exp claim."""


def _password_bytes(plain_password: str) -> bytes:
    return plain_password.encode("utf-8")[:BCRYPT_MAX_BYTES]


def hash_password(plain_password: str) -> str:
    """Hash a plain-text password for storage. Do not store plain passwords."""
    salt = bcrypt.gensalt(rounds=settings.BCRYPT_ROUNDS)
    return bcrypt.hashpw(_password_bytes(plain_password), salt).decode("utf-8")


def verify_password(plain_password: str, hashed: str) -> bool:
    """Verify a plain password against a stored hash."""
    try:
        return bcrypt.checkpw(_password_bytes(plain_password), hashed.encode("utf-8"))
    except (ValueError, TypeError):
        return False


@lru_cache
def _dummy_hash() -> str:
    return hash_password("dummy-password-for-timing")


def verify_password_dummy(plain_password: str) -> None:
    """
    Spend one bcrypt verification on a throwaway hash.

    Called when no account matches a login so the response takes as long as
    a wrong-password response.
    """
    verify_password(plain_password, _dummy_hash())


def create_access_token(
    subject: str | int,
    extra_claims: dict[str, Any] | None = None,
    ttl: timedelta | None = None,
    now: datetime | None = None,
) -> str:
    """Create a signed JWT with sub, iat, exp and any extra claims (e.g. role)."""
    issued_at = now or datetime.now(UTC)
    if ttl is None:
        ttl = timedelta(minutes=settings.JWT_EXPIRE_MINUTES)
    payload: dict[str, Any] = {
        k: v for k, v in (extra_claims or {}).items() if k not in RESERVED_CLAIMS
    }
    payload.update(
        {
            "sub": str(subject),
            "iat": issued_at,
            "exp": issued_at + ttl,
        }
    )
    secret = settings.JWT_SECRET.get_secret_value()
    return jwt.encode(payload, secret, algorithm=settings.JWT_ALGORITHM)


def decode_access_token(token: str) -> dict[str, Any]:
    """
    Decode and validate JWT; return payload (sub, iat, exp and extra claims).

    Raises TokenExpiredError, BadSignatureError or MalformedTokenError.
    """
    secret = settings.JWT_SECRET.get_secret_value()
    try:
        return jwt.decode(
            token,
            secret,
            algorithms=[settings.JWT_ALGORITHM],
            options={"require": ["sub", "iat", "exp"]},
        )
    except jwt.ExpiredSignatureError as e:
        raise TokenExpiredError("Token has expired", e) from e
    except jwt.InvalidSignatureError as e:
        raise BadSignatureError("Token signature verification failed", e) from e
    except jwt.PyJWTError as e:
        raise MalformedTokenError("Token could not be decoded", e) from e
