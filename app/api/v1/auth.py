"""Registration, login and the caller's own account (GET /user)."""

import logging
from typing import Annotated

from fastapi import APIRouter, Depends, status
from sqlalchemy import or_
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from app.api.v1.deps import INVALID_TOKEN, CurrentIdentity
from app.core.config import settings
from app.core.database import get_db
from app.core.errors import (
    AuthenticationError,
    ConflictError,
    InternalError,
    InvalidRequestError,
)
from app.core.security import (
    create_access_token,
    hash_password,
    verify_password,
    verify_password_dummy,
)
from app.models.user import User
from app.schemas.auth import (
    CurrentUserResponse,
    LoginRequest,
    MessageResponse,
    RegisterRequest,
    TokenResponse,
)

logger = logging.getLogger(__name__)
router = APIRouter()

INVALID_CREDENTIALS = "Invalid credentials"
ALREADY_TAKEN = "Username or email already taken"


def _validate_password(password: str) -> None:
    if not (settings.PASSWORD_MIN_LENGTH <= len(password) <= settings.PASSWORD_MAX_LENGTH):
        raise InvalidRequestError(
            f"Password must be {settings.PASSWORD_MIN_LENGTH}-"
            f"{settings.PASSWORD_MAX_LENGTH} characters."
        )


@router.post("/register", response_model=MessageResponse, status_code=status.HTTP_201_CREATED)
def register(
    body: RegisterRequest,
    db: Annotated[Session, Depends(get_db)],
) -> MessageResponse:
    """
    Create an account. The password is stored only as a bcrypt hash.

    Duplicate username or email -> 400 with one message for both cases.
    """
    username = body.username.strip()
    if not username:
        raise InvalidRequestError("All fields are required")
    if settings.IDENTITY_FIELD == "email" and body.email is None:
        raise InvalidRequestError("All fields are required")
    _validate_password(body.password)
    email = body.email.lower() if body.email else None

    clauses = [User.username == username]
    if email is not None:
        clauses.append(User.email == email)
    if db.query(User.id).filter(or_(*clauses)).first() is not None:
        raise ConflictError(ALREADY_TAKEN)

    try:
        password_hash = hash_password(body.password)
    except (ValueError, TypeError, MemoryError) as e:
        logger.error("Password hashing failed: %s", type(e).__name__)
        raise InternalError() from e

    user = User(username=username, email=email, password_hash=password_hash, role="user")
    db.add(user)
    try:
        db.commit()
    except IntegrityError as e:
        # Concurrent registration passed the pre-check; the unique index decides.
        db.rollback()
        raise ConflictError(ALREADY_TAKEN) from e
    logger.info("Registered user_id=%s", user.id)
    return MessageResponse(message="User registered successfully")


@router.post("/login", response_model=TokenResponse)
def login(
    body: LoginRequest,
    db: Annotated[Session, Depends(get_db)],
) -> TokenResponse:
    """
    Authenticate with the configured identifier (username or email) and password.

    Returns a token valid for JWT_EXPIRE_MINUTES. Send it back verbatim as the
    Authorization header. Unknown account and wrong password give the same 401.
    """
    if settings.IDENTITY_FIELD == "email":
        identifier = (body.email or "").strip().lower()
        column = User.email
    else:
        identifier = (body.username or "").strip()
        column = User.username
    if not identifier:
        raise InvalidRequestError(
            f"{settings.IDENTITY_FIELD.capitalize()} and password are required"
        )

    user = db.query(User).filter(column == identifier).first()
    if user is None:
        verify_password_dummy(body.password)
        logger.info("Login failed")
        raise AuthenticationError(INVALID_CREDENTIALS)
    if not verify_password(body.password, user.password_hash):
        logger.info("Login failed")
        raise AuthenticationError(INVALID_CREDENTIALS)

    token = create_access_token(user.id, extra_claims={"role": user.role})
    logger.info("Issued token for user_id=%s", user.id)
    return TokenResponse(token=token)


@router.get("/user", response_model=CurrentUserResponse)
def get_user(
    identity: CurrentIdentity,
    db: Annotated[Session, Depends(get_db)],
) -> CurrentUserResponse:
    """Return the caller's id, username, email and role."""
    user = db.query(User).filter(User.id == identity.user_id).first()
    if user is None:
        # Token outlived its account.
        raise AuthenticationError(INVALID_TOKEN)
    return CurrentUserResponse.model_validate(user)
