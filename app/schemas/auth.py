"""Request/response schemas for auth endpoints."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, EmailStr, Field


class RegisterRequest(BaseModel):
    """New account. email is required when accounts log in by email."""

    username: str = Field(..., min_length=1, max_length=255, description="Username")
    email: EmailStr | None = Field(default=None, description="Email address")
    password: str = Field(..., min_length=1, description="Password")


class LoginRequest(BaseModel):
    """Credentials for login; which identifier is read depends on IDENTITY_FIELD."""

    username: str | None = Field(default=None, max_length=255)
    email: str | None = Field(default=None, max_length=255)
    password: str = Field(..., min_length=1, description="Password")


class TokenResponse(BaseModel):
    """Signed access token returned after successful login."""

    token: str = Field(..., description="JWT access token; send it as the Authorization header")


class MessageResponse(BaseModel):
    message: str


class CurrentUserResponse(BaseModel):
    """The caller's own account (no password hash)."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    username: str
    email: str | None = None
    role: str


class RequestIdentity(BaseModel):
    """Verified token claims attached to a single request."""

    model_config = ConfigDict(frozen=True)

    user_id: int
    role: str | None = None
    issued_at: datetime
    expires_at: datetime

    @property
    def is_admin(self) -> bool:
        return self.role == "admin"
