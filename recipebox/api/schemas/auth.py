"""Authentication schemas using msgspec."""

from __future__ import annotations

import msgspec

from recipebox.db.models import PublicUser

# -----------------------------------------------------------------------------
# Request schemas
# -----------------------------------------------------------------------------


class RegisterRequest(msgspec.Struct, kw_only=True):
    """User registration request.

    Fields are optional here so that a missing field is reported by the
    service with the same error shape as an empty one.
    """

    name: str | None = None
    email: str | None = None
    password: str | None = None
    role: str | None = None


class LoginRequest(msgspec.Struct, kw_only=True):
    """User login request."""

    email: str | None = None
    password: str | None = None


# -----------------------------------------------------------------------------
# Response schemas
# -----------------------------------------------------------------------------


class UserResponse(msgspec.Struct, kw_only=True):
    """Public user info. Never carries the password hash."""

    id: int
    name: str
    email: str
    role: str

    @classmethod
    def from_user(cls, user: PublicUser) -> UserResponse:
        return cls(id=user.id, name=user.name, email=user.email, role=user.role.value)


class RegisterResponse(msgspec.Struct, kw_only=True):
    """Registration result."""

    message: str
    user: UserResponse


class LoginResponse(msgspec.Struct, kw_only=True):
    """Login result with the bearer token."""

    message: str
    token: str
    token_type: str = "bearer"
    expires_in: int  # Seconds until the token expires
    user: UserResponse


class MessageResponse(msgspec.Struct, kw_only=True):
    """Simple message response."""

    message: str


class ErrorResponse(msgspec.Struct, kw_only=True):
    """Error response.

    ``message`` is what the SPA shows; ``error`` is a stable code.
    """

    message: str
    error: str
