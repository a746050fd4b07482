"""Authentication guards for Litestar routes."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING

from litestar.connection import ASGIConnection
from litestar.handlers import BaseRouteHandler

from recipebox.core.enums import UserRole
from recipebox.core.exceptions import ForbiddenError, TokenMissingError

if TYPE_CHECKING:
    from recipebox.api.security.jwt import JWTService, TokenClaims

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class AuthenticatedUser:
    """Represents an authenticated user in request scope.

    Built from verified token claims and injected into route handlers
    that require authentication.
    """

    id: int
    email: str
    name: str
    role: UserRole

    @classmethod
    def from_claims(cls, claims: TokenClaims) -> AuthenticatedUser:
        return cls(id=claims.user_id, email=claims.email, name=claims.name, role=claims.role)

    @property
    def is_admin(self) -> bool:
        return self.role == UserRole.ADMIN


def extract_token_from_header(authorization: str | None) -> str | None:
    """Extract bearer token from Authorization header.

    Args:
        authorization: Authorization header value.

    Returns:
        Token string if valid bearer token, None otherwise.
    """
    if not authorization:
        return None

    parts = authorization.split()
    return None if len(parts) != 2 or parts[0].lower() != "bearer" else parts[1]


async def auth_guard(connection: ASGIConnection, _: BaseRouteHandler) -> None:
    """Guard that requires valid JWT authentication.

    Extracts and validates JWT from Authorization header.
    Sets the verified identity in connection state for downstream handlers.

    Args:
        connection: ASGI connection.
        _: Route handler (unused).

    Raises:
        TokenMissingError: If no bearer token was sent.
        TokenInvalidError: If the token is invalid or expired.
    """
    authorization = connection.headers.get("authorization")
    token = extract_token_from_header(authorization)

    if not token:
        raise TokenMissingError("Access token required")

    # Get JWT service from app state
    jwt_service: JWTService | None = connection.app.state.get("jwt_service")
    if jwt_service is None:
        raise RuntimeError("JWT service not configured")

    claims = jwt_service.verify(token)

    connection.state["user_id"] = claims.user_id
    connection.state["auth_user"] = AuthenticatedUser.from_claims(claims)


async def admin_guard(connection: ASGIConnection, handler: BaseRouteHandler) -> None:
    """Guard that requires an authenticated admin.

    Runs ``auth_guard`` first when the identity is not yet in state.

    Raises:
        ForbiddenError: If the caller is not an admin.
    """
    if connection.state.get("auth_user") is None:
        await auth_guard(connection, handler)

    auth_user: AuthenticatedUser = connection.state["auth_user"]
    if not auth_user.is_admin:
        logger.info(f"Admin route refused for user {auth_user.id}")
        raise ForbiddenError("Insufficient permissions")
