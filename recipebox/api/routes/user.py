"""User profile and admin API routes."""

from __future__ import annotations

import logging
from collections.abc import Sequence

from litestar import Controller, Request, get
from litestar.di import Provide

from recipebox.api.schemas.auth import UserResponse
from recipebox.api.security import AuthenticatedUser, admin_guard, auth_guard
from recipebox.api.services.auth import AuthService
from recipebox.core.exceptions import TokenMissingError

logger = logging.getLogger(__name__)


async def get_current_user(request: Request) -> AuthenticatedUser:
    """Extract the verified identity from request state.

    Args:
        request: Litestar request.

    Returns:
        Identity attached by ``auth_guard``.

    Raises:
        TokenMissingError: If the route ran without authentication.
    """
    auth_user = request.state.get("auth_user")
    if auth_user is None:
        raise TokenMissingError("Access token required")
    return auth_user


class ProfileController(Controller):
    """Current user's profile."""

    path = "/api/profile"
    tags: Sequence[str] | None = ["Users"]
    guards = [auth_guard]
    dependencies = {"current_user": Provide(get_current_user)}

    @get("/")
    async def get_profile(
        self,
        current_user: AuthenticatedUser,
        auth_service: AuthService,
    ) -> UserResponse:
        """Get current user's profile."""
        profile = await auth_service.get_profile(current_user.id)
        return UserResponse.from_user(profile)


class AdminController(Controller):
    """Administrator-only endpoints."""

    path = "/api/admin"
    tags: Sequence[str] | None = ["Admin"]
    guards = [auth_guard, admin_guard]

    @get("/users")
    async def list_users(self, auth_service: AuthService) -> list[UserResponse]:
        """List all users without password hashes."""
        users = await auth_service.list_users()
        return [UserResponse.from_user(user) for user in users]
