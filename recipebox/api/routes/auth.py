"""Authentication API routes."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import Annotated

from litestar import Controller, Response, get, post
from litestar.params import Body
from litestar.status_codes import HTTP_200_OK, HTTP_201_CREATED

from recipebox.api.schemas.auth import (
    LoginRequest,
    LoginResponse,
    RegisterRequest,
    RegisterResponse,
    UserResponse,
)
from recipebox.api.services.auth import AuthService
from recipebox.core.config import Settings
from recipebox.core.exceptions import NotFoundError

logger = logging.getLogger(__name__)


class AuthController(Controller):
    """Authentication endpoints."""

    path = "/api/auth"
    tags: Sequence[str] | None = ["Authentication"]

    @post("/register", status_code=HTTP_201_CREATED)
    async def register(
        self,
        data: Annotated[RegisterRequest, Body()],
        auth_service: AuthService,
    ) -> Response[RegisterResponse]:
        """Register a new user account.

        Pass ``role: "admin"`` to register an administrator.
        """
        user = await auth_service.register(
            name=data.name,
            email=data.email,
            password=data.password,
            role=data.role,
        )

        return Response(
            content=RegisterResponse(
                message="User registered successfully",
                user=UserResponse.from_user(user.public()),
            ),
            status_code=HTTP_201_CREATED,
        )

    @post("/login", status_code=HTTP_200_OK)
    async def login(
        self,
        data: Annotated[LoginRequest, Body()],
        auth_service: AuthService,
    ) -> Response[LoginResponse]:
        """Authenticate user and return a bearer token.

        Unknown email and wrong password give the same response.
        """
        result = await auth_service.login(email=data.email, password=data.password)

        return Response(
            content=LoginResponse(
                message="Login successful",
                token=result.token,
                expires_in=result.expires_in,
                user=UserResponse.from_user(result.user.public()),
            ),
            status_code=HTTP_200_OK,
        )

    @get("/users")
    async def list_users(
        self,
        auth_service: AuthService,
        settings: Settings,
    ) -> list[UserResponse]:
        """List all users without password hashes.

        Debugging aid, only served when the API runs in debug mode.
        """
        if not settings.debug:
            raise NotFoundError("Not found")

        users = await auth_service.list_users()
        return [UserResponse.from_user(user) for user in users]
