"""Authentication service for user registration and login."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import TYPE_CHECKING

from anyio import to_thread

from recipebox.api.security import JWTService, PasswordService, TokenClaims
from recipebox.core.enums import UserRole
from recipebox.core.exceptions import (
    AuthenticationError,
    DuplicateEmailError,
    NotFoundError,
    ValidationError,
)

if TYPE_CHECKING:
    from collections.abc import Sequence

    from recipebox.db.models import PublicUser, UserRecord
    from recipebox.db.repositories import UserRepository

logger = logging.getLogger(__name__)

INVALID_CREDENTIALS_MESSAGE = "Invalid email or password"


@dataclass
class LoginResult:
    """Authenticated user and the access token issued to them."""

    user: UserRecord
    token: str
    expires_at: datetime
    expires_in: int


class AuthService:
    """Authentication service.

    Handles user registration and login. Tokens are stateless and expire
    on their own; there is no logout or refresh.
    """

    def __init__(
        self,
        repository: UserRepository,
        jwt_service: JWTService,
        password_service: PasswordService,
        *,
        allow_admin_registration: bool = True,
    ) -> None:
        """Initialize auth service.

        Args:
            repository: User repository.
            jwt_service: JWT token service.
            password_service: Password hashing service.
            allow_admin_registration: Honour ``role="admin"`` on register.
        """
        self._repo = repository
        self._jwt = jwt_service
        self._password = password_service
        self._allow_admin_registration = allow_admin_registration

    async def register(
        self,
        *,
        name: str | None,
        email: str | None,
        password: str | None,
        role: str | None = None,
    ) -> UserRecord:
        """Register a new user.

        Args:
            name: Display name.
            email: User email, stored exactly as given.
            password: Plain text password.
            role: ``"admin"`` to request the admin role; anything else
                gives a regular user.

        Returns:
            Created user record.

        Raises:
            ValidationError: If a required field is missing.
            DuplicateEmailError: If email is taken.
        """
        if not name or not email or not password:
            raise ValidationError("All fields are required")

        granted_role = UserRole.USER
        if role == UserRole.ADMIN.value:
            if self._allow_admin_registration:
                granted_role = UserRole.ADMIN
            else:
                logger.warning(f"Admin role requested at registration for {email}, ignored")

        # Cheap pre-check so a duplicate does not pay for a hash.
        # The repository repeats the check atomically with the insert.
        if await self._repo.get_by_email(email) is not None:
            raise DuplicateEmailError("Email already in use")

        password_hash = await to_thread.run_sync(self._password.hash, password)

        user = await self._repo.create(
            name=name,
            email=email,
            password_hash=password_hash,
            role=granted_role,
        )

        logger.info(f"User registered: {user.id} ({user.email}) role={user.role.value}")

        return user

    async def login(
        self,
        *,
        email: str | None,
        password: str | None,
    ) -> LoginResult:
        """Authenticate user and return an access token.

        Args:
            email: User email.
            password: Plain text password.

        Returns:
            LoginResult with the user and the signed token.

        Raises:
            ValidationError: If email or password is missing.
            AuthenticationError: If email or password is wrong.
        """
        if not email or not password:
            raise ValidationError("Email and password are required")

        user = await self._repo.get_by_email(email)

        if user is None:
            # Prevent timing attacks
            await to_thread.run_sync(self._password.hash, "dummy_password")
            logger.info("Login failed: unknown email")
            raise AuthenticationError(INVALID_CREDENTIALS_MESSAGE)

        if not await to_thread.run_sync(self._password.verify, user.password_hash, password):
            logger.info(f"Login failed: wrong password for user {user.id}")
            raise AuthenticationError(INVALID_CREDENTIALS_MESSAGE)

        # Upgrade hashes made with older cost parameters
        if self._password.needs_rehash(user.password_hash):
            new_hash = await to_thread.run_sync(self._password.hash, password)
            await self._repo.update_password_hash(user.id, new_hash)
            logger.info(f"Rehashed password for user {user.id}")

        claims = TokenClaims(
            user_id=user.id,
            email=user.email,
            name=user.name,
            role=user.role,
        )
        issued_at = datetime.now(timezone.utc).replace(microsecond=0)
        token = self._jwt.issue(claims, now=issued_at)

        logger.info(f"User logged in: {user.id}")

        return LoginResult(
            user=user,
            token=token,
            expires_at=issued_at + self._jwt.access_token_lifetime,
            expires_in=int(self._jwt.access_token_lifetime.total_seconds()),
        )

    async def list_users(self) -> Sequence[PublicUser]:
        """List every registered user without password hashes."""
        return await self._repo.list_all()

    async def get_profile(self, user_id: int) -> PublicUser:
        """Get a user's public profile.

        Raises:
            NotFoundError: If the user does not exist.
        """
        user = await self._repo.get_by_id(user_id)
        if user is None:
            raise NotFoundError("User not found")
        return user.public()
