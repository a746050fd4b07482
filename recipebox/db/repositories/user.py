"""Repository for user credential records."""

from __future__ import annotations

import asyncio
from dataclasses import replace as dataclass_replace
from typing import TYPE_CHECKING, Protocol, runtime_checkable

from recipebox.core.enums import UserRole
from recipebox.core.exceptions import DuplicateEmailError
from recipebox.db.models import PublicUser, UserRecord

if TYPE_CHECKING:
    from collections.abc import Sequence


@runtime_checkable
class UserRepository(Protocol):
    """Protocol for user storage backends.

    Implementations must make the email uniqueness check and the insert
    a single atomic step, and must never reuse an id.
    """

    async def create(
        self,
        *,
        name: str,
        email: str,
        password_hash: str,
        role: UserRole = UserRole.USER,
    ) -> UserRecord:
        """Create a new user.

        Raises:
            DuplicateEmailError: If a user with this exact email exists.
        """
        ...

    async def get_by_email(self, email: str) -> UserRecord | None:
        """Get user by exact email match."""
        ...

    async def get_by_id(self, user_id: int) -> UserRecord | None:
        """Get user by id."""
        ...

    async def list_all(self) -> Sequence[PublicUser]:
        """List every user without password hashes."""
        ...

    async def update_password_hash(self, user_id: int, password_hash: str) -> UserRecord | None:
        """Replace a user's stored hash.

        Returns:
            Updated record, or None if the user does not exist.
        """
        ...

    async def count(self) -> int:
        """Number of stored users."""
        ...


class InMemoryUserRepository:
    """Process-local user store.

    Records live in a dict keyed by id with a secondary email index.
    Emails are compared exactly as given; no case folding is done.
    """

    def __init__(self) -> None:
        self._users: dict[int, UserRecord] = {}
        self._by_email: dict[str, int] = {}
        self._next_id = 1
        self._lock = asyncio.Lock()

    async def create(
        self,
        *,
        name: str,
        email: str,
        password_hash: str,
        role: UserRole = UserRole.USER,
    ) -> UserRecord:
        async with self._lock:
            if email in self._by_email:
                raise DuplicateEmailError("Email already in use")

            user = UserRecord(
                id=self._next_id,
                name=name,
                email=email,
                password_hash=password_hash,
                role=role,
            )
            self._next_id += 1
            self._users[user.id] = user
            self._by_email[email] = user.id
            return user

    async def get_by_email(self, email: str) -> UserRecord | None:
        user_id = self._by_email.get(email)
        return None if user_id is None else self._users[user_id]

    async def get_by_id(self, user_id: int) -> UserRecord | None:
        return self._users.get(user_id)

    async def list_all(self) -> list[PublicUser]:
        return [user.public() for user in self._users.values()]

    async def update_password_hash(self, user_id: int, password_hash: str) -> UserRecord | None:
        async with self._lock:
            user = self._users.get(user_id)
            if user is None:
                return None
            user = dataclass_replace(user, password_hash=password_hash)
            self._users[user_id] = user
            return user

    async def count(self) -> int:
        return len(self._users)
