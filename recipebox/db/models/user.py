"""User account model."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone

from recipebox.core.enums import UserRole


@dataclass(frozen=True)
class PublicUser:
    """User view that is safe to send to clients."""

    id: int
    name: str
    email: str
    role: UserRole


@dataclass(frozen=True)
class UserRecord:
    """Stored user credentials and profile.

    Records are created by registration only and never updated, so the
    id and password hash are fixed for the life of the record.
    """

    id: int
    name: str
    email: str
    password_hash: str = field(repr=False)
    role: UserRole = UserRole.USER
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    def public(self) -> PublicUser:
        """Return the record without its password hash."""
        return PublicUser(id=self.id, name=self.name, email=self.email, role=self.role)

    def __repr__(self) -> str:
        return f"<User {self.id} email={self.email} role={self.role.value}>"
