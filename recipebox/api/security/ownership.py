"""Ownership rule for recipe mutation."""

from __future__ import annotations

from typing import Protocol

from recipebox.core.enums import UserRole


class Identity(Protocol):
    """Anything carrying a user id and role."""

    @property
    def id(self) -> int: ...

    @property
    def role(self) -> UserRole: ...


def can_mutate(identity: Identity, resource_owner: int | str) -> bool:
    """Decide whether ``identity`` may update or delete a resource.

    Admins may mutate anything. Everyone else may mutate only what they
    own. The ``"system"`` owner of seed data never matches a user id.

    Args:
        identity: Verified identity of the caller.
        resource_owner: User id that owns the resource, or ``"system"``.

    Returns:
        True if the mutation is allowed.
    """
    if identity.role == UserRole.ADMIN:
        return True
    return isinstance(resource_owner, int) and resource_owner == identity.id
