"""Domain models module."""

from .recipe import Recipe
from .user import PublicUser, UserRecord

__all__ = [
    "PublicUser",
    "Recipe",
    "UserRecord",
]
