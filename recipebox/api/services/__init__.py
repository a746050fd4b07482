"""API services module."""

from .auth import AuthService, LoginResult
from .recipe import RecipeService

__all__ = [
    "AuthService",
    "LoginResult",
    "RecipeService",
]
