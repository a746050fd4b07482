"""API routes module."""

from .auth import AuthController
from .health import HealthController
from .recipes import RecipeController
from .user import AdminController, ProfileController

__all__ = [
    "AdminController",
    "AuthController",
    "HealthController",
    "ProfileController",
    "RecipeController",
]
