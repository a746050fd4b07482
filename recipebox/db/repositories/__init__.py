"""Storage repositories module."""

from .recipe import InMemoryRecipeRepository, RecipeRepository
from .user import InMemoryUserRepository, UserRepository

__all__ = [
    "InMemoryRecipeRepository",
    "InMemoryUserRepository",
    "RecipeRepository",
    "UserRepository",
]
