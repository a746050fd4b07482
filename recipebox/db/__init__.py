"""Storage module.

Provides the domain models and the store protocols with their in-memory
implementations.
"""

from .models import PublicUser, Recipe, UserRecord
from .repositories import (
    InMemoryRecipeRepository,
    InMemoryUserRepository,
    RecipeRepository,
    UserRepository,
)

__all__ = [
    # Models
    "PublicUser",
    "Recipe",
    "UserRecord",
    # Repositories
    "InMemoryRecipeRepository",
    "InMemoryUserRepository",
    "RecipeRepository",
    "UserRepository",
]
