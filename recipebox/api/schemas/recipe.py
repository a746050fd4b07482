"""Recipe schemas using msgspec.

Payloads use camelCase keys (``cookingTime``, ``createdBy``) to match the
browser client.
"""

from __future__ import annotations

from datetime import datetime
from typing import Any

import msgspec

from recipebox.db.models import Recipe

# -----------------------------------------------------------------------------
# Request schemas
# -----------------------------------------------------------------------------


class CreateRecipeRequest(msgspec.Struct, kw_only=True, rename="camel"):
    """Create recipe request.

    ``ingredients`` may be a list or a single string.
    """

    title: str | None = None
    description: str | None = None
    ingredients: list[str] | str | None = None
    instructions: str | None = None
    cooking_time: int | None = None
    difficulty: str | None = None
    category: str | None = None


class UpdateRecipeRequest(msgspec.Struct, kw_only=True, rename="camel"):
    """Update recipe request.

    All fields are optional - only provided fields are updated. Unknown
    keys, including ``id`` and ``createdBy``, are ignored.
    """

    title: str | None = None
    description: str | None = None
    ingredients: list[str] | str | None = None
    instructions: str | None = None
    cooking_time: int | None = None
    difficulty: str | None = None
    category: str | None = None

    def changes(self) -> dict[str, Any]:
        """Submitted fields keyed by model attribute name."""
        return {
            name: value
            for name in self.__struct_fields__
            if (value := getattr(self, name)) is not None
        }


# -----------------------------------------------------------------------------
# Response schemas
# -----------------------------------------------------------------------------


class RecipeResponse(msgspec.Struct, kw_only=True, rename="camel"):
    """Recipe response."""

    id: int
    title: str
    description: str
    ingredients: list[str]
    instructions: str
    cooking_time: int
    difficulty: str
    category: str
    created_by: int | str
    created_at: datetime
    updated_at: datetime | None = None

    @classmethod
    def from_recipe(cls, recipe: Recipe) -> RecipeResponse:
        return cls(
            id=recipe.id,
            title=recipe.title,
            description=recipe.description,
            ingredients=list(recipe.ingredients),
            instructions=recipe.instructions,
            cooking_time=recipe.cooking_time,
            difficulty=recipe.difficulty,
            category=recipe.category,
            created_by=recipe.created_by,
            created_at=recipe.created_at,
            updated_at=recipe.updated_at,
        )
