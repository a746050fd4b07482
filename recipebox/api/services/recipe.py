"""Recipe service with ownership-gated mutation."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import fields
from datetime import datetime, timezone
from typing import TYPE_CHECKING, Any

from recipebox.api.security import can_mutate
from recipebox.core.enums import (
    DEFAULT_CATEGORY,
    DEFAULT_COOKING_TIME,
    DEFAULT_DIFFICULTY,
    SYSTEM_OWNER,
)
from recipebox.core.exceptions import ForbiddenError, NotFoundError, ValidationError
from recipebox.db.models import Recipe

if TYPE_CHECKING:
    from collections.abc import Sequence

    from recipebox.api.security import AuthenticatedUser
    from recipebox.db.repositories import RecipeRepository

logger = logging.getLogger(__name__)

# Fields a caller can never change through update.
IMMUTABLE_FIELDS = frozenset({"id", "created_by", "created_at", "updated_at"})

EDITABLE_FIELDS = frozenset(f.name for f in fields(Recipe)) - IMMUTABLE_FIELDS

SAMPLE_RECIPES: tuple[dict[str, Any], ...] = (
    {
        "title": "Classic Pancakes",
        "description": "Fluffy homemade pancakes perfect for breakfast",
        "ingredients": [
            "2 cups flour",
            "2 eggs",
            "1.5 cups milk",
            "2 tbsp sugar",
            "2 tsp baking powder",
        ],
        "instructions": "Mix dry ingredients. Add wet ingredients. "
        "Cook on griddle until golden brown.",
        "cooking_time": 20,
        "difficulty": "Easy",
        "category": "Breakfast",
    },
    {
        "title": "Vegetable Stir Fry",
        "description": "Quick and healthy vegetable stir fry",
        "ingredients": [
            "2 cups mixed vegetables",
            "2 tbsp soy sauce",
            "1 tbsp oil",
            "2 cloves garlic",
            "1 tsp ginger",
        ],
        "instructions": "Heat oil, add garlic and ginger. Add vegetables and stir fry. "
        "Add soy sauce and serve.",
        "cooking_time": 15,
        "difficulty": "Easy",
        "category": "Lunch",
    },
)


def normalize_ingredients(ingredients: list[str] | str) -> list[str]:
    """Coerce a bare ingredient into a one-element list."""
    if isinstance(ingredients, (list, tuple)):
        return list(ingredients)
    return [ingredients]


class RecipeService:
    """Recipe listing and mutation.

    Reads are open to everyone. Create needs an identity, and update and
    delete additionally pass the ownership check in ``can_mutate``.
    """

    def __init__(self, repository: RecipeRepository) -> None:
        """Initialize recipe service.

        Args:
            repository: Recipe repository.
        """
        self._repo = repository

    async def list_recipes(self) -> Sequence[Recipe]:
        """List all recipes."""
        return await self._repo.list_all()

    async def get_recipe(self, recipe_id: int) -> Recipe:
        """Get a single recipe.

        Raises:
            NotFoundError: If no recipe has this id.
        """
        recipe = await self._repo.get(recipe_id)
        if recipe is None:
            raise NotFoundError("Recipe not found")
        return recipe

    async def create_recipe(
        self,
        identity: AuthenticatedUser,
        *,
        title: str | None,
        description: str | None,
        ingredients: list[str] | str | None,
        instructions: str | None,
        cooking_time: int | None = None,
        difficulty: str | None = None,
        category: str | None = None,
    ) -> Recipe:
        """Create a recipe owned by ``identity``.

        Args:
            identity: Verified caller.
            title: Recipe title.
            description: Short description.
            ingredients: Ingredient list, or a single ingredient.
            instructions: Preparation steps.
            cooking_time: Minutes, defaults to 30.
            difficulty: Difficulty label, defaults to "Medium".
            category: Category, defaults to "Main Course".

        Returns:
            The stored recipe.

        Raises:
            ValidationError: If a required field is missing.
        """
        if not title or not description or ingredients is None or not instructions:
            raise ValidationError("Required fields missing")

        recipe = await self._repo.add(
            title=title,
            description=description,
            ingredients=normalize_ingredients(ingredients),
            instructions=instructions,
            cooking_time=cooking_time or DEFAULT_COOKING_TIME,
            difficulty=difficulty or DEFAULT_DIFFICULTY,
            category=category or DEFAULT_CATEGORY,
            created_by=identity.id,
        )

        logger.info(f"Recipe created: {recipe.title} (ID: {recipe.id}) by user {identity.id}")

        return recipe

    async def update_recipe(
        self,
        identity: AuthenticatedUser,
        recipe_id: int,
        changes: Mapping[str, Any],
    ) -> Recipe:
        """Merge ``changes`` into an existing recipe.

        Keys in ``IMMUTABLE_FIELDS`` and unknown keys are dropped, so the
        id, owner and creation time survive whatever the caller sends.

        Args:
            identity: Verified caller.
            recipe_id: Recipe to update.
            changes: Submitted fields, keyed by model attribute name.

        Returns:
            The updated recipe.

        Raises:
            NotFoundError: If no recipe has this id.
            ForbiddenError: If the caller may not edit this recipe.
        """
        recipe = await self._authorize(identity, recipe_id, action="edit")

        for name, value in changes.items():
            if name not in EDITABLE_FIELDS or value is None:
                continue
            if name == "ingredients":
                value = normalize_ingredients(value)
            setattr(recipe, name, value)

        recipe.updated_at = datetime.now(timezone.utc)
        await self._repo.replace(recipe)

        logger.info(f"Recipe updated: {recipe.title} (ID: {recipe.id}) by user {identity.id}")

        return recipe

    async def delete_recipe(self, identity: AuthenticatedUser, recipe_id: int) -> None:
        """Delete a recipe.

        Raises:
            NotFoundError: If no recipe has this id.
            ForbiddenError: If the caller may not delete this recipe.
        """
        recipe = await self._authorize(identity, recipe_id, action="delete")

        if not await self._repo.remove(recipe_id):
            raise NotFoundError("Recipe not found")

        logger.info(f"Recipe deleted: {recipe.title} (ID: {recipe.id}) by user {identity.id}")

    async def seed_sample_recipes(self) -> int:
        """Add the sample recipes owned by ``"system"``.

        Returns:
            Number of recipes added.
        """
        for sample in SAMPLE_RECIPES:
            await self._repo.add(
                **{**sample, "ingredients": list(sample["ingredients"])},
                created_by=SYSTEM_OWNER,
            )
        logger.info(f"Seeded {len(SAMPLE_RECIPES)} sample recipes")
        return len(SAMPLE_RECIPES)

    async def _authorize(
        self,
        identity: AuthenticatedUser,
        recipe_id: int,
        *,
        action: str,
    ) -> Recipe:
        recipe = await self._repo.get(recipe_id)
        if recipe is None:
            raise NotFoundError("Recipe not found")

        if not can_mutate(identity, recipe.created_by):
            logger.info(
                f"Refused {action} of recipe {recipe_id} (owner {recipe.created_by}) "
                f"by user {identity.id}"
            )
            raise ForbiddenError(f"You can only {action} your own recipes")

        return recipe
