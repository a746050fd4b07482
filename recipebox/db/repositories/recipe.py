"""Repository for recipes."""

from __future__ import annotations

import asyncio
from dataclasses import replace as dataclass_replace
from typing import TYPE_CHECKING, Any, Protocol, runtime_checkable

from recipebox.core.exceptions import NotFoundError
from recipebox.db.models import Recipe

if TYPE_CHECKING:
    from collections.abc import Sequence


def _copy(recipe: Recipe) -> Recipe:
    """Detach a recipe from the stored instance, ingredient list included."""
    return dataclass_replace(recipe, ingredients=list(recipe.ingredients))


@runtime_checkable
class RecipeRepository(Protocol):
    """Protocol for recipe storage backends."""

    async def add(self, **fields: Any) -> Recipe:
        """Store a new recipe and assign it the next id."""
        ...

    async def get(self, recipe_id: int) -> Recipe | None:
        """Get recipe by id."""
        ...

    async def list_all(self) -> Sequence[Recipe]:
        """List recipes in creation order."""
        ...

    async def replace(self, recipe: Recipe) -> Recipe:
        """Overwrite the stored recipe with the same id.

        Raises:
            NotFoundError: If the recipe no longer exists.
        """
        ...

    async def remove(self, recipe_id: int) -> bool:
        """Delete a recipe. Returns False if it did not exist."""
        ...

    async def count(self) -> int:
        """Number of stored recipes."""
        ...


class InMemoryRecipeRepository:
    """Process-local recipe store keyed by id.

    Ids come from one counter starting at 1 and are never reused.
    Callers get copies, so mutating a returned recipe does not touch
    the store until ``replace`` is called.
    """

    def __init__(self) -> None:
        self._recipes: dict[int, Recipe] = {}
        self._next_id = 1
        self._lock = asyncio.Lock()

    async def add(self, **fields: Any) -> Recipe:
        async with self._lock:
            recipe = Recipe(id=self._next_id, **fields)
            self._next_id += 1
            self._recipes[recipe.id] = recipe
            return _copy(recipe)

    async def get(self, recipe_id: int) -> Recipe | None:
        recipe = self._recipes.get(recipe_id)
        return None if recipe is None else _copy(recipe)

    async def list_all(self) -> list[Recipe]:
        return [_copy(recipe) for recipe in self._recipes.values()]

    async def replace(self, recipe: Recipe) -> Recipe:
        async with self._lock:
            if recipe.id not in self._recipes:
                raise NotFoundError("Recipe not found")
            self._recipes[recipe.id] = _copy(recipe)
            return recipe

    async def remove(self, recipe_id: int) -> bool:
        async with self._lock:
            return self._recipes.pop(recipe_id, None) is not None

    async def count(self) -> int:
        return len(self._recipes)
