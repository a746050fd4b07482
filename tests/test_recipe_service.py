"""Tests for recipe creation and ownership-gated mutation."""

from __future__ import annotations

from datetime import datetime, timezone

import pytest

from recipebox.api.security import AuthenticatedUser
from recipebox.api.services.recipe import RecipeService
from recipebox.core.enums import SYSTEM_OWNER
from recipebox.core.exceptions import ForbiddenError, NotFoundError, ValidationError
from recipebox.db.repositories import InMemoryRecipeRepository

PANCAKES = {
    "title": "Pancakes",
    "description": "Fluffy",
    "ingredients": ["flour", "eggs"],
    "instructions": "Mix and fry",
}


class TestCreateRecipe:
    """Tests for recipe creation."""

    @pytest.mark.asyncio
    async def test_create_assigns_owner_and_defaults(
        self,
        recipe_service: RecipeService,
        alice: AuthenticatedUser,
    ) -> None:
        """Owner comes from the identity and optional fields get defaults."""
        recipe = await recipe_service.create_recipe(alice, **PANCAKES)

        assert recipe.id == 1
        assert recipe.created_by == alice.id
        assert recipe.cooking_time == 30
        assert recipe.difficulty == "Medium"
        assert recipe.category == "Main Course"
        assert recipe.updated_at is None
        assert recipe.created_at <= datetime.now(timezone.utc)

    @pytest.mark.asyncio
    async def test_create_keeps_given_values(
        self,
        recipe_service: RecipeService,
        alice: AuthenticatedUser,
    ) -> None:
        """Test optional fields supplied by the caller."""
        recipe = await recipe_service.create_recipe(
            alice, **PANCAKES, cooking_time=12, difficulty="Hard", category="Breakfast"
        )

        assert (recipe.cooking_time, recipe.difficulty, recipe.category) == (
            12,
            "Hard",
            "Breakfast",
        )

    @pytest.mark.asyncio
    async def test_single_ingredient_becomes_list(
        self,
        recipe_service: RecipeService,
        alice: AuthenticatedUser,
    ) -> None:
        """A bare ingredient string is wrapped in a list."""
        recipe = await recipe_service.create_recipe(alice, **{**PANCAKES, "ingredients": "salt"})

        assert recipe.ingredients == ["salt"]

    @pytest.mark.asyncio
    @pytest.mark.parametrize("missing", ["title", "description", "ingredients", "instructions"])
    async def test_required_fields(
        self,
        recipe_service: RecipeService,
        alice: AuthenticatedUser,
        missing: str,
    ) -> None:
        """Each required field is checked."""
        with pytest.raises(ValidationError):
            await recipe_service.create_recipe(alice, **{**PANCAKES, missing: None})

    @pytest.mark.asyncio
    async def test_empty_ingredient_list_is_accepted(
        self,
        recipe_service: RecipeService,
        alice: AuthenticatedUser,
    ) -> None:
        """Only a missing ingredient list is rejected; an empty one is kept."""
        recipe = await recipe_service.create_recipe(alice, **{**PANCAKES, "ingredients": []})

        assert recipe.ingredients == []

    @pytest.mark.asyncio
    async def test_ids_are_not_reused(
        self,
        recipe_service: RecipeService,
        alice: AuthenticatedUser,
    ) -> None:
        """Deleting the newest recipe does not free its id."""
        first = await recipe_service.create_recipe(alice, **PANCAKES)
        await recipe_service.delete_recipe(alice, first.id)
        second = await recipe_service.create_recipe(alice, **PANCAKES)

        assert second.id == first.id + 1


class TestUpdateRecipe:
    """Tests for recipe updates."""

    @pytest.mark.asyncio
    async def test_owner_can_update(
        self,
        recipe_service: RecipeService,
        alice: AuthenticatedUser,
    ) -> None:
        """Submitted fields are merged and the rest kept."""
        recipe = await recipe_service.create_recipe(alice, **PANCAKES)

        updated = await recipe_service.update_recipe(alice, recipe.id, {"title": "Crepes"})

        assert updated.title == "Crepes"
        assert updated.description == "Fluffy"
        assert updated.updated_at is not None
        stored = await recipe_service.get_recipe(recipe.id)
        assert stored.title == "Crepes"

    @pytest.mark.asyncio
    async def test_other_user_forbidden(
        self,
        recipe_service: RecipeService,
        alice: AuthenticatedUser,
        bob: AuthenticatedUser,
    ) -> None:
        """A non-owner cannot update and nothing changes."""
        recipe = await recipe_service.create_recipe(alice, **PANCAKES)

        with pytest.raises(ForbiddenError):
            await recipe_service.update_recipe(bob, recipe.id, {"title": "Hacked"})

        assert (await recipe_service.get_recipe(recipe.id)).title == "Pancakes"

    @pytest.mark.asyncio
    async def test_admin_can_update_and_owner_kept(
        self,
        recipe_service: RecipeService,
        alice: AuthenticatedUser,
        admin: AuthenticatedUser,
    ) -> None:
        """Admin edits do not take ownership."""
        recipe = await recipe_service.create_recipe(alice, **PANCAKES)

        updated = await recipe_service.update_recipe(admin, recipe.id, {"title": "Better"})

        assert updated.title == "Better"
        assert updated.created_by == alice.id

    @pytest.mark.asyncio
    async def test_immutable_fields_ignored(
        self,
        recipe_service: RecipeService,
        alice: AuthenticatedUser,
    ) -> None:
        """id, owner and creation time survive an update that names them."""
        recipe = await recipe_service.create_recipe(alice, **PANCAKES)

        updated = await recipe_service.update_recipe(
            alice,
            recipe.id,
            {
                "id": 999,
                "created_by": 7,
                "created_at": datetime(2000, 1, 1, tzinfo=timezone.utc),
                "title": "Renamed",
            },
        )

        assert updated.id == recipe.id
        assert updated.created_by == alice.id
        assert updated.created_at == recipe.created_at
        with pytest.raises(NotFoundError):
            await recipe_service.get_recipe(999)

    @pytest.mark.asyncio
    async def test_update_ingredients_coerced(
        self,
        recipe_service: RecipeService,
        alice: AuthenticatedUser,
    ) -> None:
        """Test a bare ingredient in an update."""
        recipe = await recipe_service.create_recipe(alice, **PANCAKES)

        updated = await recipe_service.update_recipe(alice, recipe.id, {"ingredients": "butter"})

        assert updated.ingredients == ["butter"]

    @pytest.mark.asyncio
    async def test_update_missing(
        self,
        recipe_service: RecipeService,
        alice: AuthenticatedUser,
    ) -> None:
        """Test updating an unknown recipe."""
        with pytest.raises(NotFoundError):
            await recipe_service.update_recipe(alice, 42, {"title": "x"})


class TestDeleteRecipe:
    """Tests for recipe deletion."""

    @pytest.mark.asyncio
    async def test_delete_twice(
        self,
        recipe_service: RecipeService,
        alice: AuthenticatedUser,
    ) -> None:
        """First delete succeeds, second reports not found."""
        recipe = await recipe_service.create_recipe(alice, **PANCAKES)

        await recipe_service.delete_recipe(alice, recipe.id)

        with pytest.raises(NotFoundError):
            await recipe_service.delete_recipe(alice, recipe.id)

    @pytest.mark.asyncio
    async def test_delete_forbidden(
        self,
        recipe_service: RecipeService,
        alice: AuthenticatedUser,
        bob: AuthenticatedUser,
    ) -> None:
        """A non-owner cannot delete."""
        recipe = await recipe_service.create_recipe(alice, **PANCAKES)

        with pytest.raises(ForbiddenError):
            await recipe_service.delete_recipe(bob, recipe.id)

        assert len(await recipe_service.list_recipes()) == 1

    @pytest.mark.asyncio
    async def test_admin_deletes_any(
        self,
        recipe_service: RecipeService,
        alice: AuthenticatedUser,
        admin: AuthenticatedUser,
    ) -> None:
        """Test admin deleting another user's recipe."""
        recipe = await recipe_service.create_recipe(alice, **PANCAKES)

        await recipe_service.delete_recipe(admin, recipe.id)

        assert await recipe_service.list_recipes() == []


class TestSampleRecipes:
    """Tests for seed data."""

    @pytest.mark.asyncio
    async def test_seed_owned_by_system(
        self,
        recipe_service: RecipeService,
        alice: AuthenticatedUser,
        admin: AuthenticatedUser,
    ) -> None:
        """Seed recipes can only be changed by an admin."""
        assert await recipe_service.seed_sample_recipes() == 2

        recipes = await recipe_service.list_recipes()
        assert [r.title for r in recipes] == ["Classic Pancakes", "Vegetable Stir Fry"]
        assert all(r.created_by == SYSTEM_OWNER for r in recipes)

        with pytest.raises(ForbiddenError):
            await recipe_service.delete_recipe(alice, recipes[0].id)
        await recipe_service.delete_recipe(admin, recipes[0].id)

    @pytest.mark.asyncio
    async def test_store_returns_copies(
        self,
        recipe_repository: InMemoryRecipeRepository,
        recipe_service: RecipeService,
        alice: AuthenticatedUser,
    ) -> None:
        """Editing a fetched recipe does not change the store."""
        recipe = await recipe_service.create_recipe(alice, **PANCAKES)
        fetched = await recipe_repository.get(recipe.id)
        fetched.ingredients.append("sugar")
        fetched.title = "Changed"

        stored = await recipe_repository.get(recipe.id)
        assert stored.title == "Pancakes"
        assert stored.ingredients == ["flour", "eggs"]

    @pytest.mark.asyncio
    async def test_replace_vanished_recipe(
        self,
        recipe_repository: InMemoryRecipeRepository,
        recipe_service: RecipeService,
        alice: AuthenticatedUser,
    ) -> None:
        """Replacing a recipe deleted in the meantime is a not-found error."""
        recipe = await recipe_service.create_recipe(alice, **PANCAKES)
        await recipe_repository.remove(recipe.id)

        with pytest.raises(NotFoundError):
            await recipe_repository.replace(recipe)
