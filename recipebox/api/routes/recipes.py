"""Recipe API routes."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import Annotated

from litestar import Controller, Response, delete, get, post, put
from litestar.di import Provide
from litestar.params import Body
from litestar.status_codes import HTTP_200_OK, HTTP_201_CREATED

from recipebox.api.routes.user import get_current_user
from recipebox.api.schemas.auth import MessageResponse
from recipebox.api.schemas.recipe import (
    CreateRecipeRequest,
    RecipeResponse,
    UpdateRecipeRequest,
)
from recipebox.api.security import AuthenticatedUser, auth_guard
from recipebox.api.services.recipe import RecipeService

logger = logging.getLogger(__name__)


class RecipeController(Controller):
    """Recipe endpoints.

    Reads are public. Mutations need a bearer token, and update and
    delete are limited to the owner or an admin.
    """

    path = "/api/recipes"
    tags: Sequence[str] | None = ["Recipes"]
    dependencies = {"current_user": Provide(get_current_user)}

    @get("/")
    async def list_recipes(self, recipe_service: RecipeService) -> list[RecipeResponse]:
        """List all recipes."""
        recipes = await recipe_service.list_recipes()
        return [RecipeResponse.from_recipe(recipe) for recipe in recipes]

    @get("/{recipe_id:int}")
    async def get_recipe(
        self,
        recipe_id: int,
        recipe_service: RecipeService,
    ) -> RecipeResponse:
        """Get a single recipe."""
        recipe = await recipe_service.get_recipe(recipe_id)
        return RecipeResponse.from_recipe(recipe)

    @post("/", guards=[auth_guard], status_code=HTTP_201_CREATED)
    async def create_recipe(
        self,
        data: Annotated[CreateRecipeRequest, Body()],
        current_user: AuthenticatedUser,
        recipe_service: RecipeService,
    ) -> Response[RecipeResponse]:
        """Create a recipe owned by the caller."""
        recipe = await recipe_service.create_recipe(
            current_user,
            title=data.title,
            description=data.description,
            ingredients=data.ingredients,
            instructions=data.instructions,
            cooking_time=data.cooking_time,
            difficulty=data.difficulty,
            category=data.category,
        )

        return Response(
            content=RecipeResponse.from_recipe(recipe),
            status_code=HTTP_201_CREATED,
        )

    @put("/{recipe_id:int}", guards=[auth_guard])
    async def update_recipe(
        self,
        recipe_id: int,
        data: Annotated[UpdateRecipeRequest, Body()],
        current_user: AuthenticatedUser,
        recipe_service: RecipeService,
    ) -> RecipeResponse:
        """Update a recipe.

        ``id`` and ``createdBy`` in the body are ignored.
        """
        recipe = await recipe_service.update_recipe(current_user, recipe_id, data.changes())
        return RecipeResponse.from_recipe(recipe)

    @delete("/{recipe_id:int}", guards=[auth_guard], status_code=HTTP_200_OK)
    async def delete_recipe(
        self,
        recipe_id: int,
        current_user: AuthenticatedUser,
        recipe_service: RecipeService,
    ) -> MessageResponse:
        """Delete a recipe."""
        await recipe_service.delete_recipe(current_user, recipe_id)
        return MessageResponse(message="Recipe deleted successfully")
