"""Health check route."""

from __future__ import annotations

from collections.abc import Sequence

from litestar import Controller, get

from recipebox.api.schemas.health import HealthResponse
from recipebox.db.repositories import RecipeRepository, UserRepository


class HealthController(Controller):
    """Health check endpoints."""

    path = "/health"
    tags: Sequence[str] | None = ["Health"]

    @get("/")
    async def health_check(
        self,
        user_repository: UserRepository,
        recipe_repository: RecipeRepository,
    ) -> HealthResponse:
        """Report service status and store sizes."""
        return HealthResponse(
            status="healthy",
            users=await user_repository.count(),
            recipes=await recipe_repository.count(),
        )
