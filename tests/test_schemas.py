"""Tests for API schemas."""

from datetime import datetime, timezone

import msgspec

from recipebox.api.schemas import CreateRecipeRequest, RecipeResponse, UpdateRecipeRequest
from recipebox.db.models import Recipe


class TestRecipeSchemas:
    """Tests for recipe payload shapes."""

    def test_create_accepts_single_ingredient(self) -> None:
        """A string ingredient decodes without error."""
        request = msgspec.json.decode(
            b'{"title": "T", "ingredients": "salt", "cookingTime": 5}',
            type=CreateRecipeRequest,
        )

        assert request.ingredients == "salt"
        assert request.cooking_time == 5
        assert request.description is None

    def test_update_changes_skip_unset_and_unknown(self) -> None:
        """Only submitted, known fields are reported as changes."""
        request = msgspec.json.decode(
            b'{"id": 9, "createdBy": 3, "title": "New", "cookingTime": 45}',
            type=UpdateRecipeRequest,
        )

        assert request.changes() == {"title": "New", "cooking_time": 45}

    def test_response_is_camel_case(self) -> None:
        """Recipe responses use the browser client's key names."""
        recipe = Recipe(
            id=1,
            title="T",
            description="D",
            ingredients=["a"],
            instructions="I",
            created_by="system",
            created_at=datetime(2024, 1, 1, tzinfo=timezone.utc),
        )

        encoded = msgspec.to_builtins(RecipeResponse.from_recipe(recipe))

        assert encoded["createdBy"] == "system"
        assert encoded["cookingTime"] == 30
        assert encoded["updatedAt"] is None
        assert "created_by" not in encoded
