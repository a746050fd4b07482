"""Recipe model."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone

from recipebox.core.enums import DEFAULT_CATEGORY, DEFAULT_COOKING_TIME, DEFAULT_DIFFICULTY


@dataclass
class Recipe:
    """A shared recipe.

    ``created_by`` is the owning user id, or ``"system"`` for seed data.
    ``id``, ``created_by`` and ``created_at`` never change after creation.
    """

    id: int
    title: str
    description: str
    ingredients: list[str]
    instructions: str
    created_by: int | str
    cooking_time: int = DEFAULT_COOKING_TIME
    difficulty: str = DEFAULT_DIFFICULTY
    category: str = DEFAULT_CATEGORY
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    updated_at: datetime | None = None

    def __repr__(self) -> str:
        return f"<Recipe {self.id} title={self.title!r} owner={self.created_by}>"
