"""RecipeBox: recipe sharing API with token authentication."""

__version__ = "0.1.0"
