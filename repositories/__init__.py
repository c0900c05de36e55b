"""
Repositories package - Data access layer.
"""

from repositories.recipe_repository import RecipeRepository

__all__ = [
    "RecipeRepository",
]
