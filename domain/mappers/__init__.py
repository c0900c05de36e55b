"""
Domain mappers - transformations between stored documents and API payloads.
"""

from domain.mappers.recipe_mapper import RecipeMapper

__all__ = ["RecipeMapper"]
