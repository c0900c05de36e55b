"""
Domain schemas package - Pydantic models for validation.
"""

from domain.schemas.recipe_schemas import (
    RecipeCreate,
    RecipeUpdate,
    CommentCreate,
    CommentResponse,
    RecipeResponse,
    HealthResponse,
    DeleteResponse,
    ErrorResponse,
)

__all__ = [
    "RecipeCreate",
    "RecipeUpdate",
    "CommentCreate",
    "CommentResponse",
    "RecipeResponse",
    "HealthResponse",
    "DeleteResponse",
    "ErrorResponse",
]
