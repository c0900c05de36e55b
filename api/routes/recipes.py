"""
Recipe routes - list, create, update, delete and comment on recipes.
"""

from fastapi import APIRouter, Depends, status
import logging
from typing import Any, Dict, List, Optional

from api.dependencies import get_recipe_service
from domain.schemas.recipe_schemas import (
    CommentCreate,
    DeleteResponse,
    ErrorResponse,
    RecipeCreate,
    RecipeResponse,
    RecipeUpdate,
)
from services.recipe_service import RecipeService

router = APIRouter(prefix="/recipes", tags=["Recipes"])
logger = logging.getLogger("cookbook.api.recipes")

BAD_REQUEST = {400: {"model": ErrorResponse, "description": "Invalid id or blank field"}}
NOT_FOUND = {404: {"model": ErrorResponse, "description": "Recipe not found"}}
SERVER_ERROR = {500: {"model": ErrorResponse, "description": "Database error"}}


@router.get("", response_model=List[RecipeResponse], responses=SERVER_ERROR)
async def list_recipes(
    service: RecipeService = Depends(get_recipe_service),
) -> List[Dict[str, Any]]:
    """All recipes, newest first."""
    return await service.list_recipes()


@router.post(
    "",
    response_model=RecipeResponse,
    status_code=status.HTTP_201_CREATED,
    responses={**BAD_REQUEST, **SERVER_ERROR},
)
async def create_recipe(
    payload: Optional[RecipeCreate] = None,
    service: RecipeService = Depends(get_recipe_service),
) -> Dict[str, Any]:
    """
    Create a recipe.

    - **title**: required, trimmed
    - **ingredients** / **steps**: one item per line, or a list
    - **category**: defaults to "Uncategorized"
    """
    recipe = await service.create_recipe(payload or RecipeCreate())
    logger.info("Created recipe %s", recipe["id"])
    return recipe


@router.put(
    "/{recipe_id}",
    response_model=RecipeResponse,
    responses={**BAD_REQUEST, **NOT_FOUND, **SERVER_ERROR},
)
async def update_recipe(
    recipe_id: str,
    payload: Optional[RecipeUpdate] = None,
    service: RecipeService = Depends(get_recipe_service),
) -> Dict[str, Any]:
    """Replace only the fields sent in the body; returns the updated recipe."""
    return await service.update_recipe(recipe_id, payload or RecipeUpdate())


@router.delete(
    "/{recipe_id}",
    response_model=DeleteResponse,
    responses={**BAD_REQUEST, **NOT_FOUND, **SERVER_ERROR},
)
async def delete_recipe(
    recipe_id: str, service: RecipeService = Depends(get_recipe_service)
) -> Dict[str, Any]:
    result = await service.delete_recipe(recipe_id)
    logger.info("Deleted recipe %s", recipe_id)
    return result


@router.post(
    "/{recipe_id}/comments",
    response_model=RecipeResponse,
    responses={**BAD_REQUEST, **NOT_FOUND, **SERVER_ERROR},
)
async def add_comment(
    recipe_id: str,
    payload: Optional[CommentCreate] = None,
    service: RecipeService = Depends(get_recipe_service),
) -> Dict[str, Any]:
    """Append a comment; returns the whole recipe."""
    return await service.add_comment(recipe_id, payload or CommentCreate())
