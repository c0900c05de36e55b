"""Health check route"""

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse
from typing import Optional
import logging

from api.dependencies import get_optional_recipe_service
from domain.schemas.recipe_schemas import HealthResponse
from services.recipe_service import RecipeService

router = APIRouter(tags=["Health"])
logger = logging.getLogger("cookbook.api.health")


@router.get("/health", response_model=HealthResponse, response_model_exclude_none=True)
async def health_check(
    service: Optional[RecipeService] = Depends(get_optional_recipe_service),
):
    """Ping the database and report which collection the API serves"""
    if service is None:
        logger.error("Health check failed: database connection is not initialized")
        return JSONResponse(status_code=500, content={"ok": False})
    result = await service.health()
    if not result["ok"]:
        logger.error("Health check failed: database ping error")
        return JSONResponse(status_code=500, content={"ok": False})
    return result
