"""
API dependencies for dependency injection
"""

from fastapi import Request
from typing import Optional

from app.exceptions import StoreError
from services.recipe_service import RecipeService


def get_optional_recipe_service(request: Request) -> Optional[RecipeService]:
    """The wired service, or None before the lifespan has started."""
    return getattr(request.app.state, "recipe_service", None)


def get_recipe_service(request: Request) -> RecipeService:
    """
    Recipe service dependency for FastAPI routes.

    The service (and the repository inside it) is built once by the
    application lifespan and stored on ``app.state``.

    Usage:
        @router.get("/example")
        async def example(service: RecipeService = Depends(get_recipe_service)):
            ...
    """
    service = get_optional_recipe_service(request)
    if service is None:
        raise StoreError("Database connection is not initialized")
    return service
