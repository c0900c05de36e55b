"""
Cookbook FastAPI Application
Main entry point: logging, lifespan (MongoDB connection), middleware and routes
"""

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.exceptions import RequestValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException
import logging
import sys
import uvicorn
from contextlib import asynccontextmanager
import anyio
from typing import Optional

from api.routes import health, recipes
from adapters import mongo_adapter
from app.config import settings
from app.exceptions import ConfigurationError, CookbookError
from repositories import RecipeRepository
from services.recipe_service import RecipeService

from api.middleware import (
    RequestLoggingMiddleware,
    validation_exception_handler,
    http_exception_handler,
    cookbook_exception_handler,
    general_exception_handler,
)

API_PREFIX = "/api"

# Setup logging with configured level and format
logging.basicConfig(
    level=getattr(logging, settings.log_level.upper()), format=settings.log_format
)
_logger = logging.getLogger("cookbook.main")


async def connect_with_retries():
    """
    Open the MongoDB client, retrying ``db_init_attempts`` times.
    The last failure is re-raised so the application never starts degraded.
    """
    last_exc: Optional[Exception] = None
    for attempt in range(1, settings.db_init_attempts + 1):
        try:
            return await mongo_adapter.connect(
                settings.mongodb_uri, timeout_ms=settings.mongo_timeout_ms
            )
        except Exception as exc:
            last_exc = exc
            _logger.warning(
                "MongoDB connection attempt %d/%d failed: %s",
                attempt,
                settings.db_init_attempts,
                exc,
            )
            if attempt < settings.db_init_attempts:
                await anyio.sleep(settings.db_init_delay_sec)

    _logger.error("MongoDB connection failed after %d attempts", settings.db_init_attempts)
    raise last_exc


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Lifespan context manager for application startup and shutdown.
    Builds the single RecipeService used by every request.
    """
    if not settings.mongodb_uri:
        _logger.error("MONGODB_URI is not configured")
        raise ConfigurationError("MONGODB_URI is not configured")

    _logger.info(f"Starting Cookbook in {settings.environment.value} mode")
    client = await connect_with_retries()

    try:
        collection = client[settings.db_name][settings.collection_name]
        repository = RecipeRepository(collection)
        await repository.ensure_indexes()
        app.state.recipe_service = RecipeService(repository)
        _logger.info(
            "Serving recipes from %s/%s", settings.db_name, settings.collection_name
        )
        yield
    finally:
        _logger.info("Shutting down Cookbook")
        app.state.recipe_service = None
        await mongo_adapter.close(client)


app = FastAPI(
    title=settings.api_title,
    version=settings.app_version,
    description=settings.api_description,
    lifespan=lifespan,
    debug=settings.debug,
    openapi_url=f"{API_PREFIX}/openapi.json" if not settings.is_production() else None,
    docs_url=f"{API_PREFIX}/docs" if not settings.is_production() else None,
    redoc_url=None,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=settings.cors_allow_credentials,
    allow_methods=settings.cors_allow_methods,
    allow_headers=settings.cors_allow_headers,
)

app.add_middleware(RequestLoggingMiddleware)

app.add_exception_handler(RequestValidationError, validation_exception_handler)
app.add_exception_handler(StarletteHTTPException, http_exception_handler)
app.add_exception_handler(CookbookError, cookbook_exception_handler)
app.add_exception_handler(Exception, general_exception_handler)

app.include_router(health.router, prefix=API_PREFIX)
app.include_router(recipes.router, prefix=API_PREFIX)


if __name__ == "__main__":
    if not settings.mongodb_uri:
        _logger.error("MONGODB_URI missing: set it in the environment or connect.env")
        sys.exit(1)

    uvicorn.run(
        "main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.is_development(),
        log_level=settings.log_level.lower(),
    )
