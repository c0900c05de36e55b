"""
Pytest configuration and shared fixtures.
This file ensures the project root is in sys.path for imports.
"""

import sys
from pathlib import Path

# Add project root to sys.path so we can import domain, services, etc.
project_root = Path(__file__).parent.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))

import pytest
from fastapi.testclient import TestClient

from main import app
from api.dependencies import get_optional_recipe_service, get_recipe_service
from repositories import RecipeRepository
from services.recipe_service import RecipeService
from test_fixtures import FakeCollection


@pytest.fixture
def anyio_backend():
    return "asyncio"


@pytest.fixture
def recipe_collection():
    return FakeCollection()


@pytest.fixture
def recipe_repository(recipe_collection):
    return RecipeRepository(recipe_collection)


@pytest.fixture
def recipe_service(recipe_repository):
    return RecipeService(recipe_repository)


@pytest.fixture
def client(recipe_service):
    """TestClient wired to an in-memory collection; the lifespan is not run."""
    app.dependency_overrides[get_recipe_service] = lambda: recipe_service
    app.dependency_overrides[get_optional_recipe_service] = lambda: recipe_service
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()
