"""
Tests for configuration loading and the application lifespan.
"""

import pytest
from fastapi.testclient import TestClient
from pymongo.errors import ServerSelectionTimeoutError

import main
from adapters import mongo_adapter
from app.config import Environment, Settings, settings
from app.exceptions import ConfigurationError
from test_fixtures import FakeClient


# =============================================================================
# SETTINGS
# =============================================================================


def test_settings_read_environment(monkeypatch):
    monkeypatch.setenv("MONGODB_URI", "mongodb://db.internal:27017")
    monkeypatch.setenv("DB_NAME", "kitchen")
    monkeypatch.setenv("COLLECTION_NAME", "dishes")
    monkeypatch.setenv("PORT", "8080")
    monkeypatch.setenv("ENVIRONMENT", "PRODUCTION")

    s = Settings(_env_file=None)

    assert s.mongodb_uri == "mongodb://db.internal:27017"
    assert s.db_name == "kitchen"
    assert s.collection_name == "dishes"
    assert s.port == 8080
    assert s.environment == Environment.PRODUCTION
    assert s.is_production()


def test_settings_defaults(monkeypatch):
    for name in ("MONGODB_URI", "DB_NAME", "COLLECTION_NAME", "PORT", "ENVIRONMENT"):
        monkeypatch.delenv(name, raising=False)

    s = Settings(_env_file=None)

    assert s.mongodb_uri is None
    assert s.db_name == "cookbook"
    assert s.collection_name == "recipes"
    assert s.port == 3000
    assert s.mongo_timeout_ms is None


def test_blank_uri_counts_as_missing(monkeypatch):
    monkeypatch.setenv("MONGODB_URI", "   ")
    assert Settings(_env_file=None).mongodb_uri is None


def test_redact_hides_credentials():
    assert mongo_adapter._redact("mongodb+srv://user:pw@cluster0.example.net/db") == (
        "mongodb+srv://***@cluster0.example.net/db"
    )
    assert mongo_adapter._redact("mongodb://localhost:27017") == "mongodb://localhost:27017"


# =============================================================================
# LIFESPAN
# =============================================================================


@pytest.fixture
def fake_mongo(monkeypatch):
    fake_client = FakeClient()
    attempts = []

    async def fake_connect(uri, timeout_ms=None):
        attempts.append(uri)
        return fake_client

    monkeypatch.setattr(mongo_adapter, "connect", fake_connect)
    monkeypatch.setattr(settings, "mongodb_uri", "mongodb://localhost:27017")
    monkeypatch.setattr(settings, "db_name", "kitchen")
    monkeypatch.setattr(settings, "collection_name", "recipes")
    fake_client.attempts = attempts
    return fake_client


def test_lifespan_builds_one_service_and_closes_client(fake_mongo):
    main.app.dependency_overrides.clear()

    with TestClient(main.app) as c:
        service = main.app.state.recipe_service
        health = c.get("/api/health")
        created = c.post("/api/recipes", json={"title": "Soup"})
        assert main.app.state.recipe_service is service

    assert health.json() == {"ok": True, "dbName": "kitchen", "collection": "recipes"}
    assert created.status_code == 201
    collection = fake_mongo["kitchen"]["recipes"]
    assert [d["title"] for d in collection.documents] == ["Soup"]
    assert collection.indexes[0][0] == "createdAt_desc"
    assert fake_mongo.closed
    assert main.app.state.recipe_service is None


@pytest.mark.anyio
async def test_lifespan_requires_connection_string(monkeypatch):
    calls = []

    async def fake_connect(uri, timeout_ms=None):
        calls.append(uri)

    monkeypatch.setattr(mongo_adapter, "connect", fake_connect)
    monkeypatch.setattr(settings, "mongodb_uri", None)

    with pytest.raises(ConfigurationError):
        async with main.lifespan(main.app):
            pass
    assert calls == []


@pytest.mark.anyio
async def test_connection_failure_is_fatal_after_retries(monkeypatch):
    attempts = []

    async def failing_connect(uri, timeout_ms=None):
        attempts.append(uri)
        raise ServerSelectionTimeoutError("connection refused")

    monkeypatch.setattr(mongo_adapter, "connect", failing_connect)
    monkeypatch.setattr(settings, "mongodb_uri", "mongodb://down:27017")
    monkeypatch.setattr(settings, "db_init_attempts", 3)
    monkeypatch.setattr(settings, "db_init_delay_sec", 0)

    with pytest.raises(ServerSelectionTimeoutError):
        async with main.lifespan(main.app):
            pass
    assert len(attempts) == 3


@pytest.mark.anyio
async def test_connection_retry_then_success(monkeypatch):
    fake_client = FakeClient()
    attempts = []

    async def flaky_connect(uri, timeout_ms=None):
        attempts.append(uri)
        if len(attempts) == 1:
            raise ServerSelectionTimeoutError("not yet")
        return fake_client

    monkeypatch.setattr(mongo_adapter, "connect", flaky_connect)
    monkeypatch.setattr(settings, "mongodb_uri", "mongodb://localhost:27017")
    monkeypatch.setattr(settings, "db_init_attempts", 2)
    monkeypatch.setattr(settings, "db_init_delay_sec", 0)

    async with main.lifespan(main.app):
        assert main.app.state.recipe_service is not None

    assert len(attempts) == 2
    assert fake_client.closed
