#!/usr/bin/env python3
"""
Standalone database initialization script.
Creates the recipe collection indexes using the configured connection.
"""

import sys
import os

# Ensure we're using the right Python path
project_root = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
sys.path.insert(0, project_root)

import anyio

from adapters import mongo_adapter
from app.config import settings
from repositories import RecipeRepository


async def init_indexes() -> None:
    client = await mongo_adapter.connect(
        settings.mongodb_uri, timeout_ms=settings.mongo_timeout_ms
    )
    try:
        repository = RecipeRepository(client[settings.db_name][settings.collection_name])
        await repository.ensure_indexes()
    finally:
        await mongo_adapter.close(client)


def main() -> int:
    if not settings.mongodb_uri:
        print("MONGODB_URI missing: set it in the environment or connect.env")
        return 1
    try:
        anyio.run(init_indexes)
    except Exception as exc:
        print(f"Index creation failed: {exc}")
        return 1
    print(f"Indexes ready on {settings.db_name}/{settings.collection_name}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
