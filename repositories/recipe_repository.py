"""
Recipe Repository - Data access layer for recipe documents (MongoDB)
"""

from contextlib import contextmanager
from typing import Any, Dict, Iterator, List, Mapping, Optional
import logging

from pymongo import DESCENDING, ReturnDocument
from pymongo.errors import PyMongoError

from app.exceptions import StoreError
from domain.mappers import RecipeMapper

logger = logging.getLogger("cookbook.repository.recipes")


@contextmanager
def _store_errors(message: str) -> Iterator[None]:
    """Translate driver failures into ``StoreError`` carrying ``message``."""
    try:
        yield
    except PyMongoError as exc:
        logger.exception("MongoDB operation failed: %s", message)
        raise StoreError(message) from exc


class RecipeRepository:
    """
    Repository for recipe documents in one MongoDB collection.

    Performs no business validation. Every returned recipe has gone through
    ``RecipeMapper.to_public``. Mutations use single-document atomic
    operators, so readers never see a half-applied update.
    """

    def __init__(self, collection):
        """Initialize repository with an async pymongo collection"""
        self.collection = collection

    @property
    def database_name(self) -> str:
        return self.collection.database.name

    @property
    def collection_name(self) -> str:
        return self.collection.name

    async def ensure_indexes(self) -> None:
        """Create the index backing the newest-first listing."""
        with _store_errors("Failed to create indexes"):
            await self.collection.create_index(
                [("createdAt", DESCENDING)], name="createdAt_desc"
            )

    async def insert(self, document: Mapping[str, Any]) -> str:
        """Persist a fully formed recipe document.

        Args:
            document: recipe with ``_id`` already assigned

        Returns:
            The stored id as a string
        """
        with _store_errors("Server error while saving recipe"):
            result = await self.collection.insert_one(dict(document))
        logger.info("Inserted recipe with _id: %s", result.inserted_id)
        return str(result.inserted_id)

    async def list_all(self) -> List[Dict[str, Any]]:
        """Get all recipes, most recently created first"""
        with _store_errors("Failed to fetch recipes"):
            cursor = self.collection.find({}).sort("createdAt", DESCENDING)
            documents = await cursor.to_list(length=None)
        return [RecipeMapper.to_public(doc) for doc in documents]

    async def find_and_update(
        self, predicate: Mapping[str, Any], field_set: Mapping[str, Any]
    ) -> Optional[Dict[str, Any]]:
        """Overwrite the fields in ``field_set`` on the matching recipe.

        Fields absent from ``field_set`` are left untouched. An empty
        ``field_set`` reads the record without writing.

        Returns:
            The post-update recipe, or None if nothing matched
        """
        with _store_errors("Failed to update recipe"):
            if not field_set:
                document = await self.collection.find_one(dict(predicate))
            else:
                document = await self.collection.find_one_and_update(
                    dict(predicate),
                    {"$set": dict(field_set)},
                    return_document=ReturnDocument.AFTER,
                )
        return RecipeMapper.to_public(document) if document else None

    async def append_comment(
        self, predicate: Mapping[str, Any], comment: Mapping[str, Any]
    ) -> Optional[Dict[str, Any]]:
        """Append one comment to the matching recipe.

        Returns:
            The updated recipe, or None if nothing matched
        """
        with _store_errors("Failed to add comment"):
            document = await self.collection.find_one_and_update(
                dict(predicate),
                {"$push": {"comments": dict(comment)}},
                return_document=ReturnDocument.AFTER,
            )
        return RecipeMapper.to_public(document) if document else None

    async def delete(self, predicate: Mapping[str, Any]) -> bool:
        """Delete the matching recipe. Returns False if nothing matched."""
        with _store_errors("Failed to delete recipe"):
            result = await self.collection.delete_one(dict(predicate))
        return result.deleted_count > 0

    async def ping(self) -> bool:
        """Liveness probe of the underlying connection"""
        try:
            await self.collection.database.command("ping")
            return True
        except PyMongoError:
            logger.exception("MongoDB ping failed")
            return False
