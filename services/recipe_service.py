from datetime import datetime, timezone
from typing import Any, Dict, List
import logging

from app.exceptions import NotFoundError, ServiceValidationError
from domain.identifiers import build_lookup, generate_id
from domain.mappers import RecipeMapper
from domain.schemas.recipe_schemas import CommentCreate, RecipeCreate, RecipeUpdate
from domain.text import normalize_category, split_lines
from repositories import RecipeRepository

logger = logging.getLogger("cookbook.service.recipes")

LINE_FIELDS = ("ingredients", "steps")


def _now() -> datetime:
    """Current UTC time at the millisecond precision MongoDB stores."""
    now = datetime.now(timezone.utc)
    return now.replace(microsecond=now.microsecond // 1000 * 1000)


class RecipeService:
    """
    Validation, normalization and response shaping for recipes.

    Holds the one repository built at startup; keeps no state between calls.
    Invalid input and malformed ids are rejected before the store is touched.
    """

    def __init__(self, repository: RecipeRepository):
        self.repository = repository

    async def health(self) -> Dict[str, Any]:
        if not await self.repository.ping():
            return {"ok": False}
        return {
            "ok": True,
            "dbName": self.repository.database_name,
            "collection": self.repository.collection_name,
        }

    async def list_recipes(self) -> List[Dict[str, Any]]:
        return await self.repository.list_all()

    async def create_recipe(self, payload: RecipeCreate) -> Dict[str, Any]:
        """
        Create a recipe from a client payload.

        Args:
            payload: title is required; other fields are optional

        Returns:
            The stored recipe, including its generated id and empty comments

        Raises:
            ServiceValidationError: if the title is blank
        """
        title = (payload.title or "").strip()
        if not title:
            raise ServiceValidationError("Title is required")

        document = {
            "_id": generate_id(),
            "title": title,
            "description": payload.description or "",
            "ingredients": split_lines(payload.ingredients),
            "steps": split_lines(payload.steps),
            "category": normalize_category(payload.category),
            "comments": [],
            "createdAt": _now(),
        }
        await self.repository.insert(document)
        logger.info("Created recipe %s (%s)", document["_id"], title)
        return RecipeMapper.to_public(document)

    async def update_recipe(
        self, recipe_id: str, payload: RecipeUpdate
    ) -> Dict[str, Any]:
        """
        Replace the fields present in ``payload`` on one recipe.

        Raises:
            InvalidIdentifierError: if recipe_id is malformed
            ServiceValidationError: if a title is given but blank
            NotFoundError: if no recipe matches
        """
        predicate = build_lookup(recipe_id)
        changes = payload.model_dump(exclude_unset=True)

        field_set: Dict[str, Any] = {}
        if "title" in changes:
            title = (changes["title"] or "").strip()
            if not title:
                raise ServiceValidationError("Title cannot be empty")
            field_set["title"] = title
        if "description" in changes:
            field_set["description"] = changes["description"] or ""
        for field in LINE_FIELDS:
            if field in changes:
                field_set[field] = split_lines(changes[field])
        if "category" in changes:
            field_set["category"] = normalize_category(changes["category"])

        recipe = await self.repository.find_and_update(predicate, field_set)
        if recipe is None:
            logger.warning("Recipe not found for update: %s", recipe_id)
            raise NotFoundError("Recipe not found")
        logger.info("Updated recipe %s fields=%s", recipe_id, sorted(field_set))
        return recipe

    async def delete_recipe(self, recipe_id: str) -> Dict[str, Any]:
        predicate = build_lookup(recipe_id)
        if not await self.repository.delete(predicate):
            logger.warning("Recipe not found for delete: %s", recipe_id)
            raise NotFoundError("Recipe not found")
        logger.info("Deleted recipe %s", recipe_id)
        return {"ok": True}

    async def add_comment(
        self, recipe_id: str, payload: CommentCreate
    ) -> Dict[str, Any]:
        """Append a comment and return the whole updated recipe."""
        predicate = build_lookup(recipe_id)
        text = (payload.text or "").strip()
        if not text:
            raise ServiceValidationError("Comment text is required")

        comment = {"text": text, "createdAt": _now()}
        recipe = await self.repository.append_comment(predicate, comment)
        if recipe is None:
            logger.warning("Recipe not found for comment: %s", recipe_id)
            raise NotFoundError("Recipe not found")
        return recipe
