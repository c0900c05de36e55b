"""
Recipe document mapper.
Every document leaving the store passes through ``RecipeMapper.to_public``.
"""

from datetime import datetime, timezone
from typing import Any, Dict, List, Mapping, Optional

from bson import ObjectId

from domain.text import normalize_category, split_lines


def as_utc(value: Any) -> Optional[datetime]:
    """Attach UTC to naive datetimes (MongoDB stores UTC without an offset)."""
    if not isinstance(value, datetime):
        return None
    if value.tzinfo is not None:
        return value
    return value.replace(tzinfo=timezone.utc)


def _text(value: Any) -> str:
    if value is None:
        return ""
    return value if isinstance(value, str) else str(value)


def _lines(value: Any) -> List[str]:
    if not isinstance(value, (list, tuple)):
        return split_lines(value)
    # older writers stored arbitrary JSON items; strings are kept as written
    return [_text(item) for item in value if item is not None]


class RecipeMapper:
    """Mapper between stored recipe documents and API payloads."""

    @staticmethod
    def to_public(document: Mapping[str, Any]) -> Dict[str, Any]:
        """
        Convert a MongoDB recipe document to its public shape.

        Args:
            document: raw document, either written by this service or a legacy one

        Returns:
            Dict with a string ``id`` and list-valued ``ingredients``, ``steps``
            and ``comments``
        """
        out = dict(document)
        raw_id = out.pop("_id")
        out["id"] = str(raw_id)
        out["title"] = _text(out.get("title"))
        out["description"] = _text(out.get("description"))
        out["ingredients"] = _lines(out.get("ingredients"))
        out["steps"] = _lines(out.get("steps"))
        category = out.get("category")
        out["category"] = normalize_category(None if category is None else _text(category))
        comments = out.get("comments")
        if not isinstance(comments, (list, tuple)):
            comments = []
        out["comments"] = [
            {"text": _text(c.get("text")), "createdAt": as_utc(c.get("createdAt"))}
            for c in comments
            if isinstance(c, Mapping)
        ]

        created_at = out.get("createdAt")
        if created_at is None and isinstance(raw_id, ObjectId):
            # legacy records without a timestamp
            created_at = raw_id.generation_time
        out["createdAt"] = as_utc(created_at)
        return out
