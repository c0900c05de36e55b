"""
Recipe identity: how ids are generated and how a path id becomes a query.

New recipes store ``_id`` as a plain string. Records written by earlier
versions of the service may hold a native ``ObjectId`` instead, so a lookup
for a 24-hex id matches either representation.
"""

import re
from typing import Any, Dict

from bson import ObjectId

from app.exceptions import InvalidIdentifierError

# Accepted shape of an id taken from a URL path segment.
_ID_TOKEN_RE = re.compile(r"[A-Za-z0-9_-]{1,64}")


def generate_id() -> str:
    """Return a new globally unique id, stored as a string."""
    return str(ObjectId())


def is_valid_id(raw_id: Any) -> bool:
    return isinstance(raw_id, str) and _ID_TOKEN_RE.fullmatch(raw_id) is not None


def build_lookup(raw_id: str) -> Dict[str, Any]:
    """Build a MongoDB filter matching the recipe identified by ``raw_id``.

    Raises:
        InvalidIdentifierError: if ``raw_id`` cannot be a recipe id
    """
    if not is_valid_id(raw_id):
        raise InvalidIdentifierError("Invalid recipe id", details={"id": str(raw_id)})
    if ObjectId.is_valid(raw_id):
        return {"$or": [{"_id": raw_id}, {"_id": ObjectId(raw_id)}]}
    return {"_id": raw_id}
