"""
Shared test doubles and helpers for the Cookbook test suite.

``FakeCollection`` speaks the subset of pymongo's async collection API that
``RecipeRepository`` uses, backed by a list of dicts in insertion order.
"""

import copy
from datetime import datetime, timedelta, timezone
from types import SimpleNamespace

from bson import ObjectId
from pymongo import DESCENDING, ReturnDocument
from pymongo.errors import DuplicateKeyError, ServerSelectionTimeoutError

_MISSING = object()
_OLDEST = datetime.min.replace(tzinfo=timezone.utc)


def _matches(document, flt):
    for key, condition in flt.items():
        if key == "$or":
            if not any(_matches(document, sub) for sub in condition):
                return False
        elif document.get(key, _MISSING) != condition:
            return False
    return True


class FakeDatabase:
    def __init__(self, name="cookbook_test"):
        self.name = name
        self.healthy = True
        self.collections = {}

    def __getitem__(self, collection_name):
        if collection_name not in self.collections:
            self.collections[collection_name] = FakeCollection(collection_name, database=self)
        return self.collections[collection_name]

    async def command(self, name, *args, **kwargs):
        if not self.healthy:
            raise ServerSelectionTimeoutError("no servers available")
        return {"ok": 1.0}


class FakeCursor:
    def __init__(self, documents, fail=False):
        self._documents = documents
        self._fail = fail

    def sort(self, key, direction=1):
        # stable, like MongoDB with equal keys; missing values sort lowest
        self._documents = sorted(
            self._documents,
            key=lambda d: d.get(key) or _OLDEST,
            reverse=direction == DESCENDING,
        )
        return self

    async def to_list(self, length=None):
        if self._fail:
            raise ServerSelectionTimeoutError("no servers available")
        docs = self._documents if length is None else self._documents[:length]
        return [copy.deepcopy(d) for d in docs]


class FakeCollection:
    """In-memory stand-in for ``pymongo.asynchronous.collection.AsyncCollection``."""

    def __init__(self, name="recipes", database=None):
        self.name = name
        self.database = database or FakeDatabase()
        self.documents = []
        self.indexes = []
        self.fail = False
        self.calls = []

    def _check(self, operation):
        self.calls.append(operation)
        if self.fail:
            raise ServerSelectionTimeoutError("no servers available")

    def _first(self, flt):
        return next((d for d in self.documents if _matches(d, flt)), None)

    async def create_index(self, keys, **kwargs):
        self._check("create_index")
        name = kwargs.get("name") or "_".join(f"{k}_{d}" for k, d in keys)
        self.indexes.append((name, list(keys)))
        return name

    async def insert_one(self, document):
        self._check("insert_one")
        if self._first({"_id": document["_id"]}) is not None:
            raise DuplicateKeyError("E11000 duplicate key error")
        self.documents.append(copy.deepcopy(document))
        return SimpleNamespace(inserted_id=document["_id"])

    def find(self, flt=None):
        self.calls.append("find")
        docs = [d for d in self.documents if _matches(d, flt or {})]
        return FakeCursor(docs, fail=self.fail)

    async def find_one(self, flt):
        self._check("find_one")
        found = self._first(flt)
        return copy.deepcopy(found) if found is not None else None

    async def find_one_and_update(
        self, flt, update, return_document=ReturnDocument.BEFORE
    ):
        self._check("find_one_and_update")
        found = self._first(flt)
        if found is None:
            return None
        before = copy.deepcopy(found)
        for key, value in update.get("$set", {}).items():
            found[key] = copy.deepcopy(value)
        for key, value in update.get("$push", {}).items():
            found.setdefault(key, []).append(copy.deepcopy(value))
        if return_document == ReturnDocument.AFTER:
            return copy.deepcopy(found)
        return before

    async def delete_one(self, flt):
        self._check("delete_one")
        found = self._first(flt)
        if found is None:
            return SimpleNamespace(deleted_count=0)
        self.documents.remove(found)
        return SimpleNamespace(deleted_count=1)


def make_recipe_document(title="Pancakes", created_at=None, **overrides):
    """A stored recipe document as this service writes it."""
    doc = {
        "_id": str(ObjectId()),
        "title": title,
        "description": "",
        "ingredients": ["flour", "milk", "egg"],
        "steps": ["Mix", "Fry"],
        "category": "Breakfast",
        "comments": [],
        "createdAt": created_at or datetime(2024, 5, 1, 12, 0, tzinfo=timezone.utc),
    }
    doc.update(overrides)
    return doc


def make_legacy_document(title="Old Stew", days_ago=30, **overrides):
    """A record written by an older version: native ObjectId ``_id``."""
    doc = make_recipe_document(
        title=title,
        created_at=datetime(2024, 1, 1, tzinfo=timezone.utc) - timedelta(days=days_ago),
        **overrides,
    )
    doc["_id"] = ObjectId()
    return doc


class FakeClient:
    """Stand-in for ``AsyncMongoClient``: ``client[db][collection]`` and ``close()``."""

    def __init__(self):
        self.closed = False
        self.databases = {}

    def __getitem__(self, db_name):
        if db_name not in self.databases:
            self.databases[db_name] = FakeDatabase(db_name)
        return self.databases[db_name]

    async def close(self):
        self.closed = True
