"""
Domain layer - Recipe identity, text normalization, schemas and mappers.
"""

from domain import identifiers, mappers, schemas, text

__all__ = ["identifiers", "mappers", "schemas", "text"]
