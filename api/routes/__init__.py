"""API routes package"""

from . import health, recipes

__all__ = ["health", "recipes"]
