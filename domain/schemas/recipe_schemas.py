"""Pydantic schemas for recipe requests and responses."""

from pydantic import BaseModel, Field, ConfigDict
from typing import List, Optional, Union
from datetime import datetime

# Multi-line text from a form textarea, or an already split list.
LinesInput = Optional[Union[List[str], str]]


class RecipeCreate(BaseModel):
    """Recipe creation payload.

    ``title`` is optional here so a missing title is reported as a 400 by the
    service rather than as a schema error.
    """

    title: Optional[str] = None
    description: Optional[str] = None
    ingredients: LinesInput = None
    steps: LinesInput = None
    category: Optional[str] = None

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "title": "Tomato Soup",
                "description": "Quick weeknight soup",
                "ingredients": "4 tomatoes\n1 onion\nsalt",
                "steps": "Chop everything\nSimmer for 20 minutes\nBlend",
                "category": "Soups",
            }
        }
    )


class RecipeUpdate(BaseModel):
    """Partial recipe update. Only fields present in the body are applied."""

    title: Optional[str] = None
    description: Optional[str] = None
    ingredients: LinesInput = None
    steps: LinesInput = None
    category: Optional[str] = None


class CommentCreate(BaseModel):
    text: Optional[str] = None


class CommentResponse(BaseModel):
    """A comment embedded in a recipe."""

    model_config = ConfigDict(populate_by_name=True)

    text: str
    created_at: Optional[datetime] = Field(default=None, alias="createdAt")


class RecipeResponse(BaseModel):
    """Public recipe shape; ``id`` is always a string."""

    model_config = ConfigDict(populate_by_name=True)

    id: str
    title: str
    description: str = ""
    ingredients: List[str] = []
    steps: List[str] = []
    category: str
    comments: List[CommentResponse] = []
    created_at: Optional[datetime] = Field(default=None, alias="createdAt")


class HealthResponse(BaseModel):
    """Health check response"""

    model_config = ConfigDict(populate_by_name=True)

    ok: bool
    db_name: Optional[str] = Field(default=None, alias="dbName")
    collection: Optional[str] = None


class DeleteResponse(BaseModel):
    ok: bool = True


class ErrorResponse(BaseModel):
    """Error body returned by every failing endpoint"""

    error: str = Field(..., description="Human-readable message")
    code: Optional[str] = Field(None, description="Machine-readable error code")
