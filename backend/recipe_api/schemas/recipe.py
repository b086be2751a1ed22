"""
Recipe API — Pydantic Request/Response Schemas
================================================

What:  Pydantic models defining the API contract.
Why:   Automatic serialization and OpenAPI doc generation.
How:   FastAPI uses these models to parse request bodies, serialize responses,
       and build the Swagger page at /docs.

Design Decision:
    RecipeFields declares every field optional. Required-field enforcement
    belongs to the record store (RecipeStore.create), so a missing
    `ingredients` on POST is reported the same way as any other store
    rejection ("Invalid data"), and PUT can carry a partial body that is
    then applied as a full replacement.
"""

from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, Field


# ══════════════════════════════════════════════════════════════════════════
# Request Models
# ══════════════════════════════════════════════════════════════════════════


class RecipeFields(BaseModel):
    """Body of POST /api/recipes and PUT /api/recipes/{id}."""

    title: Optional[str] = Field(default=None, description="Recipe title")
    ingredients: Optional[List[str]] = Field(default=None, description="Recipe ingredients")
    instructions: Optional[str] = Field(default=None, description="Recipe instructions")
    image: Optional[str] = Field(default=None, description="Recipe image URL")

    model_config = {
        "json_schema_extra": {
            "example": {
                "title": "Chocolate Chip Cookies",
                "ingredients": ["flour", "sugar", "chocolate chips"],
                "instructions": "Mix ingredients. Bake at 350 for 15 minutes.",
                "image": "https://www.example.com/recipe-image.jpg",
            }
        }
    }


# ══════════════════════════════════════════════════════════════════════════
# Response Models
# ══════════════════════════════════════════════════════════════════════════


class RecipeResponse(BaseModel):
    """
    What:  Full representation of a stored recipe.
    Who:   Returned by list, get, update, and (nested) create.
    """
    id: str = Field(description="The auto-generated id of the recipe")
    title: Optional[str] = Field(default=None, description="Recipe title")
    ingredients: List[str] = Field(default_factory=list, description="Recipe ingredients")
    instructions: Optional[str] = Field(default=None, description="Recipe instructions")
    image: Optional[str] = Field(default=None, description="Recipe image URL")
    created_at: Optional[datetime] = Field(default=None, description="Creation timestamp (UTC)")

    @classmethod
    def from_model(cls, recipe) -> "RecipeResponse":
        """Builds a response from a Recipe ORM instance (UUID id → string)."""
        return cls(
            id=str(recipe.id),
            title=recipe.title,
            ingredients=list(recipe.ingredients or []),
            instructions=recipe.instructions,
            image=recipe.image,
            created_at=recipe.created_at,
        )


class RecipeCreatedResponse(BaseModel):
    """Returned by POST /api/recipes with HTTP 201."""
    message: str = Field(default="Recipe Created", description="Human-readable success message")
    recipe: RecipeResponse = Field(description="The stored recipe including its id")


class MessageResponse(BaseModel):
    """Bare confirmation message, e.g. after a delete."""
    message: str = Field(description="Human-readable confirmation")


# ══════════════════════════════════════════════════════════════════════════
# Error / Health Models
# ══════════════════════════════════════════════════════════════════════════


class ErrorResponse(BaseModel):
    """
    What:  Standardized error body for all API errors.

    Example:
        {
            "error": "Recipe not found",
            "code": "not_found",
            "message": "Recipe not found",
            "request_id": "1f3a9c2e"
        }
    """
    error: str = Field(description="Human-readable error description")
    code: str = Field(description="Machine-readable error kind")
    message: str = Field(description="Same text as `error`")
    request_id: Optional[str] = Field(default=None, description="Request correlation ID")


class HealthResponse(BaseModel):
    """Health check response showing service and database status."""
    status: str = Field(description="Overall service status: healthy, unhealthy")
    version: str = Field(description="Application version")
    database: str = Field(description="Database connectivity: connected, disconnected")
    uptime_seconds: float = Field(description="Seconds since service started")
