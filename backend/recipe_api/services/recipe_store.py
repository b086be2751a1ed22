"""
Recipe API — Record Store
===========================

What:  CRUD primitives over the `recipes` table.
How:   Each method performs one unit of work on the caller's AsyncSession
       and commits it before returning, so every write is atomic on its own.
Who:   Called by RecipeService only.

Contract:
    find_all()                        -> list of Recipe (creation order)
    find_by_id(id)                    -> Recipe | None
    create(fields)                    -> Recipe   (RecipeValidationError on bad schema)
    find_by_id_and_update(id, fields) -> Recipe | None  (post-update state)
    find_by_id_and_delete(id)         -> Recipe | None  (the removed record)

    Any id that is not a UUID raises MalformedIdError before touching the
    database. Database driver errors propagate unchanged.
"""

import logging
import uuid
from typing import Any, Dict, List, Optional

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from recipe_api.exceptions import MalformedIdError, RecipeValidationError
from recipe_api.models.recipe import Recipe

logger = logging.getLogger(__name__)

MUTABLE_FIELDS = ("title", "ingredients", "instructions", "image")


def parse_recipe_id(raw_id: str) -> uuid.UUID:
    """Converts a path identifier to the store's UUID key."""
    try:
        return uuid.UUID(str(raw_id))
    except ValueError:
        raise MalformedIdError(raw_id) from None


def validate_recipe_fields(fields: Dict[str, Any]) -> None:
    """
    Enforces the recipe schema for newly created documents.

    Required: title (string, not ""), ingredients (list of strings),
    instructions (string). Optional: image (string).
    """
    title = fields.get("title")
    if not isinstance(title, str) or title == "":
        raise RecipeValidationError("title", "is required")

    ingredients = fields.get("ingredients")
    if not isinstance(ingredients, list):
        raise RecipeValidationError("ingredients", "is required")
    if not all(isinstance(item, str) for item in ingredients):
        raise RecipeValidationError("ingredients", "must contain only strings")

    if not isinstance(fields.get("instructions"), str):
        raise RecipeValidationError("instructions", "is required")

    image = fields.get("image")
    if image is not None and not isinstance(image, str):
        raise RecipeValidationError("image", "must be a string")


class RecipeStore:
    """Persistence collaborator for Recipe documents."""

    async def find_all(self, db: AsyncSession) -> List[Recipe]:
        result = await db.execute(select(Recipe).order_by(Recipe.created_at))
        return list(result.scalars().all())

    async def find_by_id(self, db: AsyncSession, recipe_id: str) -> Optional[Recipe]:
        return await db.get(Recipe, parse_recipe_id(recipe_id))

    async def create(self, db: AsyncSession, fields: Dict[str, Any]) -> Recipe:
        """Validates and inserts a new recipe; the id is assigned on insert."""
        validate_recipe_fields(fields)

        recipe = Recipe(
            title=fields["title"],
            ingredients=list(fields["ingredients"]),
            instructions=fields["instructions"],
            image=fields.get("image"),
        )
        db.add(recipe)
        await db.commit()
        logger.info("Recipe created: %s", recipe.id)
        return recipe

    async def find_by_id_and_update(
        self, db: AsyncSession, recipe_id: str, fields: Dict[str, Any]
    ) -> Optional[Recipe]:
        """
        Overwrites all mutable fields of an existing recipe.

        Fields missing from `fields` are cleared (ingredients become an
        empty list). Create-time validation is not applied.
        """
        recipe = await db.get(Recipe, parse_recipe_id(recipe_id))
        if recipe is None:
            return None

        for name in MUTABLE_FIELDS:
            value = fields.get(name)
            if name == "ingredients":
                value = list(value) if value is not None else []
            setattr(recipe, name, value)

        await db.commit()
        logger.info("Recipe updated: %s", recipe.id)
        return recipe

    async def find_by_id_and_delete(
        self, db: AsyncSession, recipe_id: str
    ) -> Optional[Recipe]:
        recipe = await db.get(Recipe, parse_recipe_id(recipe_id))
        if recipe is None:
            return None

        await db.delete(recipe)
        await db.commit()
        logger.info("Recipe deleted: %s", recipe.id)
        return recipe


# ── Singleton Instance ────────────────────────────────────────────────────
recipe_store = RecipeStore()
