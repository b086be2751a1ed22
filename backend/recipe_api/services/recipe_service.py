"""
Recipe API — Recipe Service (Outcome Mapping)
===============================================

What:  Turns Record Store outcomes into application exceptions and response models.
Why:   Keeps route handlers free of error translation and the store free of HTTP concerns.
How:   One awaited store call per operation, then:
           record        → response schema
           None          → NotFoundError      (404)
           any exception → ValidationError    (400) on create
                           DatabaseError      (500) everywhere else
Who:   Called by the recipes route handlers.

Design Decision:
    Malformed identifiers surface from the store as MalformedIdError and are
    folded into DatabaseError like any other store failure. Clients cannot
    tell a bad id from an outage; the distinction is kept in the server log.
"""

import logging
from typing import Any, Dict, List, Optional

from sqlalchemy.ext.asyncio import AsyncSession

from recipe_api.exceptions import (
    DatabaseError,
    NotFoundError,
    RecipeValidationError,
    ValidationError,
)
from recipe_api.schemas.recipe import (
    MessageResponse,
    RecipeCreatedResponse,
    RecipeResponse,
)
from recipe_api.services.recipe_store import RecipeStore, recipe_store

logger = logging.getLogger(__name__)


class RecipeService:
    """
    Business logic layer for recipe operations.

    Stateless apart from its store collaborator; no retries, no locking.
    Concurrent writes to one recipe are resolved by the database.
    """

    def __init__(self, store: Optional[RecipeStore] = None):
        self.store = store if store is not None else recipe_store

    async def list_recipes(self, db: AsyncSession) -> List[RecipeResponse]:
        try:
            recipes = await self.store.find_all(db)
        except Exception as e:
            logger.error("Store error listing recipes: %s", str(e), exc_info=True)
            raise DatabaseError(context={"error_type": type(e).__name__})

        return [RecipeResponse.from_model(recipe) for recipe in recipes]

    async def get_recipe(self, db: AsyncSession, recipe_id: str) -> RecipeResponse:
        """
        Retrieve a single recipe by ID.

        Raises:
            NotFoundError: no recipe with this id (→ 404)
            DatabaseError: malformed id or store failure (→ 500)
        """
        try:
            recipe = await self.store.find_by_id(db, recipe_id)
        except Exception as e:
            logger.error("Store error fetching recipe %s: %s", recipe_id, str(e))
            raise DatabaseError(
                context={"recipe_id": recipe_id, "error_type": type(e).__name__},
            )

        if recipe is None:
            raise NotFoundError(resource_id=recipe_id)
        return RecipeResponse.from_model(recipe)

    async def create_recipe(
        self, db: AsyncSession, fields: Dict[str, Any]
    ) -> RecipeCreatedResponse:
        """
        Store a new recipe.

        Every failure here is reported as ValidationError ("Invalid data"),
        whether the schema check rejected the document or the database
        itself failed.
        """
        try:
            recipe = await self.store.create(db, fields)
        except RecipeValidationError as e:
            logger.warning("Rejected recipe: %s", e)
            raise ValidationError(field=e.field, context={"reason": e.reason})
        except Exception as e:
            logger.error("Store error creating recipe: %s", str(e), exc_info=True)
            raise ValidationError(context={"error_type": type(e).__name__})

        return RecipeCreatedResponse(recipe=RecipeResponse.from_model(recipe))

    async def update_recipe(
        self, db: AsyncSession, recipe_id: str, fields: Dict[str, Any]
    ) -> RecipeResponse:
        """Replace all mutable fields of a recipe and return the new state."""
        try:
            recipe = await self.store.find_by_id_and_update(db, recipe_id, fields)
        except Exception as e:
            logger.error("Store error updating recipe %s: %s", recipe_id, str(e))
            raise DatabaseError(
                context={"recipe_id": recipe_id, "error_type": type(e).__name__},
            )

        if recipe is None:
            raise NotFoundError(resource_id=recipe_id)
        return RecipeResponse.from_model(recipe)

    async def delete_recipe(self, db: AsyncSession, recipe_id: str) -> MessageResponse:
        try:
            recipe = await self.store.find_by_id_and_delete(db, recipe_id)
        except Exception as e:
            logger.error("Store error deleting recipe %s: %s", recipe_id, str(e))
            raise DatabaseError(
                context={"recipe_id": recipe_id, "error_type": type(e).__name__},
            )

        if recipe is None:
            raise NotFoundError(resource_id=recipe_id)
        return MessageResponse(message="Recipe deleted")


# ── Singleton Instance ────────────────────────────────────────────────────
recipe_service = RecipeService()
