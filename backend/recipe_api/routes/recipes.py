"""
Recipe API — Recipe Route Handlers
====================================

What:  The five CRUD routes for the Recipe resource.
How:   Each handler extracts path/body input, makes one RecipeService call,
       and returns its result. Errors are raised as application exceptions
       and rendered by the global handlers in main.py.

Route Inventory (mounted under /api):
    GET    /recipes        list all recipes
    GET    /recipes/{id}   fetch one recipe
    POST   /recipes        create a recipe            (201)
    PUT    /recipes/{id}   replace a recipe's fields
    DELETE /recipes/{id}   delete a recipe
"""

import logging
from typing import List

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from recipe_api.database import get_db_session
from recipe_api.schemas.recipe import (
    ErrorResponse,
    MessageResponse,
    RecipeCreatedResponse,
    RecipeFields,
    RecipeResponse,
)
from recipe_api.services.recipe_service import recipe_service

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["Recipes"])


@router.get(
    "/recipes",
    response_model=List[RecipeResponse],
    responses={
        500: {"description": "Server error", "model": ErrorResponse},
    },
    summary="Returns the list of all the recipes",
)
async def list_recipes(
    db: AsyncSession = Depends(get_db_session),
) -> List[RecipeResponse]:
    return await recipe_service.list_recipes(db)


@router.get(
    "/recipes/{recipe_id}",
    response_model=RecipeResponse,
    responses={
        404: {"description": "The recipe was not found", "model": ErrorResponse},
        500: {"description": "Server error", "model": ErrorResponse},
    },
    summary="Get the recipe by id",
)
async def get_recipe(
    recipe_id: str,
    db: AsyncSession = Depends(get_db_session),
) -> RecipeResponse:
    """
    The id is taken as a plain string so that a malformed value reaches the
    store and is reported like any other store failure (500), not as a 422.
    """
    return await recipe_service.get_recipe(db, recipe_id)


@router.post(
    "/recipes",
    status_code=201,
    response_model=RecipeCreatedResponse,
    responses={
        400: {"description": "Invalid data", "model": ErrorResponse},
    },
    summary="Create a new recipe",
)
async def create_recipe(
    payload: RecipeFields,
    db: AsyncSession = Depends(get_db_session),
) -> RecipeCreatedResponse:
    logger.debug("Create recipe request: title=%r", payload.title)
    return await recipe_service.create_recipe(db, payload.model_dump())


@router.put(
    "/recipes/{recipe_id}",
    response_model=RecipeResponse,
    responses={
        404: {"description": "The recipe was not found", "model": ErrorResponse},
        500: {"description": "Server error", "model": ErrorResponse},
    },
    summary="Update the recipe by the id",
    description=(
        "Full replacement: title, ingredients, instructions and image are all "
        "overwritten. Fields omitted from the body are cleared."
    ),
)
async def update_recipe(
    recipe_id: str,
    payload: RecipeFields,
    db: AsyncSession = Depends(get_db_session),
) -> RecipeResponse:
    return await recipe_service.update_recipe(db, recipe_id, payload.model_dump())


@router.delete(
    "/recipes/{recipe_id}",
    response_model=MessageResponse,
    responses={
        404: {"description": "The recipe was not found", "model": ErrorResponse},
        500: {"description": "Server error", "model": ErrorResponse},
    },
    summary="Remove the recipe by id",
)
async def delete_recipe(
    recipe_id: str,
    db: AsyncSession = Depends(get_db_session),
) -> MessageResponse:
    return await recipe_service.delete_recipe(db, recipe_id)
