"""
Recipe API — Application Package Initializer
=============================================

What: Marks the `recipe_api` directory as a Python package.
Why:  Enables module imports like `from recipe_api.config import settings`.
Who:  Used implicitly by Python's import system and explicitly by Alembic, pytest, and uvicorn.

Architecture Note:
    The backend is split into thin layers:

    ┌─────────────────────────────────────┐
    │           Routes (API Layer)        │  ← HTTP concerns only
    ├─────────────────────────────────────┤
    │     RecipeService (outcome mapping) │  ← None → 404, failures → 400/500
    ├─────────────────────────────────────┤
    │     RecipeStore (Record Store)      │  ← CRUD primitives, schema checks
    ├─────────────────────────────────────┤
    │        Database (Persistence)       │  ← Async SQLAlchemy sessions
    └─────────────────────────────────────┘

    Routes never touch the session directly; the service never builds queries.
"""

__version__ = "1.0.0"
