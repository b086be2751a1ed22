# Routes package init
"""
Recipe API — API Routes Package
=================================

Route Inventory:
    - recipes.py: GET/POST /api/recipes, GET/PUT/DELETE /api/recipes/{id}
    - health.py:  GET /health (database check)

Routes are thin: extract input, call RecipeService, return its result.
Status codes for failures come from the global exception handlers.
"""
