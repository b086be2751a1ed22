# Services package init
"""
Recipe API — Services Layer
=============================

What:  Layer between routes (HTTP) and the database (persistence).

Service Inventory:
    - RecipeStore:   Record Store primitives (find/create/update/delete) with
                     create-time schema validation
    - RecipeService: Maps store outcomes to NotFoundError / ValidationError /
                     DatabaseError and to response schemas
"""
