"""
Recipe API — Record Store Tests
=================================

What:  Tests for RecipeStore against an in-memory SQLite database, plus the
       pure schema/id helpers.

What we test:
    ✅ Schema validation on create (required fields, types)
    ✅ Id parsing (malformed ids raise MalformedIdError)
    ✅ Create assigns an id; find_by_id returns the same fields
    ✅ Update is a full replacement
    ✅ Delete removes the record and returns it
    ✅ Unknown ids return None
"""

import uuid

import pytest

from recipe_api.exceptions import MalformedIdError, RecipeValidationError
from recipe_api.services.recipe_store import (
    RecipeStore,
    parse_recipe_id,
    validate_recipe_fields,
)


class TestValidateRecipeFields:
    """Create-time schema enforcement."""

    def test_valid_fields_pass(self, sample_recipe_fields):
        validate_recipe_fields(sample_recipe_fields)

    def test_image_is_optional(self, sample_recipe_fields):
        sample_recipe_fields["image"] = None
        validate_recipe_fields(sample_recipe_fields)

    @pytest.mark.parametrize("field", ["title", "ingredients", "instructions"])
    def test_missing_required_field_rejected(self, sample_recipe_fields, field):
        sample_recipe_fields[field] = None
        with pytest.raises(RecipeValidationError) as exc_info:
            validate_recipe_fields(sample_recipe_fields)
        assert exc_info.value.field == field

    def test_empty_title_rejected(self, sample_recipe_fields):
        sample_recipe_fields["title"] = ""
        with pytest.raises(RecipeValidationError, match="title"):
            validate_recipe_fields(sample_recipe_fields)

    def test_whitespace_title_accepted(self, sample_recipe_fields):
        sample_recipe_fields["title"] = "   "
        validate_recipe_fields(sample_recipe_fields)

    def test_non_string_ingredient_rejected(self, sample_recipe_fields):
        sample_recipe_fields["ingredients"] = ["flour", 3]
        with pytest.raises(RecipeValidationError, match="ingredients"):
            validate_recipe_fields(sample_recipe_fields)

    def test_empty_ingredient_list_allowed(self, sample_recipe_fields):
        sample_recipe_fields["ingredients"] = []
        validate_recipe_fields(sample_recipe_fields)


class TestParseRecipeId:

    def test_uuid_string_parsed(self):
        raw = str(uuid.uuid4())
        assert parse_recipe_id(raw) == uuid.UUID(raw)

    @pytest.mark.parametrize("raw", ["not-an-id", "123", "", "64b7f1c2e4b0a1a2b3c4d5e6"])
    def test_malformed_id_raises(self, raw):
        with pytest.raises(MalformedIdError):
            parse_recipe_id(raw)


class TestRecipeStore:
    """CRUD primitives against a real (in-memory) database."""

    def setup_method(self):
        self.store = RecipeStore()

    @pytest.mark.asyncio
    async def test_create_assigns_id(self, db_session, sample_recipe_fields):
        recipe = await self.store.create(db_session, sample_recipe_fields)

        assert isinstance(recipe.id, uuid.UUID)
        assert recipe.created_at is not None
        assert recipe.title == sample_recipe_fields["title"]

    @pytest.mark.asyncio
    async def test_create_rejects_invalid_document(self, db_session, sample_recipe_fields):
        del sample_recipe_fields["ingredients"]

        with pytest.raises(RecipeValidationError):
            await self.store.create(db_session, sample_recipe_fields)

        assert await self.store.find_all(db_session) == []

    @pytest.mark.asyncio
    async def test_find_by_id_returns_stored_fields(self, db_session_factory, sample_recipe_fields):
        async with db_session_factory() as session:
            created = await self.store.create(session, sample_recipe_fields)

        async with db_session_factory() as session:
            found = await self.store.find_by_id(session, str(created.id))

        assert found is not None
        assert found.title == sample_recipe_fields["title"]
        assert found.ingredients == sample_recipe_fields["ingredients"]
        assert found.instructions == sample_recipe_fields["instructions"]
        assert found.image == sample_recipe_fields["image"]

    @pytest.mark.asyncio
    async def test_find_by_id_unknown_returns_none(self, db_session):
        assert await self.store.find_by_id(db_session, str(uuid.uuid4())) is None

    @pytest.mark.asyncio
    async def test_find_by_id_malformed_raises(self, db_session):
        with pytest.raises(MalformedIdError):
            await self.store.find_by_id(db_session, "nope")

    @pytest.mark.asyncio
    async def test_find_all_returns_every_recipe(self, db_session, sample_recipe_fields):
        for i in range(3):
            await self.store.create(db_session, {**sample_recipe_fields, "title": f"Recipe {i}"})

        recipes = await self.store.find_all(db_session)

        assert [r.title for r in recipes] == ["Recipe 0", "Recipe 1", "Recipe 2"]

    @pytest.mark.asyncio
    async def test_update_replaces_all_fields(self, db_session_factory, sample_recipe_fields):
        async with db_session_factory() as session:
            created = await self.store.create(session, sample_recipe_fields)

        async with db_session_factory() as session:
            updated = await self.store.find_by_id_and_update(
                session, str(created.id), {"title": "Plain Cookies"}
            )

        assert updated.id == created.id
        assert updated.title == "Plain Cookies"
        assert updated.ingredients == []
        assert updated.instructions is None
        assert updated.image is None

        async with db_session_factory() as session:
            reloaded = await self.store.find_by_id(session, str(created.id))
        assert reloaded.title == "Plain Cookies"
        assert reloaded.ingredients == []
        assert reloaded.image is None

    @pytest.mark.asyncio
    async def test_update_unknown_returns_none(self, db_session):
        result = await self.store.find_by_id_and_update(
            db_session, str(uuid.uuid4()), {"title": "x"}
        )
        assert result is None

    @pytest.mark.asyncio
    async def test_delete_removes_record(self, db_session, sample_recipe_fields):
        created = await self.store.create(db_session, sample_recipe_fields)
        recipe_id = str(created.id)

        deleted = await self.store.find_by_id_and_delete(db_session, recipe_id)

        assert deleted is not None
        assert deleted.title == sample_recipe_fields["title"]
        assert await self.store.find_by_id(db_session, recipe_id) is None

    @pytest.mark.asyncio
    async def test_delete_unknown_returns_none(self, db_session):
        assert await self.store.find_by_id_and_delete(db_session, str(uuid.uuid4())) is None
