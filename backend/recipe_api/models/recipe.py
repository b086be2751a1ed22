"""
Recipe API — Recipe SQLAlchemy Model
======================================

What:  ORM model representing the `recipes` table.
How:   Inherits from the shared DeclarativeBase; Alembic reads this for migrations.
Who:   Used by RecipeStore for CRUD operations and by Alembic for schema management.

Table Design:
    - id: UUID assigned on insert, never reused
    - title / instructions: TEXT, nullable at the column level because a
      full-replacement update may clear them; create-time presence is
      enforced by RecipeStore, not by the table
    - ingredients: JSON array so the same model works on PostgreSQL and SQLite
    - image: optional URL
    - created_at: insertion time, gives listings a stable natural order
"""

import uuid
from datetime import datetime, timezone
from typing import List, Optional

from sqlalchemy import JSON, DateTime, Index, Text, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from recipe_api.database import Base


class Recipe(Base):
    """
    A stored recipe document.

    Lifecycle:
        1. Created by POST (all required fields validated by the store)
        2. Replaced in place by PUT (all four mutable fields overwritten)
        3. Deleted by DELETE (hard delete, no tombstone)
    """

    __tablename__ = "recipes"

    id: Mapped[uuid.UUID] = mapped_column(
        Uuid(as_uuid=True),
        primary_key=True,
        default=uuid.uuid4,
        comment="Store-assigned identifier",
    )

    title: Mapped[Optional[str]] = mapped_column(
        Text,
        nullable=True,
        comment="Recipe title",
    )

    ingredients: Mapped[List[str]] = mapped_column(
        JSON,
        nullable=False,
        default=list,
        comment="Ordered list of ingredient lines",
    )

    instructions: Mapped[Optional[str]] = mapped_column(
        Text,
        nullable=True,
        comment="Preparation instructions",
    )

    image: Mapped[Optional[str]] = mapped_column(
        Text,
        nullable=True,
        default=None,
        comment="Optional image URL",
    )

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
        comment="When this recipe was created (UTC)",
    )

    __table_args__ = (
        Index("idx_recipes_created_at", created_at),
    )

    def __repr__(self) -> str:
        return f"<Recipe(id={self.id}, title={self.title!r})>"
