"""Create recipes table

Revision ID: 001
Revises: None
Create Date: 2024-01-15 00:00:00.000000+00:00

What:  Creates the `recipes` table backing the CRUD API.
How:   Portable column types (Uuid, JSON) so the same migration runs on
       PostgreSQL and SQLite.

Rollback: downgrade() drops the table (all recipes are lost).
"""

from typing import Sequence, Union
from alembic import op
import sqlalchemy as sa

# revision identifiers
revision: str = "001"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        "recipes",
        sa.Column("id", sa.Uuid(as_uuid=True), nullable=False, comment="Store-assigned identifier"),
        sa.Column("title", sa.Text(), nullable=True, comment="Recipe title"),
        sa.Column(
            "ingredients",
            sa.JSON(),
            nullable=False,
            comment="Ordered list of ingredient lines",
        ),
        sa.Column("instructions", sa.Text(), nullable=True, comment="Preparation instructions"),
        sa.Column("image", sa.Text(), nullable=True, comment="Optional image URL"),
        sa.Column(
            "created_at",
            sa.DateTime(timezone=True),
            server_default=sa.text("CURRENT_TIMESTAMP"),
            nullable=False,
            comment="When this recipe was created (UTC)",
        ),
        sa.PrimaryKeyConstraint("id"),
    )

    # Listings are ordered by insertion time
    op.create_index("idx_recipes_created_at", "recipes", ["created_at"])


def downgrade() -> None:
    op.drop_index("idx_recipes_created_at", table_name="recipes")
    op.drop_table("recipes")
