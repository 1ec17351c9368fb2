"""create recipe tables

Revision ID: 4f2a9c1d7e30
Revises:
Create Date: 2026-10-19

"""

from collections.abc import Sequence

import sqlalchemy as sa

from alembic import op

# revision identifiers, used by Alembic.
revision: str = "4f2a9c1d7e30"
down_revision: str | None = None
branch_labels: str | Sequence[str] | None = None
depends_on: str | Sequence[str] | None = None


def _timestamps() -> list[sa.Column]:
    return [
        sa.Column(
            "created_at",
            sa.DateTime(timezone=True),
            nullable=False,
            server_default=sa.func.now(),
        ),
        sa.Column(
            "updated_at",
            sa.DateTime(timezone=True),
            nullable=False,
            server_default=sa.func.now(),
            onupdate=sa.func.now(),
        ),
    ]


def upgrade() -> None:
    # Reference data
    op.create_table(
        "category",
        sa.Column("id", sa.Integer(), primary_key=True, index=True),
        sa.Column("description", sa.String(255), nullable=False, unique=True),
    )
    op.create_table(
        "unit_of_measure",
        sa.Column("id", sa.Integer(), primary_key=True, index=True),
        sa.Column("description", sa.String(255), nullable=False, unique=True),
    )

    op.create_table(
        "recipe",
        sa.Column("id", sa.Integer(), primary_key=True, index=True),
        sa.Column("description", sa.String(255), nullable=False),
        sa.Column("prep_time", sa.Integer(), nullable=True),
        sa.Column("cook_time", sa.Integer(), nullable=True),
        sa.Column("servings", sa.Integer(), nullable=True),
        sa.Column("source", sa.String(255), nullable=True),
        sa.Column("url", sa.String(255), nullable=True),
        sa.Column("directions", sa.Text(), nullable=True),
        sa.Column("difficulty", sa.String(20), nullable=True),
        sa.Column("image", sa.LargeBinary(), nullable=True),
        *_timestamps(),
    )

    # Owned by recipe, removed with it
    op.create_table(
        "notes",
        sa.Column("id", sa.Integer(), primary_key=True, index=True),
        sa.Column(
            "recipe_id",
            sa.Integer(),
            sa.ForeignKey("recipe.id", ondelete="CASCADE"),
            nullable=False,
            unique=True,
        ),
        sa.Column("recipe_notes", sa.Text(), nullable=True),
        *_timestamps(),
    )
    op.create_table(
        "ingredient",
        sa.Column("id", sa.Integer(), primary_key=True, index=True),
        sa.Column(
            "recipe_id",
            sa.Integer(),
            sa.ForeignKey("recipe.id", ondelete="CASCADE"),
            nullable=False,
            index=True,
        ),
        sa.Column("description", sa.String(255), nullable=True),
        sa.Column("amount", sa.Numeric(precision=10, scale=3), nullable=False),
        sa.Column(
            "uom_id", sa.Integer(), sa.ForeignKey("unit_of_measure.id"), nullable=False
        ),
        *_timestamps(),
    )

    op.create_table(
        "recipe_category",
        sa.Column(
            "recipe_id",
            sa.Integer(),
            sa.ForeignKey("recipe.id", ondelete="CASCADE"),
            primary_key=True,
        ),
        sa.Column("category_id", sa.Integer(), sa.ForeignKey("category.id"), primary_key=True),
    )


def downgrade() -> None:
    op.drop_table("recipe_category")
    op.drop_table("ingredient")
    op.drop_table("notes")
    op.drop_table("recipe")
    op.drop_table("unit_of_measure")
    op.drop_table("category")
