"""Initial schema - property, property_value, category, category_property.

Revision ID: 001
Revises:
Create Date: 2026-10-17

"""

from collections.abc import Sequence

from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision: str = "001"
down_revision: str | None = None
branch_labels: str | Sequence[str] | None = None
depends_on: str | Sequence[str] | None = None


def upgrade() -> None:
    # ids come from the definition files, never from a sequence
    op.create_table(
        "property",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=False),
        sa.Column("name", sa.String(255), nullable=False),
        sa.Column("friendly_id", sa.String(255), nullable=False),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
    )

    op.create_table(
        "property_value",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=False),
        sa.Column("property_id", sa.Integer(), sa.ForeignKey("property.id", ondelete="CASCADE"), nullable=False),
        sa.Column("name", sa.String(255), nullable=False),
        sa.Column("friendly_id", sa.String(255), nullable=False),
        sa.Column("position", sa.Integer(), nullable=False),
    )
    op.create_index("ix_property_value_property_position", "property_value", ["property_id", "position"], unique=True)

    op.create_table(
        "category",
        sa.Column("id", sa.String(255), primary_key=True),
        sa.Column("name", sa.String(255), nullable=False),
        sa.Column("parent_id", sa.String(255), sa.ForeignKey("category.id"), nullable=True),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
    )
    op.create_index("ix_category_parent_id", "category", ["parent_id"])

    op.create_table(
        "category_property",
        sa.Column("category_id", sa.String(255), sa.ForeignKey("category.id", ondelete="CASCADE"), primary_key=True),
        sa.Column("position", sa.Integer(), primary_key=True),
        sa.Column("property_id", sa.Integer(), sa.ForeignKey("property.id"), nullable=False),
    )


def downgrade() -> None:
    op.drop_table("category_property")
    op.drop_table("category")
    op.drop_table("property_value")
    op.drop_table("property")
