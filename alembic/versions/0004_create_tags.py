"""Create tags

Revision ID: 0004_create_tags
Revises: 0003_create_profiles
Create Date: 2021-05-06
"""

from alembic import op
import sqlalchemy as sa


revision = "0004_create_tags"
down_revision = "0003_create_profiles"
branch_labels = None
depends_on = None


def upgrade() -> None:
    op.create_table(
        "tags",
        sa.Column(
            "id",
            sa.Integer(),
            primary_key=True,
            autoincrement=True,
            comment="Primary key, autoincrement integer",
        ),
        sa.Column("name", sa.String(length=50), nullable=False, comment="Tag name"),
        sa.Column(
            "created_at",
            sa.DateTime(),
            nullable=False,
            comment="Timestamp when the row was created",
        ),
        sa.Column(
            "updated_at",
            sa.DateTime(),
            nullable=False,
            comment="Timestamp when the row was last updated",
        ),
    )
    op.create_index("ix_tags_id", "tags", ["id"])


def downgrade() -> None:
    op.drop_index("ix_tags_id", table_name="tags")
    op.drop_table("tags")
