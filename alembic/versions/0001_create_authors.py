"""Create authors

Revision ID: 0001_create_authors
Revises:
Create Date: 2021-05-06
"""

from alembic import op
import sqlalchemy as sa


revision = "0001_create_authors"
down_revision = None
branch_labels = None
depends_on = None


def upgrade() -> None:
    op.create_table(
        "authors",
        sa.Column(
            "id",
            sa.Integer(),
            primary_key=True,
            autoincrement=True,
            comment="Primary key, autoincrement integer",
        ),
        sa.Column(
            "name", sa.String(length=255), nullable=False, comment="Author display name"
        ),
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
    op.create_index("ix_authors_id", "authors", ["id"])


def downgrade() -> None:
    op.drop_index("ix_authors_id", table_name="authors")
    op.drop_table("authors")
