"""Create posts, each belonging to an author

Revision ID: 0002_create_posts
Revises: 0001_create_authors
Create Date: 2021-05-06
"""

from alembic import op
import sqlalchemy as sa


revision = "0002_create_posts"
down_revision = "0001_create_authors"
branch_labels = None
depends_on = None


def upgrade() -> None:
    op.create_table(
        "posts",
        sa.Column(
            "id",
            sa.Integer(),
            primary_key=True,
            autoincrement=True,
            comment="Primary key, autoincrement integer",
        ),
        sa.Column(
            "title",
            sa.String(length=255),
            nullable=False,
            comment="Post title, max 255 characters",
        ),
        sa.Column(
            "content", sa.Text(), nullable=True, comment="Post body, unlimited text"
        ),
        sa.Column(
            "author_id",
            sa.Integer(),
            sa.ForeignKey("authors.id"),
            nullable=False,
            comment="Foreign key to the owning author",
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
    op.create_index("ix_posts_id", "posts", ["id"])
    op.create_index("ix_posts_author_id", "posts", ["author_id"])


def downgrade() -> None:
    op.drop_index("ix_posts_author_id", table_name="posts")
    op.drop_index("ix_posts_id", table_name="posts")
    op.drop_table("posts")
