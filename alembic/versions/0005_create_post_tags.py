"""Create post_tags join table

Revision ID: 0005_create_post_tags
Revises: 0004_create_tags
Create Date: 2021-05-06
"""

from alembic import op
import sqlalchemy as sa


revision = "0005_create_post_tags"
down_revision = "0004_create_tags"
branch_labels = None
depends_on = None


def upgrade() -> None:
    op.create_table(
        "post_tags",
        sa.Column(
            "id",
            sa.Integer(),
            primary_key=True,
            autoincrement=True,
            comment="Primary key, autoincrement integer",
        ),
        sa.Column(
            "post_id",
            sa.Integer(),
            sa.ForeignKey("posts.id"),
            nullable=False,
            comment="Foreign key to the tagged post",
        ),
        sa.Column(
            "tag_id",
            sa.Integer(),
            sa.ForeignKey("tags.id"),
            nullable=False,
            comment="Foreign key to the tag",
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
    op.create_index("ix_post_tags_id", "post_tags", ["id"])
    op.create_index("ix_post_tags_post_id", "post_tags", ["post_id"])
    op.create_index("ix_post_tags_tag_id", "post_tags", ["tag_id"])


def downgrade() -> None:
    op.drop_index("ix_post_tags_tag_id", table_name="post_tags")
    op.drop_index("ix_post_tags_post_id", table_name="post_tags")
    op.drop_index("ix_post_tags_id", table_name="post_tags")
    op.drop_table("post_tags")
