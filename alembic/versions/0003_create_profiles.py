"""Create profiles, at most one per author

Revision ID: 0003_create_profiles
Revises: 0002_create_posts
Create Date: 2021-05-06

author_id is indexed but deliberately not unique; the one-profile-per-author
rule lives in AuthorService.
"""

from alembic import op
import sqlalchemy as sa


revision = "0003_create_profiles"
down_revision = "0002_create_posts"
branch_labels = None
depends_on = None


def upgrade() -> None:
    op.create_table(
        "profiles",
        sa.Column(
            "id",
            sa.Integer(),
            primary_key=True,
            autoincrement=True,
            comment="Primary key, autoincrement integer",
        ),
        sa.Column(
            "username", sa.String(length=255), nullable=True, comment="Profile handle"
        ),
        sa.Column(
            "email",
            sa.String(length=255),
            nullable=True,
            comment="Contact email address",
        ),
        sa.Column(
            "bio", sa.String(length=255), nullable=True, comment="Short biography"
        ),
        sa.Column(
            "avatar_url",
            sa.String(length=255),
            nullable=True,
            comment="Avatar image URL",
        ),
        sa.Column(
            "facebook",
            sa.String(length=255),
            nullable=True,
            comment="Facebook handle or URL",
        ),
        sa.Column(
            "author_id",
            sa.Integer(),
            sa.ForeignKey("authors.id"),
            nullable=False,
            comment="Foreign key to the author this profile describes",
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
    op.create_index("ix_profiles_id", "profiles", ["id"])
    op.create_index("ix_profiles_author_id", "profiles", ["author_id"])


def downgrade() -> None:
    op.drop_index("ix_profiles_author_id", table_name="profiles")
    op.drop_index("ix_profiles_id", table_name="profiles")
    op.drop_table("profiles")
