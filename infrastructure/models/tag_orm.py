"""SQLAlchemy ORM model for Tag entity.

This module contains the TagORM class that defines the database schema
for tags and handles tag data persistence.

Classes:
    TagORM: SQLAlchemy model for post tags and their join rows.

Architecture:
    This ORM model is part of the Infrastructure layer and should only be used by:
    - SqlAlchemyTagRepository implementation
    - The seed script
    - Other infrastructure-specific code

    Domain code should use TagEntity instead of this ORM model.
"""

from sqlalchemy import Column, String
from sqlalchemy.orm import relationship

from infrastructure.models.base import Base, TimestampedMixin


class TagORM(TimestampedMixin, Base):
    """SQLAlchemy ORM model for tags that categorize posts.

    Attributes:
        id (int): Primary key, autoincrement.
        name (str): Tag name, max 50 characters.
        created_at (datetime): Timestamp when tag was created.
        updated_at (datetime): Timestamp when tag was last updated.
        post_tags (List[PostTagORM]): Join rows linking this tag to posts.
        posts (List[PostORM]): Read-only expansion of post_tags to posts.

    Table Schema:
        - Table name: 'tags'
        - Primary key: id (integer)

    Relationships:
        - post_tags: One-to-many with PostTagORM
        - posts: Many-to-many with PostORM through the post_tags join table

    Example:
        >>> tag_orm = TagORM(name="Cats")
        >>> db.add(tag_orm)
        >>> db.commit()
        >>> print(f"Created tag: {tag_orm.id}")
    """

    __tablename__ = "tags"

    name = Column(String(50), nullable=False, comment="Tag name")

    post_tags = relationship(
        "PostTagORM", back_populates="tag", lazy="select", order_by="PostTagORM.id"
    )

    # Many-to-many with posts, expanded through post_tags
    posts = relationship(
        "PostORM",
        secondary="post_tags",
        viewonly=True,
        lazy="select",
        order_by="PostORM.id",
    )

    def __repr__(self) -> str:
        """String representation for debugging.

        Returns:
            str: Human-readable representation of the tag.
        """
        return f"<TagORM(id={self.id}, name='{self.name}')>"

    def __str__(self) -> str:
        """User-friendly string representation.

        Returns:
            str: Tag name for display purposes.
        """
        return self.name
