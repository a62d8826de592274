"""SQLAlchemy ORM model for Post entity.

This module contains the PostORM class that defines the database schema
for posts. A post belongs to exactly one author and is tagged through
rows of the post_tags join table.

Classes:
    PostORM: SQLAlchemy model for posts with author and tag relationships.
"""

from sqlalchemy import Column, ForeignKey, Integer, String, Text
from sqlalchemy.orm import relationship

from infrastructure.models.base import Base, TimestampedMixin


class PostORM(TimestampedMixin, Base):
    """SQLAlchemy ORM model for posts.

    Attributes:
        id (int): Primary key, autoincrement.
        title (str): Post title, max 255 characters.
        content (Optional[str]): Post body, unlimited text.
        author_id (int): Required foreign key to the owning author.
        author (AuthorORM): Many-to-one relationship to the author.
        post_tags (List[PostTagORM]): Join rows linking this post to tags.
        tags (List[TagORM]): Read-only expansion of post_tags to tags.

    Table Schema:
        - Table name: 'posts'
        - Primary key: id (integer)
        - Foreign key: author_id -> authors.id (NOT NULL, indexed)

    Note:
        ``tags`` is declared ``viewonly``. Tagging a post means inserting a
        PostTagORM row; the expansion is read back through ``secondary``.
    """

    __tablename__ = "posts"

    title = Column(
        String(255), nullable=False, comment="Post title, max 255 characters"
    )

    content = Column(Text, nullable=True, comment="Post body, unlimited text")

    author_id = Column(
        Integer,
        ForeignKey("authors.id"),
        nullable=False,
        index=True,
        comment="Foreign key to the owning author",
    )

    author = relationship("AuthorORM", back_populates="posts", lazy="select")

    post_tags = relationship(
        "PostTagORM", back_populates="post", lazy="select", order_by="PostTagORM.id"
    )

    # Many-to-many through the post_tags join table
    tags = relationship(
        "TagORM",
        secondary="post_tags",
        viewonly=True,
        lazy="select",
        order_by="TagORM.id",
    )

    def __repr__(self) -> str:
        return (
            f"<PostORM(id={self.id}, title='{self.title}', author_id={self.author_id})>"
        )

    def __str__(self) -> str:
        return self.title
