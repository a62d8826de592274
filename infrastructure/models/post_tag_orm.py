"""SQLAlchemy ORM model for the post_tags join table.

This module defines the association object used for the many-to-many
relationship between posts and tags. Each row records one (post, tag) pair.

Classes:
    PostTagORM: SQLAlchemy model for a single post/tag association.

Architecture:
    The join table is mapped as a class (rather than a bare ``Table``) because
    it carries its own primary key and timestamps. PostORM.tags and
    TagORM.posts read through it via ``secondary="post_tags"``.
"""

from sqlalchemy import Column, ForeignKey, Integer
from sqlalchemy.orm import relationship

from infrastructure.models.base import Base, TimestampedMixin


class PostTagORM(TimestampedMixin, Base):
    """SQLAlchemy ORM model for post/tag join rows.

    Attributes:
        id (int): Primary key, autoincrement.
        post_id (int): Required foreign key to the tagged post.
        tag_id (int): Required foreign key to the tag.
        post (PostORM): Many-to-one relationship to the post.
        tag (TagORM): Many-to-one relationship to the tag.

    Table Schema:
        - Table name: 'post_tags'
        - Primary key: id (integer)
        - Foreign keys: post_id -> posts.id, tag_id -> tags.id (both indexed)
        - No composite unique constraint on (post_id, tag_id)

    Example:
        >>> db.add(PostTagORM(post_id=post.id, tag_id=tag.id))
        >>> db.commit()
        >>> db.refresh(post)
        >>> print(tag in post.tags)
        True
    """

    __tablename__ = "post_tags"

    post_id = Column(
        Integer,
        ForeignKey("posts.id"),
        nullable=False,
        index=True,
        comment="Foreign key to the tagged post",
    )

    tag_id = Column(
        Integer,
        ForeignKey("tags.id"),
        nullable=False,
        index=True,
        comment="Foreign key to the tag",
    )

    post = relationship("PostORM", back_populates="post_tags", lazy="select")
    tag = relationship("TagORM", back_populates="post_tags", lazy="select")

    def __repr__(self) -> str:
        return f"<PostTagORM(id={self.id}, post_id={self.post_id}, tag_id={self.tag_id})>"
