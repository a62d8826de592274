"""SQLAlchemy ORM model for Author entity.

This module contains the AuthorORM class that defines the database schema
for authors, the parent side of both the one-to-many (posts) and the
one-to-one (profile) associations.

Classes:
    AuthorORM: SQLAlchemy model for authors with their posts and profile.

Architecture:
    This ORM model is part of the Infrastructure layer and should only be used by:
    - SqlAlchemyAuthorRepository implementation
    - The seed script
    - Other infrastructure-specific code

    Domain code should use AuthorEntity instead of this ORM model.
"""

from sqlalchemy import Column, String
from sqlalchemy.orm import relationship

from infrastructure.models.base import Base, TimestampedMixin


class AuthorORM(TimestampedMixin, Base):
    """SQLAlchemy ORM model for authors.

    Attributes:
        id (int): Primary key, autoincrement.
        name (str): Author display name.
        created_at (datetime): Timestamp when author was created.
        updated_at (datetime): Timestamp when author was last updated.
        posts (List[PostORM]): One-to-many relationship with posts.
        profile (Optional[ProfileORM]): One-to-one relationship with profile.

    Table Schema:
        - Table name: 'authors'
        - Primary key: id (integer)

    Relationships:
        - posts: One-to-many with PostORM (posts.author_id -> authors.id)
        - profile: One-to-one with ProfileORM (profiles.author_id -> authors.id)

    Example:
        >>> author = AuthorORM(name="Leeroy Jenkins")
        >>> author.posts.append(PostORM(title="Web Development for Cats"))
        >>> db.add(author)
        >>> db.commit()
        >>> print(author.posts[0].author_id == author.id)
        True
    """

    __tablename__ = "authors"

    name = Column(String(255), nullable=False, comment="Author display name")

    # One-to-many: the foreign key lives on posts.author_id
    posts = relationship(
        "PostORM", back_populates="author", lazy="select", order_by="PostORM.id"
    )

    # One-to-one: same foreign key shape as posts, scalar on this side
    profile = relationship(
        "ProfileORM", back_populates="author", uselist=False, lazy="select"
    )

    def __repr__(self) -> str:
        return f"<AuthorORM(id={self.id}, name='{self.name}')>"

    def __str__(self) -> str:
        return self.name
