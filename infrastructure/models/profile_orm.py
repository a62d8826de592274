"""SQLAlchemy ORM model for Profile entity.

This module contains the ProfileORM class that defines the database schema
for author profiles, the child side of the one-to-one association.

Classes:
    ProfileORM: SQLAlchemy model for an author's public profile.
"""

from sqlalchemy import Column, ForeignKey, Integer, String
from sqlalchemy.orm import relationship

from infrastructure.models.base import Base, TimestampedMixin


class ProfileORM(TimestampedMixin, Base):
    """SQLAlchemy ORM model for author profiles.

    Attributes:
        id (int): Primary key, autoincrement.
        username (Optional[str]): Handle shown on the profile.
        email (Optional[str]): Contact email address.
        bio (Optional[str]): Short biography.
        avatar_url (Optional[str]): Link to the avatar image.
        facebook (Optional[str]): Facebook handle or URL.
        author_id (int): Required foreign key to the author.
        author (AuthorORM): Many-to-one side of the one-to-one association.

    Table Schema:
        - Table name: 'profiles'
        - Primary key: id (integer)
        - Foreign key: author_id -> authors.id (NOT NULL, indexed, not unique)

    Note:
        The schema does not stop a second profile row for the same author.
        AuthorService refuses to create one.
    """

    __tablename__ = "profiles"

    username = Column(String(255), nullable=True, comment="Profile handle")
    email = Column(String(255), nullable=True, comment="Contact email address")
    bio = Column(String(255), nullable=True, comment="Short biography")
    avatar_url = Column(String(255), nullable=True, comment="Avatar image URL")
    facebook = Column(String(255), nullable=True, comment="Facebook handle or URL")

    author_id = Column(
        Integer,
        ForeignKey("authors.id"),
        nullable=False,
        index=True,
        comment="Foreign key to the author this profile describes",
    )

    author = relationship("AuthorORM", back_populates="profile", lazy="select")

    def __repr__(self) -> str:
        return (
            f"<ProfileORM(id={self.id}, username='{self.username}', "
            f"author_id={self.author_id})>"
        )

    def __str__(self) -> str:
        return self.username or f"Profile of author {self.author_id}"
