"""Post repository interface.

This module defines the abstract interface for post data access
operations, following the Repository pattern from DDD.
"""

from abc import ABC, abstractmethod
from typing import List, Optional

from sqlalchemy.orm import Session

from ..entities.post import PostEntity


class PostRepository(ABC):
    """Abstract interface for post repository operations.

    NOTE: All methods receive a fresh database session to ensure
    proper transaction management and avoid session leaks.
    """

    @abstractmethod
    async def get_all(self, db_session: Session) -> List[PostEntity]:
        """Retrieve all posts ordered by ID."""
        pass

    @abstractmethod
    async def get_by_id(self, db_session: Session, post_id: int) -> Optional[PostEntity]:
        """Retrieve a post by primary key.

        Args:
            db_session (Session): Fresh database session for this operation.
            post_id (int): The unique identifier of the post.

        Returns:
            Optional[PostEntity]: The post if found, None otherwise.
        """
        pass

    @abstractmethod
    async def get_by_author_id(
        self, db_session: Session, author_id: int
    ) -> List[PostEntity]:
        """Retrieve the posts written by an author.

        Args:
            db_session (Session): Fresh database session for this operation.
            author_id (int): Identifier of the parent author.

        Returns:
            List[PostEntity]: Posts whose author_id matches, ordered by ID.
        """
        pass

    @abstractmethod
    async def get_by_tag_id(self, db_session: Session, tag_id: int) -> List[PostEntity]:
        """Retrieve the posts carrying a tag through the join table.

        Args:
            db_session (Session): Fresh database session for this operation.
            tag_id (int): Identifier of the tag.

        Returns:
            List[PostEntity]: Posts linked to the tag by post_tags rows, ordered by ID.
        """
        pass

    @abstractmethod
    async def save(self, db_session: Session, post: PostEntity) -> PostEntity:
        """Insert a new post.

        Args:
            db_session (Session): Fresh database session for this operation.
            post (PostEntity): The new post, its author_id already set.

        Returns:
            PostEntity: The saved post with populated ID.
        """
        pass
