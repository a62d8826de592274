"""PostTag repository interface.

This module defines the abstract interface for the post/tag join rows.
"""

from abc import ABC, abstractmethod
from typing import Optional

from sqlalchemy.orm import Session

from ..entities.post_tag import PostTagEntity


class PostTagRepository(ABC):
    """Abstract interface for post/tag join row operations.

    NOTE: All methods receive a fresh database session to ensure
    proper transaction management and avoid session leaks.
    """

    @abstractmethod
    async def get_by_pair(
        self, db_session: Session, post_id: int, tag_id: int
    ) -> Optional[PostTagEntity]:
        """Retrieve the join row linking a post and a tag, if any.

        Args:
            db_session (Session): Fresh database session for this operation.
            post_id (int): Identifier of the post.
            tag_id (int): Identifier of the tag.

        Returns:
            Optional[PostTagEntity]: The first matching row, None if unlinked.
        """
        pass

    @abstractmethod
    async def save(self, db_session: Session, post_tag: PostTagEntity) -> PostTagEntity:
        """Insert a new join row.

        Args:
            db_session (Session): Fresh database session for this operation.
            post_tag (PostTagEntity): The new association.

        Returns:
            PostTagEntity: The saved association with populated ID.
        """
        pass
