"""Tag repository interface.

This module defines the abstract interface for tag data access
operations, following the Repository pattern from DDD.
"""

from abc import ABC, abstractmethod
from typing import List, Optional

from sqlalchemy.orm import Session

from ..entities.tag import TagEntity


class TagRepository(ABC):
    """Abstract interface for tag repository operations.

    This interface defines the contract for tag data access
    without coupling to specific database implementations.

    NOTE: All methods receive a fresh database session to ensure
    proper transaction management and avoid session leaks.
    """

    @abstractmethod
    async def get_all(self, db_session: Session) -> List[TagEntity]:
        """Retrieve all tags from the repository.

        Args:
            db_session (Session): Fresh database session for this operation.

        Returns:
            List[TagEntity]: List of all available tag entities.
        """
        pass

    @abstractmethod
    async def get_by_id(self, db_session: Session, tag_id: int) -> Optional[TagEntity]:
        """Retrieve a tag by its unique identifier.

        Args:
            db_session (Session): Fresh database session for this operation.
            tag_id (int): The unique identifier of the tag to retrieve.

        Returns:
            Optional[TagEntity]: The tag entity if found, None otherwise.

        Example:
            >>> with get_db_session() as db:
            ...     tag = await repository.get_by_id(db, 2)
            ...     print(tag.name if tag else "Not found")
            "Cats"
        """
        pass

    @abstractmethod
    async def get_by_name(self, db_session: Session, name: str) -> Optional[TagEntity]:
        """Retrieve a tag by its name (case-insensitive).

        Args:
            db_session (Session): Fresh database session for this operation.
            name (str): The name of the tag to retrieve.

        Returns:
            Optional[TagEntity]: The tag entity if found, None otherwise.
        """
        pass

    @abstractmethod
    async def get_by_post_id(self, db_session: Session, post_id: int) -> List[TagEntity]:
        """Retrieve the tags attached to a post through the join table.

        Args:
            db_session (Session): Fresh database session for this operation.
            post_id (int): Identifier of the post whose tags are wanted.

        Returns:
            List[TagEntity]: Tags linked to the post by post_tags rows, ordered by ID.

        Example:
            >>> with get_db_session() as db:
            ...     tags = await repository.get_by_post_id(db, 1)
            ...     print([tag.name for tag in tags])
            ['Internet', 'Cats']
        """
        pass

    @abstractmethod
    async def save(self, db_session: Session, tag: TagEntity) -> TagEntity:
        """Save a new tag entity to the repository.

        Args:
            db_session (Session): Fresh database session for this operation.
            tag (TagEntity): The tag entity to save.

        Returns:
            TagEntity: The saved tag entity with populated ID.
        """
        pass
