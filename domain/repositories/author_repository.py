"""Author repository interface.

This module defines the abstract interface for author data access
operations, following the Repository pattern from DDD.
"""

from abc import ABC, abstractmethod
from typing import List, Optional

from sqlalchemy.orm import Session

from ..entities.author import AuthorEntity


class AuthorRepository(ABC):
    """Abstract interface for author repository operations.

    NOTE: All methods receive a fresh database session to ensure
    proper transaction management and avoid session leaks.
    """

    @abstractmethod
    async def get_all(self, db_session: Session) -> List[AuthorEntity]:
        """Retrieve all authors ordered by ID.

        Args:
            db_session (Session): Fresh database session for this operation.

        Returns:
            List[AuthorEntity]: Every stored author.
        """
        pass

    @abstractmethod
    async def get_by_id(
        self, db_session: Session, author_id: int
    ) -> Optional[AuthorEntity]:
        """Retrieve an author by primary key.

        This is also the parent lookup for posts and profiles: pass the
        child's ``author_id``.

        Args:
            db_session (Session): Fresh database session for this operation.
            author_id (int): The unique identifier of the author.

        Returns:
            Optional[AuthorEntity]: The author if found, None otherwise.

        Example:
            >>> with get_db_session() as db:
            ...     author = await repository.get_by_id(db, post.author_id)
            ...     print(author.name)
            "Leeroy Jenkins"
        """
        pass

    @abstractmethod
    async def save(self, db_session: Session, author: AuthorEntity) -> AuthorEntity:
        """Insert a new author.

        Args:
            db_session (Session): Fresh database session for this operation.
            author (AuthorEntity): The new author (id is None).

        Returns:
            AuthorEntity: The saved author with populated ID.
        """
        pass
