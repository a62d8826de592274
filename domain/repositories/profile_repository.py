"""Profile repository interface.

This module defines the abstract interface for profile data access
operations, following the Repository pattern from DDD.
"""

from abc import ABC, abstractmethod
from typing import Optional

from sqlalchemy.orm import Session

from ..entities.profile import ProfileEntity


class ProfileRepository(ABC):
    """Abstract interface for profile repository operations.

    NOTE: All methods receive a fresh database session to ensure
    proper transaction management and avoid session leaks.
    """

    @abstractmethod
    async def get_by_id(
        self, db_session: Session, profile_id: int
    ) -> Optional[ProfileEntity]:
        """Retrieve a profile by primary key.

        Args:
            db_session (Session): Fresh database session for this operation.
            profile_id (int): The unique identifier of the profile.

        Returns:
            Optional[ProfileEntity]: The profile if found, None otherwise.
        """
        pass

    @abstractmethod
    async def get_by_author_id(
        self, db_session: Session, author_id: int
    ) -> Optional[ProfileEntity]:
        """Retrieve the profile belonging to an author.

        If several rows reference the same author (the schema allows it),
        the oldest one is returned.

        Args:
            db_session (Session): Fresh database session for this operation.
            author_id (int): Identifier of the parent author.

        Returns:
            Optional[ProfileEntity]: The author's profile, None if there is none.
        """
        pass

    @abstractmethod
    async def save(self, db_session: Session, profile: ProfileEntity) -> ProfileEntity:
        """Insert a new profile.

        Args:
            db_session (Session): Fresh database session for this operation.
            profile (ProfileEntity): The new profile, its author_id already set.

        Returns:
            ProfileEntity: The saved profile with populated ID.
        """
        pass
