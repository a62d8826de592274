"""SQLAlchemy implementation of the profile repository.

This module contains the concrete implementation of ProfileRepository
using SQLAlchemy for database operations.
"""

import logging
from typing import Optional

from domain.entities.profile import ProfileEntity
from domain.repositories.profile_repository import ProfileRepository
from sqlalchemy.orm import Session

from infrastructure.models.profile_orm import ProfileORM

logger = logging.getLogger(__name__)


class SqlAlchemyProfileRepository(ProfileRepository):
    """SQLAlchemy implementation of the profile repository.

    NOTE: This repository does not store the session internally.
    """

    async def get_by_id(
        self, db_session: Session, profile_id: int
    ) -> Optional[ProfileEntity]:
        profile_model = (
            db_session.query(ProfileORM).filter(ProfileORM.id == profile_id).first()
        )
        return self._model_to_entity(profile_model) if profile_model else None

    async def get_by_author_id(
        self, db_session: Session, author_id: int
    ) -> Optional[ProfileEntity]:
        """Retrieve the profile of an author, the oldest row if several exist.

        Args:
            db_session (Session): Fresh SQLAlchemy database session for this operation.
            author_id (int): Identifier of the parent author.

        Returns:
            Optional[ProfileEntity]: The profile, None if the author has none.
        """
        profile_model = (
            db_session.query(ProfileORM)
            .filter(ProfileORM.author_id == author_id)
            .order_by(ProfileORM.id)
            .first()
        )
        return self._model_to_entity(profile_model) if profile_model else None

    async def save(self, db_session: Session, profile: ProfileEntity) -> ProfileEntity:
        """Insert a new profile.

        Args:
            db_session (Session): Fresh SQLAlchemy database session for this operation.
            profile (ProfileEntity): The new profile.

        Returns:
            ProfileEntity: The saved profile with populated ID.
        """
        try:
            profile_model = ProfileORM(
                username=profile.username,
                email=profile.email,
                bio=profile.bio,
                avatar_url=profile.avatar_url,
                facebook=profile.facebook,
                author_id=profile.author_id,
            )
            db_session.add(profile_model)
            db_session.commit()
            db_session.refresh(profile_model)

            logger.info(
                f"Created profile {profile_model.id} for author {profile_model.author_id}"
            )
            return self._model_to_entity(profile_model)

        except Exception as e:
            db_session.rollback()
            logger.error(
                f"Failed to create profile for author {profile.author_id}: {str(e)}"
            )
            raise

    def _model_to_entity(self, profile_model: ProfileORM) -> ProfileEntity:
        return ProfileEntity(
            id=profile_model.id,
            author_id=profile_model.author_id,
            username=profile_model.username,
            email=profile_model.email,
            bio=profile_model.bio,
            avatar_url=profile_model.avatar_url,
            facebook=profile_model.facebook,
        )
