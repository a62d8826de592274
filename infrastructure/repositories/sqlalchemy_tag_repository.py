"""SQLAlchemy implementation of the tag repository.

This module contains the concrete implementation of TagRepository
using SQLAlchemy for database operations and entity mapping.
"""

import logging
from typing import List, Optional

from domain.entities.tag import TagEntity
from domain.repositories.tag_repository import TagRepository
from sqlalchemy import func
from sqlalchemy.orm import Session

from infrastructure.models.post_tag_orm import PostTagORM
from infrastructure.models.tag_orm import TagORM

logger = logging.getLogger(__name__)


class SqlAlchemyTagRepository(TagRepository):
    """SQLAlchemy implementation of the tag repository.

    This class implements the TagRepository using SQLAlchemy
    for database operations. It handles the conversion between domain
    entities and SQLAlchemy models.

    NOTE: This repository does not store the session internally.
    Each method receives a fresh session to ensure proper transaction management
    and avoid session leaks.

    Example:
        >>> repository = SqlAlchemyTagRepository()
        >>> with get_db_session() as db:
        ...     tags = await repository.get_all(db)
        ...     print(len(tags))
        3
    """

    async def get_all(self, db_session: Session) -> List[TagEntity]:
        """Retrieve all tags from the database.

        Args:
            db_session (Session): Fresh SQLAlchemy database session for this operation.

        Returns:
            List[TagEntity]: List of all available tag entities.
        """
        tag_models = db_session.query(TagORM).order_by(TagORM.id).all()
        return [self._model_to_entity(model) for model in tag_models]

    async def get_by_id(self, db_session: Session, tag_id: int) -> Optional[TagEntity]:
        """Retrieve a tag by its unique identifier.

        Args:
            db_session (Session): Fresh SQLAlchemy database session for this operation.
            tag_id (int): The unique identifier of the tag to retrieve.

        Returns:
            Optional[TagEntity]: The tag entity if found, None otherwise.
        """
        tag_model = db_session.query(TagORM).filter(TagORM.id == tag_id).first()
        return self._model_to_entity(tag_model) if tag_model else None

    async def get_by_name(self, db_session: Session, name: str) -> Optional[TagEntity]:
        """Retrieve a tag by its name (case-insensitive).

        Args:
            db_session (Session): Fresh SQLAlchemy database session for this operation.
            name (str): The name of the tag to retrieve.

        Returns:
            Optional[TagEntity]: The tag entity if found, None otherwise.
        """
        tag_model = (
            db_session.query(TagORM)
            .filter(func.lower(TagORM.name) == name.strip().lower())
            .first()
        )
        return self._model_to_entity(tag_model) if tag_model else None

    async def get_by_post_id(self, db_session: Session, post_id: int) -> List[TagEntity]:
        """Retrieve the tags of a post by joining through post_tags.

        Args:
            db_session (Session): Fresh SQLAlchemy database session for this operation.
            post_id (int): Identifier of the post.

        Returns:
            List[TagEntity]: Tags linked to the post, ordered by ID.
        """
        tag_models = (
            db_session.query(TagORM)
            .join(PostTagORM, PostTagORM.tag_id == TagORM.id)
            .filter(PostTagORM.post_id == post_id)
            .distinct()
            .order_by(TagORM.id)
            .all()
        )
        return [self._model_to_entity(model) for model in tag_models]

    async def save(self, db_session: Session, tag: TagEntity) -> TagEntity:
        """Insert a new tag into the database.

        Args:
            db_session (Session): Fresh SQLAlchemy database session for this operation.
            tag (TagEntity): The tag entity to save.

        Returns:
            TagEntity: The saved tag entity with populated ID.
        """
        try:
            tag_model = TagORM(name=tag.name)
            db_session.add(tag_model)
            db_session.commit()
            db_session.refresh(tag_model)

            logger.info(f"Created tag {tag_model.id} '{tag_model.name}'")
            return self._model_to_entity(tag_model)

        except Exception as e:
            db_session.rollback()
            logger.error(f"Failed to create tag '{tag.name}': {str(e)}")
            raise

    def _model_to_entity(self, tag_model: TagORM) -> TagEntity:
        """Convert SQLAlchemy model to domain entity.

        Args:
            tag_model (TagORM): SQLAlchemy tag model instance.

        Returns:
            TagEntity: Corresponding domain entity.
        """
        return TagEntity(id=tag_model.id, name=tag_model.name)
