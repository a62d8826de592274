"""SQLAlchemy implementation of the author repository.

This module contains the concrete implementation of AuthorRepository
using SQLAlchemy for database operations and entity mapping.
"""

import logging
from typing import List, Optional

from domain.entities.author import AuthorEntity
from domain.repositories.author_repository import AuthorRepository
from sqlalchemy.orm import Session

from infrastructure.models.author_orm import AuthorORM

logger = logging.getLogger(__name__)


class SqlAlchemyAuthorRepository(AuthorRepository):
    """SQLAlchemy implementation of the author repository.

    NOTE: This repository does not store the session internally.
    Each method receives a fresh session to ensure proper transaction management
    and avoid session leaks.
    """

    async def get_all(self, db_session: Session) -> List[AuthorEntity]:
        """Retrieve all authors ordered by ID.

        Args:
            db_session (Session): Fresh SQLAlchemy database session for this operation.

        Returns:
            List[AuthorEntity]: Every stored author.
        """
        author_models = db_session.query(AuthorORM).order_by(AuthorORM.id).all()
        return [self._model_to_entity(model) for model in author_models]

    async def get_by_id(
        self, db_session: Session, author_id: int
    ) -> Optional[AuthorEntity]:
        """Retrieve an author by primary key.

        Args:
            db_session (Session): Fresh SQLAlchemy database session for this operation.
            author_id (int): The unique identifier of the author.

        Returns:
            Optional[AuthorEntity]: The author if found, None otherwise.
        """
        author_model = (
            db_session.query(AuthorORM).filter(AuthorORM.id == author_id).first()
        )
        return self._model_to_entity(author_model) if author_model else None

    async def save(self, db_session: Session, author: AuthorEntity) -> AuthorEntity:
        """Insert a new author.

        Args:
            db_session (Session): Fresh SQLAlchemy database session for this operation.
            author (AuthorEntity): The new author.

        Returns:
            AuthorEntity: The saved author with populated ID.
        """
        try:
            author_model = AuthorORM(name=author.name)
            db_session.add(author_model)
            db_session.commit()
            db_session.refresh(author_model)

            logger.info(f"Created author {author_model.id} '{author_model.name}'")
            return self._model_to_entity(author_model)

        except Exception as e:
            db_session.rollback()
            logger.error(f"Failed to create author '{author.name}': {str(e)}")
            raise

    def _model_to_entity(self, author_model: AuthorORM) -> AuthorEntity:
        return AuthorEntity(id=author_model.id, name=author_model.name)
