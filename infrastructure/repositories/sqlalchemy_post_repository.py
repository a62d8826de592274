"""SQLAlchemy implementation of the post repository.

This module contains the concrete implementation of PostRepository
using SQLAlchemy for database operations.
"""

from __future__ import annotations

import logging
from typing import List, Optional

from domain.entities.post import PostEntity
from domain.repositories.post_repository import PostRepository
from sqlalchemy.orm import Session

from infrastructure.models.post_orm import PostORM
from infrastructure.models.post_tag_orm import PostTagORM

logger = logging.getLogger(__name__)


class SqlAlchemyPostRepository(PostRepository):
    """SQLAlchemy implementation of the post repository.

    NOTE: This repository does not store the session internally.
    Each method receives a fresh session to ensure proper transaction management
    and avoid session leaks.
    """

    async def get_all(self, db_session: Session) -> List[PostEntity]:
        """Retrieve all posts ordered by ID.

        Args:
            db_session (Session): SQLAlchemy database session for this operation.

        Returns:
            List[PostEntity]: Every stored post.
        """
        post_models = db_session.query(PostORM).order_by(PostORM.id).all()
        return [self._orm_to_domain_entity(model) for model in post_models]

    async def get_by_id(self, db_session: Session, post_id: int) -> Optional[PostEntity]:
        """Retrieve a post by primary key.

        Args:
            db_session (Session): SQLAlchemy database session for this operation.
            post_id (int): The unique identifier of the post.

        Returns:
            Optional[PostEntity]: The post if found, None otherwise.
        """
        post_model = db_session.query(PostORM).filter(PostORM.id == post_id).first()
        return self._orm_to_domain_entity(post_model) if post_model else None

    async def get_by_author_id(
        self, db_session: Session, author_id: int
    ) -> List[PostEntity]:
        """Retrieve the posts whose author_id matches the given author.

        Args:
            db_session (Session): SQLAlchemy database session for this operation.
            author_id (int): Identifier of the parent author.

        Returns:
            List[PostEntity]: The author's posts, ordered by ID.
        """
        logger.info(f"Looking up posts of author {author_id}")
        post_models = (
            db_session.query(PostORM)
            .filter(PostORM.author_id == author_id)
            .order_by(PostORM.id)
            .all()
        )
        return [self._orm_to_domain_entity(model) for model in post_models]

    async def get_by_tag_id(self, db_session: Session, tag_id: int) -> List[PostEntity]:
        """Retrieve the posts of a tag by joining through post_tags.

        Args:
            db_session (Session): SQLAlchemy database session for this operation.
            tag_id (int): Identifier of the tag.

        Returns:
            List[PostEntity]: Posts linked to the tag, ordered by ID.
        """
        logger.info(f"Looking up posts tagged with tag {tag_id}")
        post_models = (
            db_session.query(PostORM)
            .join(PostTagORM, PostTagORM.post_id == PostORM.id)
            .filter(PostTagORM.tag_id == tag_id)
            .distinct()
            .order_by(PostORM.id)
            .all()
        )
        return [self._orm_to_domain_entity(model) for model in post_models]

    async def save(self, db_session: Session, post: PostEntity) -> PostEntity:
        """Insert a new post.

        Args:
            db_session (Session): SQLAlchemy database session for this operation.
            post (PostEntity): Domain post entity to create.

        Returns:
            PostEntity: Created post with assigned ID.

        Raises:
            IntegrityError: If author_id does not reference an existing author.
        """
        try:
            db_post = PostORM(
                title=post.title,
                content=post.content,
                author_id=post.author_id,
            )
            db_session.add(db_post)
            db_session.commit()
            db_session.refresh(db_post)

            logger.info(f"Created post {db_post.id} for author {db_post.author_id}")
            return self._orm_to_domain_entity(db_post)

        except Exception as e:
            db_session.rollback()
            logger.error(f"Failed to create post: {str(e)}")
            raise

    def _orm_to_domain_entity(self, post_orm: PostORM) -> PostEntity:
        """Convert ORM model to domain entity.

        Args:
            post_orm (PostORM): SQLAlchemy post model instance.

        Returns:
            PostEntity: Corresponding domain entity.
        """
        return PostEntity(
            id=post_orm.id,
            title=post_orm.title,
            content=post_orm.content,
            author_id=post_orm.author_id,
        )
