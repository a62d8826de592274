"""SQLAlchemy implementation of the post/tag join repository."""

import logging
from typing import Optional

from domain.entities.post_tag import PostTagEntity
from domain.repositories.post_tag_repository import PostTagRepository
from sqlalchemy.orm import Session

from infrastructure.models.post_tag_orm import PostTagORM

logger = logging.getLogger(__name__)


class SqlAlchemyPostTagRepository(PostTagRepository):
    """SQLAlchemy implementation of the post_tags join repository.

    NOTE: This repository does not store the session internally.
    """

    async def get_by_pair(
        self, db_session: Session, post_id: int, tag_id: int
    ) -> Optional[PostTagEntity]:
        post_tag_model = (
            db_session.query(PostTagORM)
            .filter(PostTagORM.post_id == post_id, PostTagORM.tag_id == tag_id)
            .order_by(PostTagORM.id)
            .first()
        )
        return self._model_to_entity(post_tag_model) if post_tag_model else None

    async def save(self, db_session: Session, post_tag: PostTagEntity) -> PostTagEntity:
        """Insert a new join row.

        Args:
            db_session (Session): Fresh SQLAlchemy database session for this operation.
            post_tag (PostTagEntity): The association to record.

        Returns:
            PostTagEntity: The saved association with populated ID.

        Raises:
            IntegrityError: If post_id or tag_id reference missing rows.
        """
        try:
            post_tag_model = PostTagORM(post_id=post_tag.post_id, tag_id=post_tag.tag_id)
            db_session.add(post_tag_model)
            db_session.commit()
            db_session.refresh(post_tag_model)

            logger.info(
                f"Linked post {post_tag_model.post_id} to tag {post_tag_model.tag_id}"
            )
            return self._model_to_entity(post_tag_model)

        except Exception as e:
            db_session.rollback()
            logger.error(
                f"Failed to link post {post_tag.post_id} to tag {post_tag.tag_id}: {str(e)}"
            )
            raise

    def _model_to_entity(self, post_tag_model: PostTagORM) -> PostTagEntity:
        return PostTagEntity(
            id=post_tag_model.id,
            post_id=post_tag_model.post_id,
            tag_id=post_tag_model.tag_id,
        )
