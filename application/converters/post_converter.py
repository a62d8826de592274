"""Post converters for transforming domain entities into Pydantic schemas.

Covers both posts and the post/tag join rows.
"""

from typing import List

from domain.entities.post import PostEntity
from domain.entities.post_tag import PostTagEntity

from application.rest.schemas.output.post_output import PostResponse, PostTagResponse


class PostConverter:
    """Converter class for post transformations between layers.

    Example:
        >>> post_response = PostConverter.entity_to_response(post_entity)
        >>> print(post_response.author_id)
        1
    """

    @staticmethod
    def entity_to_response(post_entity: PostEntity) -> PostResponse:
        """Convert PostEntity to PostResponse.

        Args:
            post_entity (PostEntity): Domain entity representing a post.

        Returns:
            PostResponse: Pydantic schema for API response.

        Raises:
            ValueError: If the post entity has no ID (not persisted).
        """
        if post_entity.is_new():
            raise ValueError("Cannot convert new post entity to response (no ID)")

        return PostResponse(
            id=post_entity.id,
            title=post_entity.title,
            content=post_entity.content,
            author_id=post_entity.author_id,
        )

    @staticmethod
    def entities_to_responses(post_entities: List[PostEntity]) -> List[PostResponse]:
        return [PostConverter.entity_to_response(entity) for entity in post_entities]

    @staticmethod
    def post_tag_to_response(post_tag_entity: PostTagEntity) -> PostTagResponse:
        """Convert PostTagEntity to PostTagResponse.

        Raises:
            ValueError: If the join row has no ID (not persisted).
        """
        if post_tag_entity.is_new():
            raise ValueError("Cannot convert new post tag entity to response (no ID)")

        return PostTagResponse(
            id=post_tag_entity.id,
            post_id=post_tag_entity.post_id,
            tag_id=post_tag_entity.tag_id,
        )
