"""Post domain service.

This module contains the PostService that orchestrates post lookups in both
directions: up to the owning author and across the post_tags join table to
the post's tags.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, List, Tuple

from domain.entities.author import AuthorEntity
from domain.entities.post import PostEntity
from domain.entities.post_tag import PostTagEntity
from domain.entities.tag import TagEntity
from domain.services.author_service import AuthorNotFoundError
from domain.services.tag_service import TagNotFoundError

if TYPE_CHECKING:
    from domain.repositories.author_repository import AuthorRepository
    from domain.repositories.post_repository import PostRepository
    from domain.repositories.post_tag_repository import PostTagRepository
    from domain.repositories.tag_repository import TagRepository
    from sqlalchemy.orm import Session

logger = logging.getLogger(__name__)


class PostNotFoundError(Exception):
    """Exception raised when a post is not found."""

    pass


class PostService:
    """Domain service for handling post operations.

    This service encapsulates post retrieval, the post -> author parent
    lookup and the post <-> tag association.
    """

    def __init__(
        self,
        post_repository: "PostRepository",
        author_repository: "AuthorRepository",
        tag_repository: "TagRepository",
        post_tag_repository: "PostTagRepository",
    ):
        """Initialize the post service with dependencies.

        Args:
            post_repository: Repository for post data access
            author_repository: Repository used for the parent lookup
            tag_repository: Repository used for the join expansion to tags
            post_tag_repository: Repository for post_tags join rows
        """
        self._post_repository = post_repository
        self._author_repository = author_repository
        self._tag_repository = tag_repository
        self._post_tag_repository = post_tag_repository

    async def list_posts(self, db_session: "Session") -> List[PostEntity]:
        """Retrieve every post ordered by ID."""
        return await self._post_repository.get_all(db_session)

    async def get_post_by_id(self, db_session: "Session", post_id: int) -> PostEntity:
        """Retrieve a post by ID.

        Raises:
            PostNotFoundError: If no post has this ID.
        """
        post = await self._post_repository.get_by_id(db_session, post_id)
        if not post:
            raise PostNotFoundError(f"Post with ID {post_id} not found")
        return post

    async def get_post_author(
        self, db_session: "Session", post_id: int
    ) -> AuthorEntity:
        """Follow a post's author_id to its author.

        Args:
            db_session: Database session for this operation
            post_id: Identifier of the child post

        Returns:
            AuthorEntity: The single author the post belongs to

        Raises:
            PostNotFoundError: If the post does not exist
            AuthorNotFoundError: If the post references a missing author
        """
        post = await self.get_post_by_id(db_session, post_id)

        author = await self._author_repository.get_by_id(db_session, post.author_id)
        if not author:
            logger.error(f"Post {post.id} references missing author {post.author_id}")
            raise AuthorNotFoundError(
                f"Author with ID {post.author_id} of post {post.id} not found"
            )
        return author

    async def get_post_tags(
        self, db_session: "Session", post_id: int
    ) -> List[TagEntity]:
        """Expand a post to its tags through the post_tags join table.

        Raises:
            PostNotFoundError: If the post does not exist
        """
        await self.get_post_by_id(db_session, post_id)
        return await self._tag_repository.get_by_post_id(db_session, post_id)

    async def tag_post(
        self, db_session: "Session", post_id: int, tag_id: int
    ) -> Tuple[PostTagEntity, bool]:
        """Associate a tag with a post.

        Tagging a post with a tag it already carries returns the existing join
        row instead of inserting a duplicate pair.

        Args:
            db_session: Database session for this operation
            post_id: Identifier of the post
            tag_id: Identifier of the tag

        Returns:
            Tuple[PostTagEntity, bool]: The join row linking the two, and
                whether it was created by this call

        Raises:
            PostNotFoundError: If the post does not exist
            TagNotFoundError: If the tag does not exist
        """
        post = await self.get_post_by_id(db_session, post_id)

        tag = await self._tag_repository.get_by_id(db_session, tag_id)
        if not tag:
            raise TagNotFoundError(f"Tag with ID {tag_id} not found")

        existing = await self._post_tag_repository.get_by_pair(
            db_session, post.id, tag.id
        )
        if existing:
            logger.info(f"Post {post.id} already tagged with tag {tag.id}")
            return existing, False

        created = await self._post_tag_repository.save(
            db_session, PostTagEntity(id=None, post_id=post.id, tag_id=tag.id)
        )
        return created, True
