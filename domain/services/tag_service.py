"""Tag domain service.

This module contains the TagService that implements business logic
for tag operations, orchestrating between entities and repositories.
"""

from typing import List

from domain.entities.post import PostEntity
from domain.entities.tag import TagEntity
from domain.repositories.post_repository import PostRepository
from domain.repositories.tag_repository import TagRepository
from sqlalchemy.orm import Session


class TagNotFoundError(Exception):
    """Exception raised when a requested tag is not found."""

    pass


class TagAlreadyExistsError(Exception):
    """Exception raised when trying to create a tag that already exists."""

    pass


class TagService:
    """Domain service for tag business operations.

    This service contains the business logic for tag operations,
    coordinating between domain entities and repository interfaces.

    Attributes:
        _tag_repository (TagRepository): Repository for tag data access.
        _post_repository (PostRepository): Repository used to expand a tag to its posts.

    Example:
        >>> service = TagService(tag_repository, post_repository)
        >>> with get_db_session() as db:
        ...     tags = await service.get_all_tags(db)
        ...     print([tag.name for tag in tags])
        ['Cats', 'Dogs', 'Internet']
    """

    def __init__(
        self, tag_repository: TagRepository, post_repository: PostRepository
    ) -> None:
        """Initialize the tag service with required dependencies.

        Args:
            tag_repository (TagRepository): Repository implementation for tag data access.
            post_repository (PostRepository): Repository implementation for post data access.
        """
        self._tag_repository = tag_repository
        self._post_repository = post_repository

    async def get_all_tags(self, db_session: Session) -> List[TagEntity]:
        """Retrieve all available tags.

        Args:
            db_session (Session): Fresh database session for this operation.

        Returns:
            List[TagEntity]: List of all available tag entities sorted by name.
        """
        tags = await self._tag_repository.get_all(db_session)

        # Business rule: Return tags sorted by name for consistent ordering
        return sorted(tags, key=lambda tag: tag.name.lower())

    async def get_tag_by_id(self, db_session: Session, tag_id: int) -> TagEntity:
        """Retrieve a tag by its unique identifier.

        Args:
            db_session (Session): Fresh database session for this operation.
            tag_id (int): The unique identifier of the tag to retrieve.

        Returns:
            TagEntity: The requested tag entity.

        Raises:
            TagNotFoundError: If the tag with the specified ID does not exist.
        """
        tag = await self._tag_repository.get_by_id(db_session, tag_id)
        if not tag:
            raise TagNotFoundError(f"Tag with ID {tag_id} not found")
        return tag

    async def create_tag(self, db_session: Session, name: str) -> TagEntity:
        """Create a new tag with the specified name.

        Args:
            db_session (Session): Fresh database session for this operation.
            name (str): The name for the new tag.

        Returns:
            TagEntity: The created tag entity with assigned ID.

        Raises:
            TagAlreadyExistsError: If a tag with the same name already exists.
            ValueError: If the tag name is invalid.

        Example:
            >>> with get_db_session() as db:
            ...     tag = await service.create_tag(db, "Birds")
            ...     print(tag.id)
            4
        """
        # Create new tag entity first (validation happens in constructor)
        new_tag = TagEntity(id=None, name=name)

        # Business rule: Tag names must be unique (case-insensitive)
        existing_tag = await self._tag_repository.get_by_name(db_session, new_tag.name)
        if existing_tag:
            raise TagAlreadyExistsError(f"Tag with name '{new_tag.name}' already exists")

        return await self._tag_repository.save(db_session, new_tag)

    async def get_tag_posts(self, db_session: Session, tag_id: int) -> List[PostEntity]:
        """Retrieve the posts carrying a tag, through the post_tags join table.

        Args:
            db_session (Session): Fresh database session for this operation.
            tag_id (int): The unique identifier of the tag.

        Returns:
            List[PostEntity]: Tagged posts ordered by ID (possibly empty).

        Raises:
            TagNotFoundError: If the tag does not exist.
        """
        await self.get_tag_by_id(db_session, tag_id)
        return await self._post_repository.get_by_tag_id(db_session, tag_id)
