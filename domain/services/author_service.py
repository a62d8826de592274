"""Author domain service.

This module contains the AuthorService that implements the parent side of
both author associations: listing an author's posts and profile, and
building new children whose ``author_id`` is filled in from the author.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, List, Optional

from domain.entities.author import AuthorEntity
from domain.entities.post import PostEntity
from domain.entities.profile import ProfileEntity

if TYPE_CHECKING:
    from domain.repositories.author_repository import AuthorRepository
    from domain.repositories.post_repository import PostRepository
    from domain.repositories.profile_repository import ProfileRepository
    from sqlalchemy.orm import Session

logger = logging.getLogger(__name__)


class AuthorNotFoundError(Exception):
    """Exception raised when a requested author is not found."""

    pass


class ProfileNotFoundError(Exception):
    """Exception raised when a requested profile is not found."""

    pass


class ProfileAlreadyExistsError(Exception):
    """Exception raised when an author already has a profile."""

    pass


class AuthorService:
    """Domain service for authors and the children they own.

    Attributes:
        _author_repository (AuthorRepository): Repository for author data access.
        _post_repository (PostRepository): Repository for the author's posts.
        _profile_repository (ProfileRepository): Repository for the author's profile.

    Example:
        >>> service = AuthorService(author_repo, post_repo, profile_repo)
        >>> with get_db_session() as db:
        ...     post = await service.create_post_for_author(db, 1, "Web Development for Cats")
        ...     print(post.author_id)
        1
    """

    def __init__(
        self,
        author_repository: "AuthorRepository",
        post_repository: "PostRepository",
        profile_repository: "ProfileRepository",
    ) -> None:
        self._author_repository = author_repository
        self._post_repository = post_repository
        self._profile_repository = profile_repository

    async def list_authors(self, db_session: "Session") -> List[AuthorEntity]:
        """Retrieve every author ordered by ID."""
        return await self._author_repository.get_all(db_session)

    async def get_author_by_id(
        self, db_session: "Session", author_id: int
    ) -> AuthorEntity:
        """Retrieve an author by its unique identifier.

        Args:
            db_session: Database session for this operation.
            author_id: The unique identifier of the author.

        Returns:
            AuthorEntity: The requested author.

        Raises:
            AuthorNotFoundError: If no author has this ID.
        """
        author = await self._author_repository.get_by_id(db_session, author_id)
        if not author:
            raise AuthorNotFoundError(f"Author with ID {author_id} not found")
        return author

    async def create_author(self, db_session: "Session", name: str) -> AuthorEntity:
        """Create a new author.

        Raises:
            ValueError: If the name is empty.
        """
        new_author = AuthorEntity(id=None, name=name)
        return await self._author_repository.save(db_session, new_author)

    async def get_author_posts(
        self, db_session: "Session", author_id: int
    ) -> List[PostEntity]:
        """Retrieve the posts belonging to an author.

        Args:
            db_session: Database session for this operation.
            author_id: Identifier of the parent author.

        Returns:
            List[PostEntity]: The author's posts ordered by ID (possibly empty).

        Raises:
            AuthorNotFoundError: If the author does not exist.
        """
        await self.get_author_by_id(db_session, author_id)
        return await self._post_repository.get_by_author_id(db_session, author_id)

    async def create_post_for_author(
        self,
        db_session: "Session",
        author_id: int,
        title: str,
        content: Optional[str] = None,
    ) -> PostEntity:
        """Build and save a post under an existing author.

        The new post's ``author_id`` comes from the parent author; callers
        never pass it themselves.

        Args:
            db_session: Database session for this operation.
            author_id: Identifier of the parent author.
            title: Post title.
            content: Optional post body.

        Returns:
            PostEntity: The saved post with its ID and author_id set.

        Raises:
            AuthorNotFoundError: If the author does not exist.
            ValueError: If the title is empty.
        """
        author = await self.get_author_by_id(db_session, author_id)

        new_post = PostEntity(id=None, title=title, content=content, author_id=author.id)
        logger.info(f"Creating post '{new_post.title}' for author {author.id}")
        return await self._post_repository.save(db_session, new_post)

    async def get_author_profile(
        self, db_session: "Session", author_id: int
    ) -> ProfileEntity:
        """Retrieve the single profile of an author.

        Raises:
            AuthorNotFoundError: If the author does not exist.
            ProfileNotFoundError: If the author has no profile yet.
        """
        await self.get_author_by_id(db_session, author_id)

        profile = await self._profile_repository.get_by_author_id(db_session, author_id)
        if not profile:
            raise ProfileNotFoundError(f"Author with ID {author_id} has no profile")
        return profile

    async def create_profile_for_author(
        self,
        db_session: "Session",
        author_id: int,
        username: Optional[str] = None,
        email: Optional[str] = None,
        bio: Optional[str] = None,
        avatar_url: Optional[str] = None,
        facebook: Optional[str] = None,
    ) -> ProfileEntity:
        """Build and save the profile of an existing author.

        Business rule: an author has at most one profile. The schema does not
        enforce it, so the check happens here.

        Returns:
            ProfileEntity: The saved profile with its ID and author_id set.

        Raises:
            AuthorNotFoundError: If the author does not exist.
            ProfileAlreadyExistsError: If the author already has a profile.
        """
        author = await self.get_author_by_id(db_session, author_id)

        existing = await self._profile_repository.get_by_author_id(db_session, author.id)
        if existing:
            raise ProfileAlreadyExistsError(
                f"Author with ID {author.id} already has profile {existing.id}"
            )

        new_profile = ProfileEntity(
            id=None,
            author_id=author.id,
            username=username,
            email=email,
            bio=bio,
            avatar_url=avatar_url,
            facebook=facebook,
        )
        return await self._profile_repository.save(db_session, new_profile)
