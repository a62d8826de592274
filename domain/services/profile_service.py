"""Profile domain service.

This module contains the ProfileService that handles profile retrieval and
the profile -> author parent lookup.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from domain.entities.author import AuthorEntity
from domain.entities.profile import ProfileEntity
from domain.services.author_service import AuthorNotFoundError, ProfileNotFoundError

if TYPE_CHECKING:
    from domain.repositories.author_repository import AuthorRepository
    from domain.repositories.profile_repository import ProfileRepository
    from sqlalchemy.orm import Session

logger = logging.getLogger(__name__)


class ProfileService:
    """Domain service for profile operations."""

    def __init__(
        self,
        profile_repository: "ProfileRepository",
        author_repository: "AuthorRepository",
    ) -> None:
        self._profile_repository = profile_repository
        self._author_repository = author_repository

    async def get_profile_by_id(
        self, db_session: "Session", profile_id: int
    ) -> ProfileEntity:
        """Retrieve a profile by ID.

        Raises:
            ProfileNotFoundError: If no profile has this ID.
        """
        profile = await self._profile_repository.get_by_id(db_session, profile_id)
        if not profile:
            raise ProfileNotFoundError(f"Profile with ID {profile_id} not found")
        return profile

    async def get_profile_author(
        self, db_session: "Session", profile_id: int
    ) -> AuthorEntity:
        """Follow a profile's author_id to its author.

        Raises:
            ProfileNotFoundError: If the profile does not exist.
            AuthorNotFoundError: If the profile references a missing author.
        """
        profile = await self.get_profile_by_id(db_session, profile_id)

        author = await self._author_repository.get_by_id(db_session, profile.author_id)
        if not author:
            logger.error(
                f"Profile {profile.id} references missing author {profile.author_id}"
            )
            raise AuthorNotFoundError(
                f"Author with ID {profile.author_id} of profile {profile.id} not found"
            )
        return author
