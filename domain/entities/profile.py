"""Profile domain entity.

This module contains the Profile domain entity, the child side of the
author/profile one-to-one association.
"""

from dataclasses import dataclass, replace
from typing import Optional


@dataclass(frozen=True)
class ProfileEntity:
    """Domain entity representing an author's profile.

    Attributes:
        id (Optional[int]): Unique identifier for the profile. None for new profiles.
        author_id (int): Identifier of the author this profile describes (required).
        username (Optional[str]): Handle shown on the profile.
        email (Optional[str]): Contact email address.
        bio (Optional[str]): Short biography.
        avatar_url (Optional[str]): Link to the avatar image.
        facebook (Optional[str]): Facebook handle or URL.

    Business Rules:
        - Every profile belongs to an author: author_id is required
        - An author has at most one profile (enforced by AuthorService)
    """

    id: Optional[int]
    author_id: int
    username: Optional[str] = None
    email: Optional[str] = None
    bio: Optional[str] = None
    avatar_url: Optional[str] = None
    facebook: Optional[str] = None

    def __post_init__(self) -> None:
        if self.author_id is None:
            raise ValueError("Profile must belong to an author")

    def is_new(self) -> bool:
        """Check if this is a new profile (not yet persisted)."""
        return self.id is None

    def with_id(self, profile_id: int) -> "ProfileEntity":
        """Return a copy of this profile carrying the given ID."""
        return replace(self, id=profile_id)
