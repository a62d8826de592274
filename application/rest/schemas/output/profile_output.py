"""Profile output schemas for API responses."""

from typing import Optional

from pydantic import BaseModel


class ProfileResponse(BaseModel):
    """Schema for profile data in API responses.

    Attributes:
        id (int): Identifier of the profile.
        author_id (int): Identifier of the author the profile describes.
        username, email, bio, avatar_url, facebook (str, optional): Profile fields.
    """

    id: int
    author_id: int
    username: Optional[str] = None
    email: Optional[str] = None
    bio: Optional[str] = None
    avatar_url: Optional[str] = None
    facebook: Optional[str] = None
