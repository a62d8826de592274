"""Profile input schemas for API requests."""

from typing import Optional

from pydantic import BaseModel, Field


class ProfileCreate(BaseModel):
    """Schema for creating an author's profile.

    All fields are optional; the owning author comes from the URL path.

    Example:
        >>> profile_data = ProfileCreate(
        ...     username="ljenk",
        ...     email="ljenk@aol.com",
        ...     bio="a very dated reference"
        ... )
    """

    username: Optional[str] = Field(None, max_length=255)
    email: Optional[str] = Field(None, max_length=255)
    bio: Optional[str] = Field(None, max_length=255)
    avatar_url: Optional[str] = Field(None, max_length=255)
    facebook: Optional[str] = Field(None, max_length=255)
