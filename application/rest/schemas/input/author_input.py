"""Author input schemas for API requests.

This module contains Pydantic models for author-related API requests.
"""

from pydantic import BaseModel, Field


class AuthorCreate(BaseModel):
    """Schema for creating a new author.

    Attributes:
        name (str): The author's display name. Must be non-empty.

    Example:
        >>> author_data = AuthorCreate(name="Leeroy Jenkins")
    """

    name: str = Field(..., min_length=1, max_length=255, description="Author name")
