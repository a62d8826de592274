"""Tag input schemas for API requests.

This module contains Pydantic models for tag-related API requests.
"""

from pydantic import BaseModel, Field


class TagCreate(BaseModel):
    """Schema for creating a new tag.

    Attributes:
        name (str): The name of the tag to create. Must be non-empty.

    Example:
        >>> tag_data = TagCreate(name="Cats")
        >>> print(tag_data.name)
        "Cats"
    """

    name: str = Field(..., min_length=1, max_length=50, description="Tag name")
