"""Post input schemas for API requests.

This module contains Pydantic models for creating posts under an author
and for attaching tags to a post.
"""

from typing import Optional

from application.rest.schemas.input.common_input import MAX_ID
from pydantic import BaseModel, Field


class PostCreate(BaseModel):
    """Schema for creating a post under an author.

    There is no ``author_id`` field: the author comes from the URL path.

    Attributes:
        title (str): The title of the post.
        content (str, optional): The body of the post.

    Example:
        >>> post_data = PostCreate(title="Web Development for Cats")
    """

    title: str = Field(..., min_length=1, max_length=255, description="Post title")
    content: Optional[str] = Field(None, description="Post body")


class PostTagCreate(BaseModel):
    """Schema for attaching an existing tag to a post.

    Attributes:
        tag_id (int): Identifier of the tag to attach.

    Example:
        >>> link = PostTagCreate(tag_id=2)
    """

    tag_id: int = Field(..., ge=1, le=MAX_ID, description="Tag identifier")
