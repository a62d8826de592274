"""Post output schemas for API responses.

This module contains Pydantic models for posts and for post/tag join rows.
"""

from typing import Optional

from pydantic import BaseModel


class PostResponse(BaseModel):
    """Schema for post data in API responses.

    Attributes:
        id (int): Identifier of the post.
        title (str): The title of the post.
        content (str, optional): The body of the post.
        author_id (int): Identifier of the author the post belongs to.

    Example:
        >>> post_response = PostResponse(
        ...     id=1,
        ...     title="Web Development for Cats",
        ...     content=None,
        ...     author_id=1
        ... )
    """

    id: int
    title: str
    content: Optional[str] = None
    author_id: int


class PostTagResponse(BaseModel):
    """Schema for a post/tag join row in API responses.

    Attributes:
        id (int): Identifier of the join row.
        post_id (int): Identifier of the tagged post.
        tag_id (int): Identifier of the tag.
    """

    id: int
    post_id: int
    tag_id: int
