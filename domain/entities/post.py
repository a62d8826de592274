"""Post domain entity.

This module contains the Post domain entity. A post always belongs to
exactly one author through its required ``author_id``.
"""

from dataclasses import dataclass, replace
from typing import Optional


@dataclass(frozen=True)
class PostEntity:
    """Domain entity representing a blog post.

    Attributes:
        id (Optional[int]): Unique identifier for the post. None for new posts.
        title (str): Title of the post.
        content (Optional[str]): Body of the post, may be missing.
        author_id (int): Identifier of the owning author (required).

    Example:
        >>> post = PostEntity(id=None, title="Web Development for Cats", author_id=1)
        >>> print(post.content)
        None

    Business Rules:
        - Title must be non-empty and is stored stripped of whitespace
        - Every post belongs to an author: author_id is required
    """

    id: Optional[int]
    title: str
    author_id: int
    content: Optional[str] = None

    def __post_init__(self) -> None:
        """Validate post entity after initialization.

        Raises:
            ValueError: If the title is empty or author_id is missing.
        """
        if not self.title or not self.title.strip():
            raise ValueError("Post title cannot be empty or whitespace")
        if self.author_id is None:
            raise ValueError("Post must belong to an author")

        object.__setattr__(self, "title", self.title.strip())

    def is_new(self) -> bool:
        """Check if this is a new post (not yet persisted)."""
        return self.id is None

    def with_id(self, post_id: int) -> "PostEntity":
        """Return a copy of this post carrying the given ID."""
        return replace(self, id=post_id)
