"""PostTag domain entity.

A PostTag is one row of the post/tag join table: it records that a post
carries a tag and nothing else.
"""

from dataclasses import dataclass, replace
from typing import Optional


@dataclass(frozen=True)
class PostTagEntity:
    """Domain entity representing one post/tag association.

    Attributes:
        id (Optional[int]): Unique identifier for the join row. None for new rows.
        post_id (int): Identifier of the tagged post.
        tag_id (int): Identifier of the tag.
    """

    id: Optional[int]
    post_id: int
    tag_id: int

    def __post_init__(self) -> None:
        if self.post_id is None or self.tag_id is None:
            raise ValueError("PostTag requires both post_id and tag_id")

    def is_new(self) -> bool:
        return self.id is None

    def with_id(self, post_tag_id: int) -> "PostTagEntity":
        return replace(self, id=post_tag_id)
