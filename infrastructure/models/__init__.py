"""ORM models for the blog associations schema.

Importing this package registers every mapped class on ``Base.metadata`` so
string-based ``relationship()`` targets resolve and Alembic sees all tables.
"""

from infrastructure.models.base import Base
from infrastructure.models.author_orm import AuthorORM
from infrastructure.models.post_orm import PostORM
from infrastructure.models.post_tag_orm import PostTagORM
from infrastructure.models.profile_orm import ProfileORM
from infrastructure.models.tag_orm import TagORM

__all__ = ["Base", "AuthorORM", "PostORM", "PostTagORM", "ProfileORM", "TagORM"]
