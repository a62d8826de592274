"""Author domain entity.

This module contains the Author domain entity, the parent of both
posts (one-to-many) and the profile (one-to-one).
"""

from dataclasses import dataclass, replace
from typing import Optional


@dataclass(frozen=True)
class AuthorEntity:
    """Domain entity representing an author.

    Attributes:
        id (Optional[int]): Unique identifier for the author. None for new authors.
        name (str): The author's display name.

    Example:
        >>> author = AuthorEntity(id=None, name="  Leeroy Jenkins ")
        >>> print(author.name)
        "Leeroy Jenkins"

    Business Rules:
        - Author name must be non-empty and is stored stripped of whitespace
    """

    id: Optional[int]
    name: str

    def __post_init__(self) -> None:
        """Validate author entity after initialization.

        Raises:
            ValueError: If the author name is empty or whitespace.
        """
        if not self.name or not self.name.strip():
            raise ValueError("Author name cannot be empty or whitespace")

        object.__setattr__(self, "name", self.name.strip())

    def is_new(self) -> bool:
        """Check if this is a new author (not yet persisted)."""
        return self.id is None

    def with_id(self, author_id: int) -> "AuthorEntity":
        """Return a copy of this author carrying the given ID."""
        return replace(self, id=author_id)
