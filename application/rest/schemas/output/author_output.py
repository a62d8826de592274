"""Author output schemas for API responses."""

from pydantic import BaseModel


class AuthorResponse(BaseModel):
    """Schema for author data in API responses.

    Attributes:
        id (int): Identifier of the author.
        name (str): The author's display name.

    Example:
        >>> author_response = AuthorResponse(id=1, name="Leeroy Jenkins")
    """

    id: int
    name: str
