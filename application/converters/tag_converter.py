"""Tag converters for transforming domain entities into Pydantic schemas.

This module contains converter functions for transforming tag objects
from the domain layer (entities) to the API layer (Pydantic).
"""

from typing import List

from domain.entities.tag import TagEntity

from application.rest.schemas.output.tag_output import TagResponse


class TagConverter:
    """Converter class for tag transformations between layers.

    Example:
        >>> tag_response = TagConverter.entity_to_response(tag_entity)
    """

    @staticmethod
    def entity_to_response(tag_entity: TagEntity) -> TagResponse:
        """Convert TagEntity domain object to TagResponse Pydantic schema.

        Args:
            tag_entity (TagEntity): Domain entity representing a tag.

        Returns:
            TagResponse: Pydantic schema for API response.

        Raises:
            ValueError: If the tag entity has no ID (not persisted).
        """
        if tag_entity.is_new():
            raise ValueError("Cannot convert new tag entity to response (no ID)")

        return TagResponse(id=tag_entity.id, name=tag_entity.name)

    @staticmethod
    def entities_to_responses(tag_entities: List[TagEntity]) -> List[TagResponse]:
        """Convert list of TagEntity domain objects to list of TagResponse schemas.

        Args:
            tag_entities (List[TagEntity]): List of domain entities.

        Returns:
            List[TagResponse]: List of Pydantic schemas for API response.
        """
        return [TagConverter.entity_to_response(entity) for entity in tag_entities]
