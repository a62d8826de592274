"""Author converters for transforming domain entities into Pydantic schemas."""

from typing import List

from domain.entities.author import AuthorEntity

from application.rest.schemas.output.author_output import AuthorResponse


class AuthorConverter:
    """Converter class for author transformations between layers."""

    @staticmethod
    def entity_to_response(author_entity: AuthorEntity) -> AuthorResponse:
        """Convert AuthorEntity to AuthorResponse.

        Raises:
            ValueError: If the author entity has no ID (not persisted).
        """
        if author_entity.is_new():
            raise ValueError("Cannot convert new author entity to response (no ID)")

        return AuthorResponse(id=author_entity.id, name=author_entity.name)

    @staticmethod
    def entities_to_responses(
        author_entities: List[AuthorEntity],
    ) -> List[AuthorResponse]:
        return [AuthorConverter.entity_to_response(entity) for entity in author_entities]
