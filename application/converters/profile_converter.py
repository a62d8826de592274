"""Profile converters for transforming domain entities into Pydantic schemas."""

from domain.entities.profile import ProfileEntity

from application.rest.schemas.output.profile_output import ProfileResponse


class ProfileConverter:
    """Converter class for profile transformations between layers."""

    @staticmethod
    def entity_to_response(profile_entity: ProfileEntity) -> ProfileResponse:
        """Convert ProfileEntity to ProfileResponse.

        Raises:
            ValueError: If the profile entity has no ID (not persisted).
        """
        if profile_entity.is_new():
            raise ValueError("Cannot convert new profile entity to response (no ID)")

        return ProfileResponse(
            id=profile_entity.id,
            author_id=profile_entity.author_id,
            username=profile_entity.username,
            email=profile_entity.email,
            bio=profile_entity.bio,
            avatar_url=profile_entity.avatar_url,
            facebook=profile_entity.facebook,
        )
