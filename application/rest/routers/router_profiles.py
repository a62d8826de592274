import logging

from application.converters.author_converter import AuthorConverter
from application.converters.profile_converter import ProfileConverter
from application.rest.schemas.input.common_input import MAX_ID
from application.rest.schemas.output.author_output import AuthorResponse
from application.rest.schemas.output.common_output import ErrorResponse
from application.rest.schemas.output.profile_output import ProfileResponse
from domain.services.author_service import AuthorNotFoundError, ProfileNotFoundError
from domain.services.profile_service import ProfileService
from fastapi import APIRouter, Depends, HTTPException, Path, status
from sqlalchemy.orm import Session
from utils.dependencies import get_db, get_profile_service

logger = logging.getLogger(__name__)
router = APIRouter()

PROFILE_NOT_FOUND_RESPONSE = {
    "model": ErrorResponse,
    "description": "Profile not found.",
    "content": {
        "application/json": {"example": {"detail": "Profile with ID 3 not found"}}
    },
}


@router.get(
    path="/profiles/{profile_id}",
    description="Retrieve a specific profile by its identifier.",
    response_model=ProfileResponse,
    status_code=status.HTTP_200_OK,
    responses={
        status.HTTP_200_OK: {
            "model": ProfileResponse,
            "description": "Profile retrieved successfully.",
        },
        status.HTTP_404_NOT_FOUND: PROFILE_NOT_FOUND_RESPONSE,
    },
)
async def get_profile_by_id(
    profile_id: int = Path(..., ge=1, le=MAX_ID, description="Profile identifier"),
    db: Session = Depends(get_db),
    profile_service: ProfileService = Depends(get_profile_service),
) -> ProfileResponse:
    """Get a specific profile.

    Raises:
        HTTPException: 404 if the profile does not exist.
        HTTPException: 500 if internal server errors occur.
    """
    try:
        profile_entity = await profile_service.get_profile_by_id(db, profile_id)
        return ProfileConverter.entity_to_response(profile_entity)
    except ProfileNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e)) from e
    except Exception as e:
        logger.error(f"Failed to retrieve profile {profile_id}: {str(e)}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to retrieve profile",
        ) from e


@router.get(
    path="/profiles/{profile_id}/author",
    description="Retrieve the author a profile belongs to.",
    response_model=AuthorResponse,
    status_code=status.HTTP_200_OK,
    responses={
        status.HTTP_200_OK: {
            "model": AuthorResponse,
            "description": "The profile's author.",
        },
        status.HTTP_404_NOT_FOUND: PROFILE_NOT_FOUND_RESPONSE,
    },
)
async def get_profile_author(
    profile_id: int = Path(..., ge=1, le=MAX_ID, description="Profile identifier"),
    db: Session = Depends(get_db),
    profile_service: ProfileService = Depends(get_profile_service),
) -> AuthorResponse:
    """Follow the profile's author_id to its author.

    Raises:
        HTTPException: 404 if the profile (or its author) does not exist.
        HTTPException: 500 if internal server errors occur.
    """
    try:
        author_entity = await profile_service.get_profile_author(db, profile_id)
        return AuthorConverter.entity_to_response(author_entity)
    except (ProfileNotFoundError, AuthorNotFoundError) as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e)) from e
    except Exception as e:
        logger.error(f"Failed to retrieve author of profile {profile_id}: {str(e)}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to retrieve author",
        ) from e
