import logging
from typing import List

from application.converters.author_converter import AuthorConverter
from application.converters.post_converter import PostConverter
from application.converters.profile_converter import ProfileConverter
from application.rest.schemas.input.author_input import AuthorCreate
from application.rest.schemas.input.common_input import MAX_ID
from application.rest.schemas.input.post_input import PostCreate
from application.rest.schemas.input.profile_input import ProfileCreate
from application.rest.schemas.output.author_output import AuthorResponse
from application.rest.schemas.output.common_output import ErrorResponse
from application.rest.schemas.output.post_output import PostResponse
from application.rest.schemas.output.profile_output import ProfileResponse
from domain.services.author_service import (
    AuthorNotFoundError,
    AuthorService,
    ProfileAlreadyExistsError,
    ProfileNotFoundError,
)
from fastapi import APIRouter, Depends, HTTPException, Path, status
from sqlalchemy.orm import Session
from utils.dependencies import get_author_service, get_db

logger = logging.getLogger(__name__)
router = APIRouter()

AUTHOR_NOT_FOUND_RESPONSE = {
    "model": ErrorResponse,
    "description": "Author not found.",
    "content": {
        "application/json": {"example": {"detail": "Author with ID 7 not found"}}
    },
}


@router.get(
    path="/authors",
    description="Retrieve all authors.",
    response_model=List[AuthorResponse],
    status_code=status.HTTP_200_OK,
    responses={
        status.HTTP_200_OK: {
            "model": List[AuthorResponse],
            "description": "List of all authors.",
        },
        status.HTTP_500_INTERNAL_SERVER_ERROR: {
            "model": ErrorResponse,
            "description": "Internal server error - database query failed.",
        },
    },
)
async def get_authors(
    db: Session = Depends(get_db),
    author_service: AuthorService = Depends(get_author_service),
) -> List[AuthorResponse]:
    """Get all authors ordered by ID.

    Args:
        db (Session): Fresh database session for this request.
        author_service (AuthorService): Domain service with injected repositories.

    Returns:
        List[AuthorResponse]: Every author.
    """
    try:
        author_entities = await author_service.list_authors(db)
        return AuthorConverter.entities_to_responses(author_entities)
    except Exception as e:
        logger.error(f"Failed to retrieve authors: {str(e)}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to retrieve authors",
        ) from e


@router.post(
    path="/authors",
    description="Create a new author.",
    response_model=AuthorResponse,
    status_code=status.HTTP_201_CREATED,
    responses={
        status.HTTP_201_CREATED: {
            "model": AuthorResponse,
            "description": "Author created successfully.",
        },
        status.HTTP_400_BAD_REQUEST: {
            "model": ErrorResponse,
            "description": "Invalid author data.",
            "content": {
                "application/json": {
                    "example": {"detail": "Author name cannot be empty or whitespace"}
                }
            },
        },
        status.HTTP_500_INTERNAL_SERVER_ERROR: {
            "model": ErrorResponse,
            "description": "Internal server error - author creation failed.",
        },
    },
)
async def create_author(
    author_create: AuthorCreate,
    db: Session = Depends(get_db),
    author_service: AuthorService = Depends(get_author_service),
) -> AuthorResponse:
    """Create a new author.

    Args:
        author_create (AuthorCreate): Pydantic schema containing author data.
        db (Session): Fresh database session for this request.
        author_service (AuthorService): Domain service with injected repositories.

    Returns:
        AuthorResponse: Created author.

    Raises:
        HTTPException: 400 if the name is invalid.
        HTTPException: 500 if internal server errors occur.
    """
    try:
        created_entity = await author_service.create_author(db, author_create.name)
        return AuthorConverter.entity_to_response(created_entity)
    except ValueError as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST, detail=str(e)
        ) from e
    except Exception as e:
        logger.error(f"Failed to create author: {str(e)}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to create author",
        ) from e


@router.get(
    path="/authors/{author_id}",
    description="Retrieve a specific author by its identifier.",
    response_model=AuthorResponse,
    status_code=status.HTTP_200_OK,
    responses={
        status.HTTP_200_OK: {
            "model": AuthorResponse,
            "description": "Author retrieved successfully.",
        },
        status.HTTP_404_NOT_FOUND: AUTHOR_NOT_FOUND_RESPONSE,
    },
)
async def get_author_by_id(
    author_id: int = Path(..., ge=1, le=MAX_ID, description="Author identifier"),
    db: Session = Depends(get_db),
    author_service: AuthorService = Depends(get_author_service),
) -> AuthorResponse:
    """Get a specific author.

    Raises:
        HTTPException: 404 if the author does not exist.
        HTTPException: 500 if internal server errors occur.
    """
    try:
        author_entity = await author_service.get_author_by_id(db, author_id)
        return AuthorConverter.entity_to_response(author_entity)
    except AuthorNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e)) from e
    except Exception as e:
        logger.error(f"Failed to retrieve author {author_id}: {str(e)}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to retrieve author",
        ) from e


@router.get(
    path="/authors/{author_id}/posts",
    description="Retrieve the posts written by an author (one-to-many).",
    response_model=List[PostResponse],
    status_code=status.HTTP_200_OK,
    responses={
        status.HTTP_200_OK: {
            "model": List[PostResponse],
            "description": "The author's posts, possibly empty.",
        },
        status.HTTP_404_NOT_FOUND: AUTHOR_NOT_FOUND_RESPONSE,
    },
)
async def get_author_posts(
    author_id: int = Path(..., ge=1, le=MAX_ID, description="Author identifier"),
    db: Session = Depends(get_db),
    author_service: AuthorService = Depends(get_author_service),
) -> List[PostResponse]:
    """Get every post whose author_id is this author.

    Raises:
        HTTPException: 404 if the author does not exist.
        HTTPException: 500 if internal server errors occur.
    """
    try:
        post_entities = await author_service.get_author_posts(db, author_id)
        return PostConverter.entities_to_responses(post_entities)
    except AuthorNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e)) from e
    except Exception as e:
        logger.error(f"Failed to retrieve posts of author {author_id}: {str(e)}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to retrieve posts",
        ) from e


@router.post(
    path="/authors/{author_id}/posts",
    description="Create a post under an author; author_id is filled in from the path.",
    response_model=PostResponse,
    status_code=status.HTTP_201_CREATED,
    responses={
        status.HTTP_201_CREATED: {
            "model": PostResponse,
            "description": "Post created successfully.",
        },
        status.HTTP_400_BAD_REQUEST: {
            "model": ErrorResponse,
            "description": "Invalid post data.",
        },
        status.HTTP_404_NOT_FOUND: AUTHOR_NOT_FOUND_RESPONSE,
    },
)
async def create_author_post(
    post_create: PostCreate,
    author_id: int = Path(..., ge=1, le=MAX_ID, description="Author identifier"),
    db: Session = Depends(get_db),
    author_service: AuthorService = Depends(get_author_service),
) -> PostResponse:
    """Create a post that belongs to the author in the path.

    Args:
        post_create (PostCreate): Title and optional content.
        author_id (int): Identifier of the parent author.
        db (Session): Fresh database session for this request.
        author_service (AuthorService): Domain service with injected repositories.

    Returns:
        PostResponse: Created post with its author_id set.

    Raises:
        HTTPException: 400 if the post data is invalid.
        HTTPException: 404 if the author does not exist.
        HTTPException: 500 if internal server errors occur.
    """
    try:
        created_entity = await author_service.create_post_for_author(
            db, author_id, post_create.title, post_create.content
        )
        return PostConverter.entity_to_response(created_entity)
    except AuthorNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e)) from e
    except ValueError as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST, detail=str(e)
        ) from e
    except Exception as e:
        logger.error(f"Failed to create post for author {author_id}: {str(e)}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to create post",
        ) from e


@router.get(
    path="/authors/{author_id}/profile",
    description="Retrieve the profile of an author (one-to-one).",
    response_model=ProfileResponse,
    status_code=status.HTTP_200_OK,
    responses={
        status.HTTP_200_OK: {
            "model": ProfileResponse,
            "description": "The author's profile.",
        },
        status.HTTP_404_NOT_FOUND: {
            "model": ErrorResponse,
            "description": "Author not found or author has no profile.",
            "content": {
                "application/json": {
                    "example": {"detail": "Author with ID 1 has no profile"}
                }
            },
        },
    },
)
async def get_author_profile(
    author_id: int = Path(..., ge=1, le=MAX_ID, description="Author identifier"),
    db: Session = Depends(get_db),
    author_service: AuthorService = Depends(get_author_service),
) -> ProfileResponse:
    """Get the single profile of an author.

    Raises:
        HTTPException: 404 if the author or its profile does not exist.
        HTTPException: 500 if internal server errors occur.
    """
    try:
        profile_entity = await author_service.get_author_profile(db, author_id)
        return ProfileConverter.entity_to_response(profile_entity)
    except (AuthorNotFoundError, ProfileNotFoundError) as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e)) from e
    except Exception as e:
        logger.error(f"Failed to retrieve profile of author {author_id}: {str(e)}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to retrieve profile",
        ) from e


@router.post(
    path="/authors/{author_id}/profile",
    description="Create the profile of an author; an author has at most one.",
    response_model=ProfileResponse,
    status_code=status.HTTP_201_CREATED,
    responses={
        status.HTTP_201_CREATED: {
            "model": ProfileResponse,
            "description": "Profile created successfully.",
        },
        status.HTTP_400_BAD_REQUEST: {
            "model": ErrorResponse,
            "description": "The author already has a profile.",
            "content": {
                "application/json": {
                    "example": {"detail": "Author with ID 1 already has profile 1"}
                }
            },
        },
        status.HTTP_404_NOT_FOUND: AUTHOR_NOT_FOUND_RESPONSE,
    },
)
async def create_author_profile(
    profile_create: ProfileCreate,
    author_id: int = Path(..., ge=1, le=MAX_ID, description="Author identifier"),
    db: Session = Depends(get_db),
    author_service: AuthorService = Depends(get_author_service),
) -> ProfileResponse:
    """Create the profile of the author in the path.

    Raises:
        HTTPException: 400 if the author already has a profile.
        HTTPException: 404 if the author does not exist.
        HTTPException: 500 if internal server errors occur.
    """
    try:
        created_entity = await author_service.create_profile_for_author(
            db, author_id, **profile_create.model_dump()
        )
        return ProfileConverter.entity_to_response(created_entity)
    except AuthorNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e)) from e
    except (ProfileAlreadyExistsError, ValueError) as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST, detail=str(e)
        ) from e
    except Exception as e:
        logger.error(f"Failed to create profile for author {author_id}: {str(e)}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to create profile",
        ) from e
