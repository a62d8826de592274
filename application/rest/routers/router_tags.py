from typing import List

from application.converters.post_converter import PostConverter
from application.converters.tag_converter import TagConverter
from application.rest.schemas.input.common_input import MAX_ID
from application.rest.schemas.input.tag_input import TagCreate
from application.rest.schemas.output.common_output import ErrorResponse
from application.rest.schemas.output.post_output import PostResponse
from application.rest.schemas.output.tag_output import TagResponse
from domain.services.tag_service import (
    TagAlreadyExistsError,
    TagNotFoundError,
    TagService,
)
from fastapi import APIRouter, Depends, HTTPException, Path, status
from sqlalchemy.orm import Session
from utils.dependencies import get_db, get_tag_service

router = APIRouter()


@router.get(
    path="/tags",
    description="Retrieve all available tags sorted by name.",
    response_model=List[TagResponse],
    status_code=status.HTTP_200_OK,
    responses={
        status.HTTP_200_OK: {
            "model": List[TagResponse],
            "description": "List of all available tags.",
        },
        status.HTTP_500_INTERNAL_SERVER_ERROR: {
            "model": ErrorResponse,
            "description": "Internal server error - database connection failed.",
            "content": {
                "application/json": {
                    "example": {"detail": "Database connection error."}
                }
            },
        },
    },
)
async def get_tags(
    db: Session = Depends(get_db), tag_service: TagService = Depends(get_tag_service)
) -> List[TagResponse]:
    """Get all available tags.

    1. Router receives request and fresh DB session
    2. Router delegates to Domain Service, passing session
    3. Domain Service applies business rules and delegates to Repository
    4. Repository handles data persistence using SQLAlchemy with session
    5. Results flow back through layers with conversions (Entity -> Pydantic)

    Args:
        db (Session): Fresh database session for this request.
        tag_service (TagService): Domain service with injected repositories.

    Returns:
        List[TagResponse]: List of all tag response schemas.

    Raises:
        HTTPException: 500 if internal server errors occur.
    """
    try:
        tag_entities = await tag_service.get_all_tags(db)
        return TagConverter.entities_to_responses(tag_entities)
    except Exception as e:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to retrieve tags",
        ) from e


@router.post(
    path="/tags",
    description="Create a new tag with business rule validation.",
    response_model=TagResponse,
    status_code=status.HTTP_201_CREATED,
    responses={
        status.HTTP_201_CREATED: {
            "model": TagResponse,
            "description": "Tag created successfully.",
        },
        status.HTTP_400_BAD_REQUEST: {
            "model": ErrorResponse,
            "description": "Invalid tag data or tag already exists.",
            "content": {
                "application/json": {
                    "example": {"detail": "Tag with name 'Cats' already exists"}
                }
            },
        },
        status.HTTP_500_INTERNAL_SERVER_ERROR: {
            "model": ErrorResponse,
            "description": "Internal server error - tag creation failed.",
            "content": {
                "application/json": {"example": {"detail": "Failed to create tag."}}
            },
        },
    },
)
async def create_tag(
    tag_create: TagCreate,
    db: Session = Depends(get_db),
    tag_service: TagService = Depends(get_tag_service),
) -> TagResponse:
    """Create a new tag with domain business rule validation.

    Args:
        tag_create (TagCreate): Pydantic schema containing tag creation data.
        db (Session): Fresh database session for this request.
        tag_service (TagService): Domain service with injected repositories.

    Returns:
        TagResponse: Created tag response schema.

    Raises:
        HTTPException: 400 if tag already exists or invalid data.
        HTTPException: 500 if internal server errors occur.
    """
    try:
        created_entity = await tag_service.create_tag(db, tag_create.name)
        return TagConverter.entity_to_response(created_entity)
    except TagAlreadyExistsError as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST, detail=str(e)
        ) from e
    except ValueError as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST, detail=str(e)
        ) from e
    except Exception as e:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to create tag",
        ) from e


@router.get(
    path="/tags/{tag_id}",
    description="Retrieve a specific tag by its unique identifier.",
    response_model=TagResponse,
    status_code=status.HTTP_200_OK,
    responses={
        status.HTTP_200_OK: {
            "model": TagResponse,
            "description": "Tag retrieved successfully.",
        },
        status.HTTP_404_NOT_FOUND: {
            "model": ErrorResponse,
            "description": "Tag not found.",
            "content": {
                "application/json": {"example": {"detail": "Tag with ID 42 not found"}}
            },
        },
        status.HTTP_500_INTERNAL_SERVER_ERROR: {
            "model": ErrorResponse,
            "description": "Internal server error - tag retrieval failed.",
            "content": {
                "application/json": {"example": {"detail": "Failed to retrieve tag."}}
            },
        },
    },
)
async def get_tag_by_id(
    tag_id: int = Path(..., ge=1, le=MAX_ID, description="Tag identifier"),
    db: Session = Depends(get_db),
    tag_service: TagService = Depends(get_tag_service),
) -> TagResponse:
    """Get a specific tag by its unique identifier.

    Args:
        tag_id (int): Identifier of the tag.
        db (Session): Fresh database session for this request.
        tag_service (TagService): Domain service with injected repositories.

    Returns:
        TagResponse: Tag response schema.

    Raises:
        HTTPException: 404 if tag not found.
        HTTPException: 500 if internal server errors occur.
    """
    try:
        tag_entity = await tag_service.get_tag_by_id(db, tag_id)
        return TagConverter.entity_to_response(tag_entity)
    except TagNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e)) from e
    except Exception as e:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to retrieve tag",
        ) from e


@router.get(
    path="/tags/{tag_id}/posts",
    description="Retrieve the posts carrying a tag through the post_tags join table.",
    response_model=List[PostResponse],
    status_code=status.HTTP_200_OK,
    responses={
        status.HTTP_200_OK: {
            "model": List[PostResponse],
            "description": "Posts carrying the tag, possibly empty.",
        },
        status.HTTP_404_NOT_FOUND: {
            "model": ErrorResponse,
            "description": "Tag not found.",
        },
    },
)
async def get_tag_posts(
    tag_id: int = Path(..., ge=1, le=MAX_ID, description="Tag identifier"),
    db: Session = Depends(get_db),
    tag_service: TagService = Depends(get_tag_service),
) -> List[PostResponse]:
    """Get the posts linked to a tag.

    Raises:
        HTTPException: 404 if tag not found.
        HTTPException: 500 if internal server errors occur.
    """
    try:
        post_entities = await tag_service.get_tag_posts(db, tag_id)
        return PostConverter.entities_to_responses(post_entities)
    except TagNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e)) from e
    except Exception as e:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to retrieve posts",
        ) from e
