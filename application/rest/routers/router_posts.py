import logging
from typing import List

from application.converters.author_converter import AuthorConverter
from application.converters.post_converter import PostConverter
from application.converters.tag_converter import TagConverter
from application.rest.schemas.input.common_input import MAX_ID
from application.rest.schemas.input.post_input import PostTagCreate
from application.rest.schemas.output.author_output import AuthorResponse
from application.rest.schemas.output.common_output import ErrorResponse
from application.rest.schemas.output.post_output import PostResponse, PostTagResponse
from application.rest.schemas.output.tag_output import TagResponse
from domain.services.author_service import AuthorNotFoundError
from domain.services.post_service import PostNotFoundError, PostService
from domain.services.tag_service import TagNotFoundError
from fastapi import APIRouter, Depends, HTTPException, Path, Response, status
from sqlalchemy.orm import Session
from utils.dependencies import get_db, get_post_service

logger = logging.getLogger(__name__)
router = APIRouter()

POST_NOT_FOUND_RESPONSE = {
    "model": ErrorResponse,
    "description": "Post not found.",
    "content": {
        "application/json": {"example": {"detail": "Post with ID 9 not found"}}
    },
}


@router.get(
    path="/posts",
    description="Retrieve all posts.",
    response_model=List[PostResponse],
    status_code=status.HTTP_200_OK,
    responses={
        status.HTTP_200_OK: {
            "model": List[PostResponse],
            "description": "List of all posts.",
        },
        status.HTTP_500_INTERNAL_SERVER_ERROR: {
            "model": ErrorResponse,
            "description": "Internal server error - database query failed.",
        },
    },
)
async def get_posts(
    db: Session = Depends(get_db),
    post_service: PostService = Depends(get_post_service),
) -> List[PostResponse]:
    """Get all posts ordered by ID."""
    try:
        post_entities = await post_service.list_posts(db)
        return PostConverter.entities_to_responses(post_entities)
    except Exception as e:
        logger.error(f"Failed to retrieve posts: {str(e)}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to retrieve posts",
        ) from e


@router.get(
    path="/posts/{post_id}",
    description="Retrieve a specific post by its identifier.",
    response_model=PostResponse,
    status_code=status.HTTP_200_OK,
    responses={
        status.HTTP_200_OK: {
            "model": PostResponse,
            "description": "Post retrieved successfully.",
        },
        status.HTTP_404_NOT_FOUND: POST_NOT_FOUND_RESPONSE,
    },
)
async def get_post_by_id(
    post_id: int = Path(..., ge=1, le=MAX_ID, description="Post identifier"),
    db: Session = Depends(get_db),
    post_service: PostService = Depends(get_post_service),
) -> PostResponse:
    """Get a specific post.

    Raises:
        HTTPException: 404 if the post does not exist.
        HTTPException: 500 if internal server errors occur.
    """
    try:
        post_entity = await post_service.get_post_by_id(db, post_id)
        return PostConverter.entity_to_response(post_entity)
    except PostNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e)) from e
    except Exception as e:
        logger.error(f"Failed to retrieve post {post_id}: {str(e)}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to retrieve post",
        ) from e


@router.get(
    path="/posts/{post_id}/author",
    description="Retrieve the author a post belongs to (many-to-one).",
    response_model=AuthorResponse,
    status_code=status.HTTP_200_OK,
    responses={
        status.HTTP_200_OK: {
            "model": AuthorResponse,
            "description": "The post's author.",
        },
        status.HTTP_404_NOT_FOUND: POST_NOT_FOUND_RESPONSE,
    },
)
async def get_post_author(
    post_id: int = Path(..., ge=1, le=MAX_ID, description="Post identifier"),
    db: Session = Depends(get_db),
    post_service: PostService = Depends(get_post_service),
) -> AuthorResponse:
    """Follow the post's author_id to its author.

    Args:
        post_id (int): Identifier of the post.
        db (Session): Fresh database session for this request.
        post_service (PostService): Domain service with injected repositories.

    Returns:
        AuthorResponse: The author of the post.

    Raises:
        HTTPException: 404 if the post (or its author) does not exist.
        HTTPException: 500 if internal server errors occur.
    """
    try:
        author_entity = await post_service.get_post_author(db, post_id)
        return AuthorConverter.entity_to_response(author_entity)
    except (PostNotFoundError, AuthorNotFoundError) as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e)) from e
    except Exception as e:
        logger.error(f"Failed to retrieve author of post {post_id}: {str(e)}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to retrieve author",
        ) from e


@router.get(
    path="/posts/{post_id}/tags",
    description="Retrieve the tags of a post through the post_tags join table.",
    response_model=List[TagResponse],
    status_code=status.HTTP_200_OK,
    responses={
        status.HTTP_200_OK: {
            "model": List[TagResponse],
            "description": "The post's tags, possibly empty.",
        },
        status.HTTP_404_NOT_FOUND: POST_NOT_FOUND_RESPONSE,
    },
)
async def get_post_tags(
    post_id: int = Path(..., ge=1, le=MAX_ID, description="Post identifier"),
    db: Session = Depends(get_db),
    post_service: PostService = Depends(get_post_service),
) -> List[TagResponse]:
    """Get the tags linked to a post.

    Raises:
        HTTPException: 404 if the post does not exist.
        HTTPException: 500 if internal server errors occur.
    """
    try:
        tag_entities = await post_service.get_post_tags(db, post_id)
        return TagConverter.entities_to_responses(tag_entities)
    except PostNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e)) from e
    except Exception as e:
        logger.error(f"Failed to retrieve tags of post {post_id}: {str(e)}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to retrieve tags",
        ) from e


@router.post(
    path="/posts/{post_id}/tags",
    description="Attach an existing tag to a post by inserting a post_tags row.",
    response_model=PostTagResponse,
    status_code=status.HTTP_201_CREATED,
    responses={
        status.HTTP_200_OK: {
            "model": PostTagResponse,
            "description": "Tag was already attached; the existing join row.",
        },
        status.HTTP_201_CREATED: {
            "model": PostTagResponse,
            "description": "Tag attached to the post.",
        },
        status.HTTP_404_NOT_FOUND: {
            "model": ErrorResponse,
            "description": "Post or tag not found.",
            "content": {
                "application/json": {"example": {"detail": "Tag with ID 5 not found"}}
            },
        },
    },
)
async def tag_post(
    post_tag_create: PostTagCreate,
    response: Response,
    post_id: int = Path(..., ge=1, le=MAX_ID, description="Post identifier"),
    db: Session = Depends(get_db),
    post_service: PostService = Depends(get_post_service),
) -> PostTagResponse:
    """Link a tag to a post.

    Attaching a tag the post already carries returns the existing join row
    with 200 instead of 201.

    Args:
        post_tag_create (PostTagCreate): The tag to attach.
        response (Response): Outgoing response, used to set the status code.
        post_id (int): Identifier of the post.
        db (Session): Fresh database session for this request.
        post_service (PostService): Domain service with injected repositories.

    Returns:
        PostTagResponse: The join row.

    Raises:
        HTTPException: 404 if the post or the tag does not exist.
        HTTPException: 500 if internal server errors occur.
    """
    try:
        post_tag_entity, created = await post_service.tag_post(
            db, post_id, post_tag_create.tag_id
        )
        if not created:
            response.status_code = status.HTTP_200_OK
        return PostConverter.post_tag_to_response(post_tag_entity)
    except (PostNotFoundError, TagNotFoundError) as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e)) from e
    except Exception as e:
        logger.error(
            f"Failed to tag post {post_id} with tag {post_tag_create.tag_id}: {str(e)}"
        )
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to tag post",
        ) from e
