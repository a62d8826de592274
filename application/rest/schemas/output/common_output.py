"""Common output schemas for API responses.

This module contains shared Pydantic models for common API responses
like error messages and status information.
"""

from typing import Optional

from pydantic import BaseModel


class ErrorResponse(BaseModel):
    """Schema for error responses across all endpoints.

    Attributes:
        detail (str): Detailed error message.
        error_code (str, optional): Specific error code for categorization.

    Example:
        >>> error_response = ErrorResponse(
        ...     detail="Author with ID 7 not found",
        ...     error_code="NOT_FOUND"
        ... )
    """

    detail: str
    error_code: Optional[str] = None


class HealthResponse(BaseModel):
    """Schema for health check responses.

    Attributes:
        status (str): Service health status.
        service (str): Service name identifier.

    Example:
        >>> health_response = HealthResponse(
        ...     status="healthy",
        ...     service="blog-associations"
        ... )
    """

    status: str
    service: str
