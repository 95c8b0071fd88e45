"""
Standardized API response models and utilities.
Provides consistent response formatting across all endpoints and the
translation of service envelopes into HTTP outcomes.
"""

from typing import Optional
from pydantic import BaseModel, Field
from datetime import datetime

from fastapi import Response, status

from app.exceptions import ConflictError, NotFoundError, ServiceError
from domain.enums import ServiceStatus
from domain.schemas import ServiceResponse


class ErrorDetail(BaseModel):
    """Detailed error information"""

    code: str = Field(..., description="Error code")
    message: str = Field(..., description="Error message")
    details: Optional[dict] = Field(None, description="Additional error details")


class ErrorResponse(BaseModel):
    """Standardized error response"""

    success: bool = Field(False, description="Always false for errors")
    error: ErrorDetail = Field(..., description="Error details")
    timestamp: datetime = Field(
        default_factory=datetime.utcnow, description="Error timestamp"
    )


class HealthResponse(BaseModel):
    """Health check response"""

    status: str = Field(..., description="Service status")
    service: str = Field(..., description="Service name")
    version: Optional[str] = Field(None, description="Service version")
    timestamp: datetime = Field(
        default_factory=datetime.utcnow, description="Check timestamp"
    )


def error_response(
    code: str,
    message: str,
    details: dict = None,
) -> dict:
    """Create a standardized error response"""
    error = {"code": code, "message": message}
    if details:
        error["details"] = details
    return {
        "success": False,
        "error": error,
        "timestamp": datetime.utcnow().isoformat(),
    }


def raise_for_envelope(response: ServiceResponse) -> ServiceResponse:
    """
    Raise the API exception matching a rejecting envelope.

    NOT_FOUND -> NotFoundError (404), DUPLICATE -> ConflictError (409),
    ERROR -> ServiceError (500). Normal-path envelopes are returned unchanged.
    """
    messages = list(response.messages)
    details = {"messages": messages} if messages else None

    if response.status == ServiceStatus.NOT_FOUND:
        raise NotFoundError(messages[0] if messages else "Not found", details=details)
    if response.status == ServiceStatus.DUPLICATE:
        raise ConflictError(
            messages[0] if messages else "Conflict", details=details, code="DUPLICATE_LINK"
        )
    if response.status == ServiceStatus.ERROR:
        raise ServiceError(messages[0] if messages else "An error occurred", details=details)
    return response


def created_response(body: BaseModel, location: str) -> Response:
    """201 Created with a Location header pointing at the new resource"""
    return Response(
        content=body.model_dump_json(),
        status_code=status.HTTP_201_CREATED,
        media_type="application/json",
        headers={"Location": location},
    )


def no_content_response() -> Response:
    return Response(status_code=status.HTTP_204_NO_CONTENT)
