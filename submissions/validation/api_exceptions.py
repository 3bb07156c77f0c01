"""
Django REST Framework Exception Handler

Provides consistent error format for all API endpoints.
"""

from __future__ import annotations

import logging
import uuid
from typing import Any, Dict, Optional

from rest_framework.views import exception_handler
from rest_framework.exceptions import (
    APIException,
    MethodNotAllowed,
    NotFound,
    ParseError,
    UnsupportedMediaType,
    ValidationError as DRFValidationError,
)
from rest_framework.response import Response

from .errors import (
    APIError,
    ErrorCode,
    ErrorResponse,
    FieldError,
    PersistenceError,
)

logger = logging.getLogger(__name__)


def custom_exception_handler(exc: Exception, context: Dict[str, Any]) -> Optional[Response]:
    request = context.get("request")
    request_id = getattr(request, "request_id", None) if request else None
    if not request_id:
        request_id = str(uuid.uuid4())

    if isinstance(exc, APIError):
        exc.request_id = request_id
        if exc.status >= 500:
            logger.error("API error %s: %s", exc.code, exc.message)
        return Response(exc.to_response().to_dict(), status=exc.status)

    response = exception_handler(exc, context)

    if response is not None:
        error_response = _convert_to_standard_format(exc, request_id)
        return Response(error_response.to_dict(), status=response.status_code)

    view = context.get("view")
    logger.exception(
        "Unhandled exception in %s [request_id=%s]: %s",
        type(view).__name__ if view else "view",
        request_id,
        exc,
    )
    fallback = PersistenceError(
        message="An unexpected error occurred. Please try again later.",
        request_id=request_id,
    )
    return Response(fallback.to_response().to_dict(), status=fallback.status)


def _convert_to_standard_format(exc: Exception, request_id: str) -> ErrorResponse:
    if isinstance(exc, (ParseError, UnsupportedMediaType)):
        return ErrorResponse(
            code=ErrorCode.MALFORMED_REQUEST.value,
            message=str(exc.detail) if exc.detail else "Request body could not be parsed.",
            request_id=request_id,
        )

    if isinstance(exc, MethodNotAllowed):
        return ErrorResponse(
            code=ErrorCode.METHOD_NOT_ALLOWED.value,
            message=str(exc.detail),
            request_id=request_id,
        )

    if isinstance(exc, NotFound):
        return ErrorResponse(
            code=ErrorCode.RESOURCE_NOT_FOUND.value,
            message=str(exc.detail) if exc.detail else "Resource not found.",
            request_id=request_id,
        )

    if isinstance(exc, DRFValidationError):
        return ErrorResponse(
            code=ErrorCode.VALIDATION_ERROR.value,
            fields=_extract_field_errors(exc.detail),
            request_id=request_id,
        )

    if isinstance(exc, APIException):
        return ErrorResponse(
            code=ErrorCode.INTERNAL_ERROR.value,
            message=str(exc.detail) if exc.detail else "An error occurred.",
            request_id=request_id,
        )

    return ErrorResponse(
        code=ErrorCode.INTERNAL_ERROR.value,
        message="An unexpected error occurred.",
        request_id=request_id,
    )


def _extract_field_errors(detail: Any) -> list[FieldError]:
    errors = []

    if isinstance(detail, dict):
        for field_name, field_errors in detail.items():
            if not isinstance(field_errors, list):
                field_errors = [field_errors]
            for error in field_errors:
                errors.append(FieldError(
                    field=field_name,
                    code=ErrorCode.FIELD_INVALID.value,
                    message=str(error),
                ))
    elif isinstance(detail, list):
        for error in detail:
            errors.append(FieldError(
                field="__all__",
                code=ErrorCode.FIELD_INVALID.value,
                message=str(error),
            ))
    else:
        errors.append(FieldError(
            field="__all__",
            code=ErrorCode.FIELD_INVALID.value,
            message=str(detail),
        ))

    return errors
