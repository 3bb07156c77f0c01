"""
Standardized Error Handling

Provides consistent error format:
API validation failure: { status: "error", code, errors: [{ field, code, message }], request_id }
API server failure:     { status: "error", code, msg, request_id }

HTTP Status Code Standards:
- 200: Success
- 400: Bad Request (validation errors, malformed input)
- 404: Not Found
- 405: Method Not Allowed
- 500: Internal Server Error (persistence failures, unhandled errors)
"""

from __future__ import annotations

import uuid
import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional, Union

from django.http import JsonResponse

logger = logging.getLogger(__name__)


class ErrorCode(str, Enum):
    VALIDATION_ERROR = "VALIDATION_ERROR"
    FIELD_REQUIRED = "FIELD_REQUIRED"
    FIELD_INVALID = "FIELD_INVALID"
    FIELD_TOO_SHORT = "FIELD_TOO_SHORT"
    FIELD_TOO_LONG = "FIELD_TOO_LONG"
    FIELD_OUT_OF_RANGE = "FIELD_OUT_OF_RANGE"
    FIELD_INVALID_FORMAT = "FIELD_INVALID_FORMAT"
    FIELD_INVALID_CHOICE = "FIELD_INVALID_CHOICE"
    FIELD_IN_FUTURE = "FIELD_IN_FUTURE"

    MALFORMED_REQUEST = "MALFORMED_REQUEST"
    RESOURCE_NOT_FOUND = "RESOURCE_NOT_FOUND"
    METHOD_NOT_ALLOWED = "METHOD_NOT_ALLOWED"

    PERSISTENCE_ERROR = "PERSISTENCE_ERROR"
    INTERNAL_ERROR = "INTERNAL_ERROR"


@dataclass
class FieldError:
    field: str
    code: str
    message: str

    def to_dict(self) -> Dict[str, str]:
        return {
            "field": self.field,
            "code": self.code,
            "message": self.message,
        }


@dataclass
class ErrorResponse:
    code: str
    message: Optional[str] = None
    fields: Optional[List[FieldError]] = None
    request_id: str = field(default_factory=lambda: str(uuid.uuid4()))

    def to_dict(self) -> Dict[str, Any]:
        result: Dict[str, Any] = {
            "status": "error",
            "code": self.code,
        }
        if self.fields is not None:
            result["errors"] = [f.to_dict() for f in self.fields]
        if self.message:
            result["msg"] = self.message
        result["request_id"] = self.request_id
        return result

    def to_json_response(self, status: int = 400) -> JsonResponse:
        return JsonResponse(self.to_dict(), status=status)


class APIError(Exception):
    def __init__(
        self,
        code: Union[ErrorCode, str],
        message: str,
        status: int = 400,
        fields: Optional[List[FieldError]] = None,
        request_id: Optional[str] = None,
    ):
        self.code = code.value if isinstance(code, ErrorCode) else code
        self.message = message
        self.status = status
        self.fields = fields
        self.request_id = request_id or str(uuid.uuid4())
        super().__init__(message)

    def to_response(self) -> ErrorResponse:
        return ErrorResponse(
            code=self.code,
            message=self.message,
            request_id=self.request_id,
        )

    def to_json_response(self) -> JsonResponse:
        return self.to_response().to_json_response(self.status)


class ValidationError(APIError):
    """Client-correctable input; carries every failed rule, never causes a write."""

    def __init__(
        self,
        fields: List[FieldError],
        message: str = "Validation failed",
        request_id: Optional[str] = None,
    ):
        super().__init__(
            code=ErrorCode.VALIDATION_ERROR,
            message=message,
            status=400,
            fields=fields,
            request_id=request_id,
        )

    def to_response(self) -> ErrorResponse:
        # The field list is the whole payload; the summary text stays server-side.
        return ErrorResponse(
            code=self.code,
            fields=self.fields,
            request_id=self.request_id,
        )

    @property
    def messages(self) -> List[str]:
        return [f.message for f in self.fields or []]


class PersistenceError(APIError):
    """The store could not be reached or rejected the write."""

    def __init__(
        self,
        message: str = "Database error while saving your submission.",
        request_id: Optional[str] = None,
    ):
        super().__init__(
            code=ErrorCode.PERSISTENCE_ERROR,
            message=message,
            status=500,
            request_id=request_id,
        )


class MalformedRequestError(APIError):
    def __init__(
        self,
        message: str = "Request body could not be parsed.",
        request_id: Optional[str] = None,
    ):
        super().__init__(
            code=ErrorCode.MALFORMED_REQUEST,
            message=message,
            status=400,
            request_id=request_id,
        )


class NotFoundError(APIError):
    def __init__(
        self,
        message: str = "Resource not found",
        request_id: Optional[str] = None,
    ):
        super().__init__(
            code=ErrorCode.RESOURCE_NOT_FOUND,
            message=message,
            status=404,
            request_id=request_id,
        )


def create_success_response(
    data: Any = None,
    message: Optional[str] = None,
) -> Dict[str, Any]:
    response: Dict[str, Any] = {"status": "ok"}
    if message:
        response["msg"] = message
    if data is not None:
        response["data"] = data
    return response
