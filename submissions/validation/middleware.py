"""
Error Handling Middleware

Catches exceptions escaping plain Django views and returns standardized
error responses for API-style requests. DRF views are covered by
``custom_exception_handler`` before their exceptions reach this layer.
"""

from __future__ import annotations

import logging
import uuid
from typing import Callable, Optional

from django.conf import settings
from django.http import Http404, HttpRequest, HttpResponse

from .errors import APIError, NotFoundError, PersistenceError

logger = logging.getLogger(__name__)

API_PREFIXES = ("/api/", "/health/")


class ErrorHandlingMiddleware:
    def __init__(self, get_response: Callable):
        self.get_response = get_response

    def __call__(self, request: HttpRequest) -> HttpResponse:
        if not getattr(request, "request_id", None):
            request.request_id = str(uuid.uuid4())
        return self.get_response(request)

    def process_exception(self, request: HttpRequest, exc: Exception) -> Optional[HttpResponse]:
        if not is_api_request(request):
            return None

        request_id = getattr(request, "request_id", None) or str(uuid.uuid4())

        if isinstance(exc, Http404):
            exc = NotFoundError(str(exc) or "Resource not found")

        if isinstance(exc, APIError):
            exc.request_id = request_id
            return exc.to_json_response()

        logger.exception(
            f"Unhandled exception [request_id={request_id}]: {exc}",
            extra={"request_id": request_id},
        )

        message = "An unexpected error occurred. Please try again later."
        if settings.DEBUG:
            message = f"{type(exc).__name__}: {str(exc)}"

        return PersistenceError(message=message, request_id=request_id).to_json_response()


def is_api_request(request: HttpRequest) -> bool:
    if request.path.startswith(API_PREFIXES):
        return True

    accept = request.headers.get("Accept", "")
    if "application/json" in accept:
        return True

    if request.headers.get("X-Requested-With") == "XMLHttpRequest":
        return True

    return False
