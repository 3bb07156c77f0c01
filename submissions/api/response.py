from typing import Any, Optional
from rest_framework.response import Response

from submissions.validation.errors import create_success_response


class APIResponse:
    """Standardized API response format."""

    @staticmethod
    def success(
        data: Any = None,
        message: Optional[str] = None,
        status_code: int = 200,
    ) -> Response:
        """Return a successful API response: {status: "ok", msg?, data?}."""
        return Response(create_success_response(data=data, message=message), status=status_code)
