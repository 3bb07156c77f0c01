"""
Form submission API.

Each view is handed its service through ``as_view(service=...)`` in urls.py;
services own validation and persistence, views only map outcomes to HTTP.
"""

import logging
from collections.abc import Mapping

from rest_framework.views import APIView

from submissions.validation.errors import MalformedRequestError
from submissions.validation.schemas import get_validation_constraints

from .response import APIResponse
from .serializers import ProjectIdeaListSerializer

logger = logging.getLogger(__name__)


class SubmissionView(APIView):
    """POST one record; 200 on insert, 400 with every field error, 500 on store failure."""

    service = None

    def post(self, request):
        data = request.data
        if not isinstance(data, Mapping):
            raise MalformedRequestError("Request body must be a JSON object.")

        self.service.submit(data)
        return APIResponse.success(message=self.service.success_message)


class ContactSubmitView(SubmissionView):
    pass


class ProjectSubmitView(SubmissionView):
    pass


class ProjectListView(APIView):
    service = None

    def get(self, request):
        projects = self.service.list_projects()
        serializer = ProjectIdeaListSerializer(projects, many=True)
        return APIResponse.success(data=serializer.data)


class ValidationConstraintsView(APIView):
    """
    Returns the validation table for both forms.

    The browser runs these rules before submitting; the server applies the
    same table again and remains authoritative.
    """

    def get(self, request):
        return APIResponse.success(data=get_validation_constraints())
