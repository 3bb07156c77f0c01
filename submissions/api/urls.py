"""API URL routing for the form intake endpoints."""
from django.urls import re_path

from submissions.services import ContactMessageService, ProjectIdeaService

from .views import ContactSubmitView, ProjectListView, ProjectSubmitView, ValidationConstraintsView

contact_service = ContactMessageService()
project_service = ProjectIdeaService()

urlpatterns = [
    re_path(r"^contact/?$", ContactSubmitView.as_view(service=contact_service), name="api-contact"),
    re_path(r"^project/?$", ProjectSubmitView.as_view(service=project_service), name="api-project"),
    re_path(r"^projects/?$", ProjectListView.as_view(service=project_service), name="api-projects"),
    re_path(
        r"^validation/constraints/?$",
        ValidationConstraintsView.as_view(),
        name="validation-constraints",
    ),
]
