import logging

from django.shortcuts import render
from django.views.generic import TemplateView

from .choices import Category, Gender, Language, ProjectType
from .validation.errors import ErrorCode, ErrorResponse
from .validation.middleware import is_api_request
from .validation.schemas import ContactMessageSchema, ProjectIdeaSchema

logger = logging.getLogger(__name__)


class PageView(TemplateView):
    """Static page; form pages also get their option sets and rule table."""

    schema = None
    nav = ""

    def get_context_data(self, **kwargs):
        context = super().get_context_data(**kwargs)
        context["nav"] = self.nav
        if self.schema is not None:
            context["constraints"] = self.schema.constraints()
        return context


class ContactPageView(PageView):
    template_name = "contact-us.html"
    schema = ContactMessageSchema
    nav = "contact"
    extra_context = {
        "gender_choices": Gender.choices,
        "language_choices": Language.choices,
    }


class IdeaPageView(PageView):
    template_name = "idea.html"
    schema = ProjectIdeaSchema
    nav = "idea"
    extra_context = {
        "category_choices": Category.choices,
        "project_type_choices": ProjectType.choices,
    }


class ProjectsPageView(PageView):
    template_name = "projects.html"
    nav = "projects"
    extra_context = {"category_choices": Category.choices}


def custom_404_view(request, exception=None):
    if is_api_request(request):
        return ErrorResponse(
            code=ErrorCode.RESOURCE_NOT_FOUND.value,
            message="Resource not found.",
            request_id=getattr(request, "request_id", None) or "",
        ).to_json_response(404)
    return render(request, "errors/404.html", status=404)


def custom_500_view(request):
    if is_api_request(request):
        return ErrorResponse(
            code=ErrorCode.INTERNAL_ERROR.value,
            message="An unexpected error occurred. Please try again later.",
            request_id=getattr(request, "request_id", None) or "",
        ).to_json_response(500)
    return render(request, "errors/500.html", status=500)
