from django.contrib import admin
from .models import ContactMessage, ProjectIdea


class ReadOnlySubmissionAdmin(admin.ModelAdmin):
    """Stored submissions are insert-only; the admin can browse but never edit."""

    def has_add_permission(self, request):
        return False

    def has_change_permission(self, request, obj=None):
        return False

    def has_delete_permission(self, request, obj=None):
        return False


@admin.register(ContactMessage)
class ContactMessageAdmin(ReadOnlySubmissionAdmin):
    list_display = ('id', 'first_name', 'last_name', 'email', 'language', 'created_at')
    list_filter = ('gender', 'language')
    search_fields = ('first_name', 'last_name', 'email')


@admin.register(ProjectIdea)
class ProjectIdeaAdmin(ReadOnlySubmissionAdmin):
    list_display = ('id', 'project_name', 'team_name', 'team_size', 'course_code', 'category', 'created_at')
    list_filter = ('category', 'project_type')
    search_fields = ('project_name', 'team_name', 'rep_name', 'course_code')
