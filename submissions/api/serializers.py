from rest_framework import serializers

from submissions.models import ProjectIdea


class ProjectIdeaListSerializer(serializers.ModelSerializer):
    """Public listing projection; contact details beyond the rep name stay private."""

    class Meta:
        model = ProjectIdea
        fields = [
            "id",
            "team_name",
            "team_size",
            "course_code",
            "category",
            "project_type",
            "project_name",
            "rep_name",
            "description",
        ]
        read_only_fields = fields
