from __future__ import annotations

from django.core.validators import MaxValueValidator, MinValueValidator
from django.db import models

from .choices import Category, Gender, Language, ProjectType


class RecordImmutableError(Exception):
    """Raised when code tries to change or remove a stored submission."""


class SubmissionRecord(models.Model):
    """Insert-only row: created once from a validated submission, never edited."""

    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        abstract = True

    def save(self, *args, **kwargs):
        if not self._state.adding:
            raise RecordImmutableError(f"{type(self).__name__} {self.pk} is immutable.")
        super().save(*args, **kwargs)

    def delete(self, *args, **kwargs):
        raise RecordImmutableError(f"{type(self).__name__} {self.pk} cannot be deleted.")


class ContactMessage(SubmissionRecord):
    first_name = models.CharField(max_length=30)
    last_name = models.CharField(max_length=30)
    gender = models.CharField(max_length=10, choices=Gender.choices)
    mobile = models.CharField(max_length=13)
    dob = models.DateField()
    email = models.EmailField(max_length=254)
    language = models.CharField(max_length=20, choices=Language.choices)
    message = models.TextField()

    class Meta:
        db_table = "contact_messages"
        ordering = ["-id"]

    def __str__(self):
        return f"{self.first_name} {self.last_name} <{self.email}>"


class ProjectIdea(SubmissionRecord):
    team_name = models.CharField(max_length=50)
    team_size = models.PositiveSmallIntegerField(
        validators=[MinValueValidator(1), MaxValueValidator(10)],
    )
    rep_name = models.CharField(max_length=50)
    rep_id = models.CharField(max_length=7)
    rep_email = models.EmailField(max_length=254)
    other_members = models.TextField(blank=True, default="")
    course_code = models.CharField(max_length=20)
    category = models.CharField(max_length=20, choices=Category.choices)
    project_type = models.CharField(max_length=10, choices=ProjectType.choices)
    project_name = models.CharField(max_length=60)
    description = models.TextField()
    tools = models.TextField(blank=True, default="")

    class Meta:
        db_table = "projects"
        ordering = ["-id"]

    def __str__(self):
        return f"{self.project_name} ({self.team_name})"
