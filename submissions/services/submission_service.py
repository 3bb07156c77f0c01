"""
Submission Service - validation gate and persistence for the public forms.

Responsibilities:
- Running the authoritative rule set on incoming records
- Inserting exactly one row per accepted submission
- Translating store failures into PersistenceError
- Listing stored project ideas newest first
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Mapping, Optional, Type

from django.conf import settings
from django.db import DatabaseError, models, transaction

from submissions.models import ContactMessage, ProjectIdea
from submissions.validation.errors import PersistenceError
from submissions.validation.schemas import BaseSchema, ContactMessageSchema, ProjectIdeaSchema

logger = logging.getLogger(__name__)


class SubmissionService:
    """Validate a record and store it on the configured database alias."""

    schema: Type[BaseSchema]
    model: Type[models.Model]
    success_message: str
    failure_message: str

    def __init__(self, using: Optional[str] = None):
        self.using = using or settings.IDEAHUB_DATABASE

    def submit(self, data: Mapping[str, Any]) -> models.Model:
        """
        Validate and persist one submission.

        Raises:
            ValidationError: one or more rules failed; nothing was written.
            PersistenceError: the store rejected or could not take the write.
        """
        cleaned = self.schema.clean(data)

        try:
            record = self._insert(cleaned)
        except DatabaseError as exc:
            logger.error(
                "Failed to store %s: %s", self.model.__name__, exc, exc_info=True
            )
            raise PersistenceError(self.failure_message) from exc

        logger.info("Stored %s id=%s", self.model.__name__, record.pk)
        return record

    def _insert(self, fields: Dict[str, Any]) -> models.Model:
        with transaction.atomic(using=self.using):
            return self.model.objects.using(self.using).create(**fields)


class ContactMessageService(SubmissionService):
    schema = ContactMessageSchema
    model = ContactMessage
    success_message = "Your message was received successfully."
    failure_message = "Database error while saving your message."


class ProjectIdeaService(SubmissionService):
    schema = ProjectIdeaSchema
    model = ProjectIdea
    success_message = "Team project idea saved successfully."
    failure_message = "Database error while saving project."
    list_failure_message = "Database error while loading projects."

    def list_projects(self) -> List[ProjectIdea]:
        """All project ideas, highest id first."""
        try:
            return self._query()
        except DatabaseError as exc:
            logger.error("Failed to load projects: %s", exc, exc_info=True)
            raise PersistenceError(self.list_failure_message) from exc

    def _query(self) -> List[ProjectIdea]:
        return list(ProjectIdea.objects.using(self.using).order_by("-id"))
