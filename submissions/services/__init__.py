"""
Submissions Services Layer

- Models: pure data + insert-only constraint
- Services: validation gate + persistence + error translation
- Views/APIs: request parsing, response mapping

Views receive a service instance at URL configuration time.
"""

from .submission_service import (
    SubmissionService,
    ContactMessageService,
    ProjectIdeaService,
)

__all__ = [
    "SubmissionService",
    "ContactMessageService",
    "ProjectIdeaService",
]
