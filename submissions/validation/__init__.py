"""
Centralized Validation Module

This module provides the validation rules for the two public forms.
Server is authoritative; client mirrors constraints for UX.

Domains:
- Contact: messages sent through the contact-us page
- Project: team project ideas sent through the idea page
"""

from .schemas import (
    ContactMessageSchema,
    ProjectIdeaSchema,
    FieldConstraints,
    get_validation_constraints,
)
from .errors import (
    ValidationError,
    PersistenceError,
    APIError,
    ErrorCode,
    ErrorResponse,
    FieldError,
)

__all__ = [
    "ContactMessageSchema",
    "ProjectIdeaSchema",
    "FieldConstraints",
    "get_validation_constraints",
    "ValidationError",
    "PersistenceError",
    "APIError",
    "ErrorCode",
    "ErrorResponse",
    "FieldError",
]
