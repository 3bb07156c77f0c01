"""
Form Validation Schemas

Centralized validation rules per submission form.
Server is authoritative; the browser runs the exported copy of the same table.

Each field is checked rule by rule, in this order:
- required (values are trimmed first; an empty required value stops here)
- kind (letters, email, integer, date, choice; a failure stops here)
- length, pattern, range, not-in-future

Every failed rule contributes exactly one FieldError. Patterns are written so
they compile identically under Python ``re`` and JavaScript ``RegExp``.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from datetime import date
from typing import Any, Dict, List, Mapping, Optional, Tuple

from django.utils import timezone

from submissions.choices import Category, Gender, Language, ProjectType

from .errors import ErrorCode, FieldError, ValidationError

EMAIL_PATTERN = r"^[a-zA-Z0-9._%+-]+@[a-zA-Z0-9.-]+\.[a-zA-Z]{2,}$"
SAUDI_MOBILE_PATTERN = r"^(?:\+9665[0-9]{8}|05[0-9]{8})$"
REP_ID_PATTERN = r"^[0-9]{7}$"
COURSE_CODE_PATTERN = r"^[A-Za-z]{2,}[0-9]{2,}$"

_ISO_DATE = re.compile(r"[0-9]{4}-[0-9]{2}-[0-9]{2}")
_INTEGER = re.compile(r"[+-]?[0-9]+")

# Sentinel for values of a type no rule can interpret (lists, objects, booleans)
_UNUSABLE = object()

TEXT_KINDS = ("text", "letters", "email")


@dataclass
class FieldConstraints:
    label: str
    column: str
    required: bool = True
    kind: str = "text"
    min_length: Optional[int] = None
    max_length: Optional[int] = None
    min_value: Optional[int] = None
    max_value: Optional[int] = None
    pattern: Optional[str] = None
    pattern_message: Optional[str] = None
    choices: Optional[List[Tuple[str, str]]] = None
    not_in_future: bool = False
    required_message: Optional[str] = None
    kind_message: Optional[str] = None
    length_message: Optional[str] = None
    range_message: Optional[str] = None

    def message_for(self, rule: str) -> str:
        if rule == "required":
            return self.required_message or f"{self.label} is required."
        if rule == "kind":
            return self.kind_message or self._default_kind_message()
        if rule == "length":
            return self.length_message or self._bounds_message("characters", self.min_length, self.max_length)
        if rule == "pattern":
            return self.pattern_message or f"{self.label} format is invalid."
        if rule == "range":
            return self.range_message or self._bounds_message("", self.min_value, self.max_value)
        if rule == "future":
            return f"{self.label} cannot be in the future."
        raise KeyError(rule)

    def _default_kind_message(self) -> str:
        if self.kind == "letters":
            return f"{self.label} must contain letters only."
        if self.kind == "email":
            return f"{self.label} must be a valid email address (name@example.com)."
        if self.kind == "integer":
            return f"{self.label} must be a whole number."
        if self.kind == "date":
            return f"{self.label} must be a valid date (YYYY-MM-DD)."
        if self.kind == "choice":
            values = ", ".join(value for value, _ in self.choices or [])
            return f"{self.label} must be one of: {values}."
        return f"{self.label} must be text."

    def _bounds_message(self, unit: str, low: Optional[int], high: Optional[int]) -> str:
        suffix = f" {unit}" if unit else ""
        if low is not None and high is not None:
            return f"{self.label} must be between {low} and {high}{suffix}."
        if low is not None:
            return f"{self.label} must be at least {low}{suffix}."
        return f"{self.label} must be at most {high}{suffix}."

    @property
    def has_length_rule(self) -> bool:
        return self.min_length is not None or self.max_length is not None

    @property
    def has_range_rule(self) -> bool:
        return self.min_value is not None or self.max_value is not None

    def export(self) -> Dict[str, Any]:
        """JSON-ready copy of this entry, messages included, for the client-side check."""
        exported: Dict[str, Any] = {
            "label": self.label,
            "required": self.required,
            "kind": self.kind,
            "messages": {
                "required": self.message_for("required"),
                "kind": self.message_for("kind"),
            },
        }
        if self.has_length_rule:
            exported["min_length"] = self.min_length
            exported["max_length"] = self.max_length
            exported["messages"]["length"] = self.message_for("length")
        if self.kind == "email":
            exported["kind_pattern"] = EMAIL_PATTERN
        if self.pattern:
            exported["pattern"] = self.pattern
            exported["messages"]["pattern"] = self.message_for("pattern")
        if self.has_range_rule:
            exported["min"] = self.min_value
            exported["max"] = self.max_value
            exported["messages"]["range"] = self.message_for("range")
        if self.choices:
            exported["choices"] = [{"value": value, "label": label} for value, label in self.choices]
        if self.not_in_future:
            exported["not_in_future"] = True
            exported["messages"]["future"] = self.message_for("future")
        return exported


class BaseSchema:
    FIELDS: Dict[str, FieldConstraints] = {}

    @classmethod
    def validate(cls, data: Mapping[str, Any]) -> Tuple[bool, List[FieldError]]:
        _, errors = cls._run(data)
        return len(errors) == 0, errors

    @classmethod
    def clean(cls, data: Mapping[str, Any]) -> Dict[str, Any]:
        """Return column-keyed, normalized values or raise with every failed rule."""
        cleaned, errors = cls._run(data)
        if errors:
            raise ValidationError(fields=errors)
        return cleaned

    @classmethod
    def constraints(cls) -> Dict[str, Any]:
        return {name: constraints.export() for name, constraints in cls.FIELDS.items()}

    @classmethod
    def _run(cls, data: Mapping[str, Any]) -> Tuple[Dict[str, Any], List[FieldError]]:
        cleaned: Dict[str, Any] = {}
        errors: List[FieldError] = []

        for field_name, constraints in cls.FIELDS.items():
            value, field_errors = cls._validate_field(field_name, data.get(field_name), constraints)
            cleaned[constraints.column] = value
            errors.extend(field_errors)

        return cleaned, errors

    @classmethod
    def _validate_field(
        cls,
        field_name: str,
        raw: Any,
        constraints: FieldConstraints,
    ) -> Tuple[Any, List[FieldError]]:
        def fail(rule: str, code: ErrorCode) -> Tuple[Any, List[FieldError]]:
            return None, [FieldError(field=field_name, code=code.value, message=constraints.message_for(rule))]

        value = _normalize(raw, constraints)

        if value is _UNUSABLE:
            return fail("kind", ErrorCode.FIELD_INVALID)

        if value is None or value == "":
            if constraints.required:
                return fail("required", ErrorCode.FIELD_REQUIRED)
            return ("" if constraints.kind in TEXT_KINDS else None), []

        value, ok = _coerce_kind(value, constraints)
        if not ok:
            code = ErrorCode.FIELD_INVALID_CHOICE if constraints.kind == "choice" else ErrorCode.FIELD_INVALID_FORMAT
            return fail("kind", code)

        errors: List[FieldError] = []

        if constraints.has_length_rule and isinstance(value, str):
            if constraints.min_length is not None and len(value) < constraints.min_length:
                errors.append(FieldError(field_name, ErrorCode.FIELD_TOO_SHORT.value, constraints.message_for("length")))
            elif constraints.max_length is not None and len(value) > constraints.max_length:
                errors.append(FieldError(field_name, ErrorCode.FIELD_TOO_LONG.value, constraints.message_for("length")))

        if constraints.pattern and not re.fullmatch(constraints.pattern, value):
            errors.append(FieldError(field_name, ErrorCode.FIELD_INVALID_FORMAT.value, constraints.message_for("pattern")))

        if constraints.has_range_rule:
            too_low = constraints.min_value is not None and value < constraints.min_value
            too_high = constraints.max_value is not None and value > constraints.max_value
            if too_low or too_high:
                errors.append(FieldError(field_name, ErrorCode.FIELD_OUT_OF_RANGE.value, constraints.message_for("range")))

        if constraints.not_in_future and value > timezone.localdate():
            errors.append(FieldError(field_name, ErrorCode.FIELD_IN_FUTURE.value, constraints.message_for("future")))

        return (None if errors else value), errors


def _normalize(raw: Any, constraints: FieldConstraints) -> Any:
    if raw is None:
        return None
    if isinstance(raw, bool):
        return _UNUSABLE
    if isinstance(raw, str):
        return raw.strip()
    if isinstance(raw, (int, float)):
        return raw if constraints.kind == "integer" else str(raw)
    return _UNUSABLE


def _coerce_kind(value: Any, constraints: FieldConstraints) -> Tuple[Any, bool]:
    kind = constraints.kind

    if kind == "letters":
        return value, value.isalpha()

    if kind == "email":
        return value, re.fullmatch(EMAIL_PATTERN, value) is not None

    if kind == "integer":
        if isinstance(value, int):
            return value, True
        if isinstance(value, float):
            return (int(value), True) if value.is_integer() else (value, False)
        if _INTEGER.fullmatch(value):
            return int(value), True
        return value, False

    if kind == "date":
        if not _ISO_DATE.fullmatch(value):
            return value, False
        try:
            return date.fromisoformat(value), True
        except ValueError:
            return value, False

    if kind == "choice":
        return value, value in {choice for choice, _ in constraints.choices or []}

    return value, True


class ContactMessageSchema(BaseSchema):
    FIELDS = {
        "firstName": FieldConstraints(
            label="First name",
            column="first_name",
            kind="letters",
            min_length=2,
            max_length=30,
        ),
        "lastName": FieldConstraints(
            label="Last name",
            column="last_name",
            kind="letters",
            min_length=2,
            max_length=30,
        ),
        "gender": FieldConstraints(
            label="Gender",
            column="gender",
            kind="choice",
            choices=list(Gender.choices),
            required_message="Please select a gender option.",
        ),
        "mobile": FieldConstraints(
            label="Mobile",
            column="mobile",
            pattern=SAUDI_MOBILE_PATTERN,
            pattern_message="Mobile must be a valid Saudi number (+9665XXXXXXXX or 05XXXXXXXX).",
        ),
        "dob": FieldConstraints(
            label="Date of birth",
            column="dob",
            kind="date",
            not_in_future=True,
        ),
        "email": FieldConstraints(
            label="Email",
            column="email",
            kind="email",
            max_length=254,
        ),
        "language": FieldConstraints(
            label="Language",
            column="language",
            kind="choice",
            choices=list(Language.choices),
            required_message="Please choose a preferred language.",
        ),
        "message": FieldConstraints(
            label="Message",
            column="message",
            min_length=10,
            max_length=1000,
        ),
    }


class ProjectIdeaSchema(BaseSchema):
    FIELDS = {
        "teamName": FieldConstraints(
            label="Team name",
            column="team_name",
            min_length=3,
            max_length=50,
        ),
        "teamSize": FieldConstraints(
            label="Team size",
            column="team_size",
            kind="integer",
            min_value=1,
            max_value=10,
        ),
        "repName": FieldConstraints(
            label="Representative name",
            column="rep_name",
            min_length=3,
            max_length=50,
        ),
        "repId": FieldConstraints(
            label="Representative ID",
            column="rep_id",
            pattern=REP_ID_PATTERN,
            pattern_message="Representative ID must be exactly 7 digits.",
        ),
        "repEmail": FieldConstraints(
            label="Representative email",
            column="rep_email",
            kind="email",
            max_length=254,
        ),
        "otherMembers": FieldConstraints(
            label="Other members",
            column="other_members",
            required=False,
        ),
        "courseCode": FieldConstraints(
            label="Course code",
            column="course_code",
            max_length=20,
            pattern=COURSE_CODE_PATTERN,
            pattern_message="Course code must look like CCSW321 (letters followed by digits).",
        ),
        "category": FieldConstraints(
            label="Major / track",
            column="category",
            kind="choice",
            choices=list(Category.choices),
            required_message="Please select a major / track.",
        ),
        "projectType": FieldConstraints(
            label="Project type",
            column="project_type",
            kind="choice",
            choices=list(ProjectType.choices),
            required_message="Please select a project type.",
        ),
        "projectName": FieldConstraints(
            label="Project title",
            column="project_name",
            min_length=3,
            max_length=60,
        ),
        "description": FieldConstraints(
            label="Description",
            column="description",
            min_length=10,
            max_length=400,
        ),
        "tools": FieldConstraints(
            label="Tools",
            column="tools",
            required=False,
        ),
    }


SCHEMAS = {
    "contact": ContactMessageSchema,
    "project": ProjectIdeaSchema,
}


def get_validation_constraints() -> Dict[str, Any]:
    return {name: schema.constraints() for name, schema in SCHEMAS.items()}
