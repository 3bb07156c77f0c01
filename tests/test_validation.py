"""
Validation rule set tests.
Covers per-field rules, boundaries, error aggregation and the exported table.
"""
from datetime import date, timedelta

import pytest
from django.utils import timezone

from submissions.validation import ContactMessageSchema, ProjectIdeaSchema, ValidationError
from submissions.validation.errors import ErrorCode
from submissions.validation.schemas import SAUDI_MOBILE_PATTERN, get_validation_constraints


def tomorrow():
    return (timezone.localdate() + timedelta(days=1)).isoformat()


class TestContactMessageSchema:
    def test_valid_payload(self, contact_payload):
        is_valid, errors = ContactMessageSchema.validate(contact_payload)
        assert is_valid is True
        assert errors == []

    def test_clean_returns_columns(self, contact_payload):
        cleaned = ContactMessageSchema.clean(contact_payload)
        assert cleaned["first_name"] == "Sara"
        assert cleaned["dob"] == date(2003, 5, 17)
        assert set(cleaned) == {
            "first_name", "last_name", "gender", "mobile",
            "dob", "email", "language", "message",
        }

    def test_values_are_trimmed(self, contact_payload):
        contact_payload["firstName"] = "  Sara  "
        contact_payload["message"] = "   " + "x" * 10 + "   "
        cleaned = ContactMessageSchema.clean(contact_payload)
        assert cleaned["first_name"] == "Sara"
        assert cleaned["message"] == "x" * 10

    @pytest.mark.parametrize(
        "field, value",
        [
            ("firstName", "S"),
            ("firstName", "Sara1"),
            ("firstName", "S" * 31),
            ("lastName", ""),
            ("lastName", "Al Harbi"),
            ("gender", None),
            ("gender", "other"),
            ("mobile", "12345"),
            ("dob", ""),
            ("dob", "2001-02-30"),
            ("dob", "17/05/2003"),
            ("email", "not-an-email"),
            ("email", "sara@uj"),
            ("language", ""),
            ("language", "french"),
            ("message", "too short"),
            ("message", "x" * 1001),
        ],
    )
    def test_single_violation_reports_one_error_for_that_field(self, contact_payload, field, value):
        contact_payload[field] = value
        is_valid, errors = ContactMessageSchema.validate(contact_payload)
        assert is_valid is False
        assert len(errors) == 1
        assert errors[0].field == field

    def test_missing_field_is_required(self, contact_payload):
        del contact_payload["gender"]
        _, errors = ContactMessageSchema.validate(contact_payload)
        assert [(e.field, e.code) for e in errors] == [("gender", ErrorCode.FIELD_REQUIRED.value)]
        assert errors[0].message == "Please select a gender option."

    @pytest.mark.parametrize("mobile", ["0501234567", "+966501234567", " 0551234567 "])
    def test_mobile_accepted(self, contact_payload, mobile):
        contact_payload["mobile"] = mobile
        assert ContactMessageSchema.validate(contact_payload)[0] is True

    @pytest.mark.parametrize(
        "mobile",
        [
            "05012345678",     # 05 + 9 digits
            "050123456",       # 05 + 7 digits
            "9665012345678",   # no leading +
            "966501234567",    # no leading +, right length
            "+9665012345678",  # +9665 + 9 digits
            "+96650123456",    # +9665 + 7 digits
            "0601234567",      # wrong prefix
            "05١٢٣٤٥٦٧٨",  # non-ASCII digits
        ],
    )
    def test_mobile_rejected(self, contact_payload, mobile):
        contact_payload["mobile"] = mobile
        _, errors = ContactMessageSchema.validate(contact_payload)
        assert [e.field for e in errors] == ["mobile"]
        assert errors[0].code == ErrorCode.FIELD_INVALID_FORMAT.value

    def test_message_of_exactly_ten_characters_is_accepted(self, contact_payload):
        contact_payload["message"] = "0123456789"
        assert ContactMessageSchema.validate(contact_payload)[0] is True

    def test_message_of_nine_characters_is_rejected(self, contact_payload):
        contact_payload["message"] = "012345678"
        _, errors = ContactMessageSchema.validate(contact_payload)
        assert len(errors) == 1
        assert errors[0].field == "message"
        assert errors[0].code == ErrorCode.FIELD_TOO_SHORT.value
        assert errors[0].message == "Message must be between 10 and 1000 characters."

    def test_message_upper_bound(self, contact_payload):
        contact_payload["message"] = "x" * 1000
        assert ContactMessageSchema.validate(contact_payload)[0] is True

    def test_length_counts_code_points(self, contact_payload):
        contact_payload["message"] = "a" * 999 + "\U0001F600"
        assert ContactMessageSchema.validate(contact_payload)[0] is True

        contact_payload["message"] = "a" * 1000 + "\U0001F600"
        _, errors = ContactMessageSchema.validate(contact_payload)
        assert [(e.field, e.code) for e in errors] == [("message", ErrorCode.FIELD_TOO_LONG.value)]

    def test_dob_today_is_accepted(self, contact_payload):
        contact_payload["dob"] = timezone.localdate().isoformat()
        assert ContactMessageSchema.validate(contact_payload)[0] is True

    def test_dob_in_future_is_rejected(self, contact_payload):
        contact_payload["dob"] = tomorrow()
        _, errors = ContactMessageSchema.validate(contact_payload)
        assert [(e.field, e.code) for e in errors] == [("dob", ErrorCode.FIELD_IN_FUTURE.value)]
        assert errors[0].message == "Date of birth cannot be in the future."

    def test_unicode_letters_are_accepted_in_names(self, contact_payload):
        contact_payload["firstName"] = "سارة"
        contact_payload["lastName"] = "Zoë"
        assert ContactMessageSchema.validate(contact_payload)[0] is True

    def test_non_scalar_value_is_invalid(self, contact_payload):
        contact_payload["firstName"] = ["Sara"]
        _, errors = ContactMessageSchema.validate(contact_payload)
        assert [(e.field, e.code) for e in errors] == [("firstName", ErrorCode.FIELD_INVALID.value)]

    def test_all_errors_are_collected_in_field_order(self, contact_payload):
        contact_payload["message"] = "short"
        contact_payload["firstName"] = "1"
        contact_payload["language"] = ""
        _, errors = ContactMessageSchema.validate(contact_payload)
        assert [e.field for e in errors] == ["firstName", "language", "message"]

    def test_empty_payload_reports_every_field(self):
        _, errors = ContactMessageSchema.validate({})
        assert len(errors) == len(ContactMessageSchema.FIELDS)
        assert all(e.code == ErrorCode.FIELD_REQUIRED.value for e in errors)

    def test_clean_raises_with_all_messages(self):
        with pytest.raises(ValidationError) as excinfo:
            ContactMessageSchema.clean({"firstName": "Sara"})
        assert excinfo.value.status == 400
        assert len(excinfo.value.messages) == len(ContactMessageSchema.FIELDS) - 1


class TestProjectIdeaSchema:
    def test_valid_payload(self, project_payload):
        cleaned = ProjectIdeaSchema.clean(project_payload)
        assert cleaned["team_size"] == 4
        assert cleaned["description"].startswith("A board")

    def test_optional_fields_default_to_empty_string(self, project_payload):
        del project_payload["otherMembers"]
        project_payload["tools"] = None
        cleaned = ProjectIdeaSchema.clean(project_payload)
        assert cleaned["other_members"] == ""
        assert cleaned["tools"] == ""

    @pytest.mark.parametrize("team_size", [1, 10, "7", " 3 "])
    def test_team_size_accepted(self, project_payload, team_size):
        project_payload["teamSize"] = team_size
        assert ProjectIdeaSchema.validate(project_payload)[0] is True

    @pytest.mark.parametrize("team_size", [0, 11, -1, "11", 2.5, "abc", True])
    def test_team_size_rejected(self, project_payload, team_size):
        project_payload["teamSize"] = team_size
        _, errors = ProjectIdeaSchema.validate(project_payload)
        assert [e.field for e in errors] == ["teamSize"]

    def test_team_size_string_is_converted(self, project_payload):
        project_payload["teamSize"] = "10"
        assert ProjectIdeaSchema.clean(project_payload)["team_size"] == 10

    def test_team_size_out_of_range_message(self, project_payload):
        project_payload["teamSize"] = 0
        _, errors = ProjectIdeaSchema.validate(project_payload)
        assert errors[0].code == ErrorCode.FIELD_OUT_OF_RANGE.value
        assert errors[0].message == "Team size must be between 1 and 10."

    def test_rep_id_of_seven_digits_is_accepted(self, project_payload):
        project_payload["repId"] = "1234567"
        assert ProjectIdeaSchema.validate(project_payload)[0] is True

    @pytest.mark.parametrize("rep_id", ["123456", "12345678", "12345a7", ""])
    def test_rep_id_rejected(self, project_payload, rep_id):
        project_payload["repId"] = rep_id
        _, errors = ProjectIdeaSchema.validate(project_payload)
        assert [e.field for e in errors] == ["repId"]

    @pytest.mark.parametrize("course_code", ["CCSW321", "cs12", "Cpit252"])
    def test_course_code_accepted(self, project_payload, course_code):
        project_payload["courseCode"] = course_code
        assert ProjectIdeaSchema.validate(project_payload)[0] is True

    @pytest.mark.parametrize("course_code", ["C321", "CCSW3", "321CCSW", "CC SW321", "CCSW321A"])
    def test_course_code_rejected(self, project_payload, course_code):
        project_payload["courseCode"] = course_code
        _, errors = ProjectIdeaSchema.validate(project_payload)
        assert [e.field for e in errors] == ["courseCode"]

    def test_project_type_required(self, project_payload):
        project_payload["projectType"] = ""
        _, errors = ProjectIdeaSchema.validate(project_payload)
        assert [e.message for e in errors] == ["Please select a project type."]

    def test_category_must_be_known(self, project_payload):
        project_payload["category"] = "medicine"
        _, errors = ProjectIdeaSchema.validate(project_payload)
        assert [(e.field, e.code) for e in errors] == [("category", ErrorCode.FIELD_INVALID_CHOICE.value)]

    @pytest.mark.parametrize(
        "field, value",
        [
            ("teamName", "AB"),
            ("teamName", "x" * 51),
            ("repName", "Al"),
            ("projectName", "x" * 61),
            ("description", "too short"),
            ("description", "x" * 401),
            ("repEmail", "rep@"),
        ],
    )
    def test_length_and_format_bounds(self, project_payload, field, value):
        project_payload[field] = value
        _, errors = ProjectIdeaSchema.validate(project_payload)
        assert [e.field for e in errors] == [field]

    def test_description_upper_bound(self, project_payload):
        project_payload["description"] = "x" * 400
        assert ProjectIdeaSchema.validate(project_payload)[0] is True


class TestConstraintExport:
    def test_both_forms_exported(self):
        constraints = get_validation_constraints()
        assert list(constraints["contact"]) == list(ContactMessageSchema.FIELDS)
        assert list(constraints["project"]) == list(ProjectIdeaSchema.FIELDS)

    def test_contact_entries(self):
        contact = get_validation_constraints()["contact"]
        assert contact["mobile"]["pattern"] == SAUDI_MOBILE_PATTERN
        assert contact["firstName"]["kind"] == "letters"
        assert contact["firstName"]["min_length"] == 2
        assert contact["firstName"]["max_length"] == 30
        assert [c["value"] for c in contact["gender"]["choices"]] == ["male", "female"]
        assert contact["dob"]["not_in_future"] is True
        assert "kind_pattern" in contact["email"]

    def test_project_entries(self):
        project = get_validation_constraints()["project"]
        assert project["teamSize"]["min"] == 1
        assert project["teamSize"]["max"] == 10
        assert project["otherMembers"]["required"] is False
        assert project["repId"]["messages"]["pattern"] == "Representative ID must be exactly 7 digits."

    def test_exported_messages_match_server_messages(self, contact_payload):
        contact = get_validation_constraints()["contact"]
        contact_payload["mobile"] = "123"
        contact_payload["message"] = "short"
        _, errors = ContactMessageSchema.validate(contact_payload)
        assert errors[0].message == contact["mobile"]["messages"]["pattern"]
        assert errors[1].message == contact["message"]["messages"]["length"]
