import pytest
from rest_framework.test import APIClient


@pytest.fixture
def api_client():
    return APIClient()


@pytest.fixture
def contact_payload():
    return {
        "firstName": "Sara",
        "lastName": "Alharbi",
        "gender": "female",
        "mobile": "0501234567",
        "dob": "2003-05-17",
        "email": "sara@uj.edu.sa",
        "language": "english",
        "message": "Hello, I have a question about team registration.",
    }


@pytest.fixture
def project_payload():
    return {
        "teamName": "Team CM3",
        "teamSize": 4,
        "repName": "Sara Alharbi",
        "repId": "2112345",
        "repEmail": "sara@uj.edu.sa",
        "otherMembers": "Noura, Reem, Lama",
        "courseCode": "CCSW321",
        "category": "se",
        "projectType": "group",
        "projectName": "ClassMate Idea Hub",
        "description": "A board where classmates post and browse team project ideas.",
        "tools": "Django, HTML, CSS",
    }
