import logging

import pytest

from ideahub.middleware import RequestIDFilter, get_current_request_id


class RecordCollector(logging.Handler):
    def __init__(self):
        super().__init__()
        self.addFilter(RequestIDFilter())
        self.records = []

    def emit(self, record):
        self.records.append(record)


@pytest.fixture
def request_log():
    collector = RecordCollector()
    django_logger = logging.getLogger("django.request")
    django_logger.addHandler(collector)
    yield collector
    django_logger.removeHandler(collector)


class TestRequestIdInLogs:
    def test_bad_request_log_carries_request_id(self, api_client, request_log):
        response = api_client.post("/api/contact", {}, format="json", HTTP_X_REQUEST_ID="req-xyz")

        assert response.status_code == 400
        assert [(r.name, r.request_id) for r in request_log.records] == [("django.request", "req-xyz")]

    def test_not_found_log_carries_generated_request_id(self, client, request_log):
        response = client.get("/api/does-not-exist")

        assert response.status_code == 404
        assert request_log.records
        assert request_log.records[0].request_id == response["X-Request-ID"]

    def test_request_id_is_cleared_after_response(self, client):
        client.get("/health/", HTTP_X_REQUEST_ID="health-2")
        assert get_current_request_id() == "no-id"
