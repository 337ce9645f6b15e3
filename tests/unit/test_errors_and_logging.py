"""
Error body and logging helper tests.
"""
import json
import logging
import re
import sys

import pytest

from petstore_api.errors import (
    APIError,
    AuthenticationError,
    ErrorCode,
    NotFoundError,
    PetstoreError,
    UpstreamAuthError,
    UpstreamError,
)
from petstore_api.logging_config import JSONFormatter, setup_logging, token_presence


@pytest.mark.unit
class TestErrorHierarchy:
    @pytest.mark.parametrize(
        "error, status_code, error_code",
        [
            (AuthenticationError("exchange failed"), 500, ErrorCode.AUTHENTICATION_FAILED),
            (UpstreamAuthError("rejected twice"), 500, ErrorCode.UPSTREAM_AUTH_FAILED),
            (UpstreamError("boom", upstream_status=502), 500, ErrorCode.SERVICE_UPSTREAM_ERROR),
            (NotFoundError("Pet", 7), 404, ErrorCode.RESOURCE_NOT_FOUND),
        ],
    )
    def test_status_and_code(self, error, status_code, error_code):
        assert isinstance(error, PetstoreError)
        assert error.status_code == status_code
        assert error.error_code == error_code

    def test_not_found_message(self):
        error = NotFoundError("Pet", 42)

        assert error.message == "Pet with ID '42' not found"
        assert error.resource_id == 42

    def test_upstream_error_keeps_status_in_details(self):
        error = UpstreamError("bad gateway", upstream_status=502, details={"path": "/types"})

        assert error.details == {"upstream_status": 502, "path": "/types"}

    def test_to_dict_matches_api_error_shape(self):
        body = NotFoundError("Pet", 42).to_dict()

        assert set(body) == set(APIError.model_fields)
        assert body["error_code"] == "RESOURCE_NOT_FOUND"
        assert body["service"] == "petstore-api"
        assert re.fullmatch(r"req_[0-9a-f]{12}", body["request_id"])

    def test_empty_details_render_as_null(self):
        assert AuthenticationError("nope").to_dict()["details"] is None


@pytest.mark.unit
class TestLogging:
    def test_json_formatter_emits_one_object(self):
        record = logging.LogRecord("petstore_api.client", logging.WARNING, __file__, 10, "retrying %s", ("GET",), None)
        record.request_id = "req_123"

        payload = json.loads(JSONFormatter().format(record))

        assert payload["level"] == "WARNING"
        assert payload["logger"] == "petstore_api.client"
        assert payload["message"] == "retrying GET"
        assert payload["request_id"] == "req_123"

    def test_json_formatter_includes_exception(self):
        try:
            raise ValueError("bad value")
        except ValueError:
            record = logging.LogRecord("x", logging.ERROR, __file__, 1, "failed", None, sys.exc_info())

        payload = json.loads(JSONFormatter().format(record))

        assert "ValueError: bad value" in payload["exception"]

    def test_setup_logging_installs_single_handler(self):
        root = logging.getLogger()
        saved_handlers, saved_level = root.handlers[:], root.level
        try:
            setup_logging("debug", json_logs=True)
            setup_logging("debug", json_logs=True)

            assert len(root.handlers) == 1
            assert isinstance(root.handlers[0].formatter, JSONFormatter)
            assert root.level == logging.DEBUG
        finally:
            root.handlers = saved_handlers
            root.setLevel(saved_level)

    def test_token_presence_never_reveals_value(self):
        assert token_presence("access_token", "abc123") == "access_token=present"
        assert token_presence("access_token", None) == "access_token=absent"
        assert token_presence("access_token", "") == "access_token=absent"

    def test_json_formatter_tags_service_by_default(self):
        record = logging.LogRecord("petstore_api.auth", logging.INFO, __file__, 5, "token obtained", None, None)

        payload = json.loads(JSONFormatter().format(record))

        assert payload["service"] == "petstore-api"
        assert "request_id" not in payload

    def test_json_formatter_copies_upstream_context(self):
        record = logging.LogRecord("petstore_api.client", logging.ERROR, __file__, 5, "API error", None, None)
        record.service = "petstore-worker"
        record.upstream_status = 502
        record.path = "/animals"

        payload = json.loads(JSONFormatter().format(record))

        assert payload["service"] == "petstore-worker"
        assert payload["upstream_status"] == 502
        assert payload["path"] == "/animals"
