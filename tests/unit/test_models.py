"""
Unit tests for the Pydantic output models and the API Gateway response builder.
"""

import json
from datetime import datetime, timezone

import pytest
from pydantic import ValidationError

from hello_common.models import ErrorOutput, HelloOutput
from hello_common.responses import build_response


class TestHelloOutput:
    """Test cases for HelloOutput model."""

    def test_valid_output(self):
        output = HelloOutput(message="hello world, happy Monday!", location="203.0.113.7")

        assert output.model_dump() == {
            "message": "hello world, happy Monday!",
            "location": "203.0.113.7",
        }

    def test_empty_location_rejected(self):
        with pytest.raises(ValidationError):
            HelloOutput(message="hello world, happy Monday!", location="")

    def test_missing_message_rejected(self):
        with pytest.raises(ValidationError):
            HelloOutput(location="203.0.113.7")


class TestErrorOutput:
    """Test cases for ErrorOutput model."""

    def test_serializes_timestamp(self):
        output = ErrorOutput(
            error="LocationLookupError",
            message="IP lookup failed",
            request_id="req-1",
            timestamp=datetime(2024, 1, 2, 12, 0, tzinfo=timezone.utc),
        )

        body = json.loads(output.model_dump_json())
        assert body["timestamp"] == "2024-01-02T12:00:00Z"
        assert body["request_id"] == "req-1"


class TestBuildResponse:
    """Test cases for build_response."""

    def test_response_shape(self):
        output = HelloOutput(message="hello world, happy Monday!", location="203.0.113.7")

        response = build_response(200, output, "req-123")

        assert response["statusCode"] == 200
        assert response["headers"]["Content-Type"] == "application/json"
        assert response["headers"]["X-Request-ID"] == "req-123"
        assert response["headers"]["Access-Control-Allow-Origin"] == "*"
        assert json.loads(response["body"])["location"] == "203.0.113.7"

    def test_extra_headers_override_defaults(self):
        output = HelloOutput(message="hello world, happy Monday!", location="203.0.113.7")

        response = build_response(200, output, "req-123", headers={"Cache-Control": "no-store"})

        assert response["headers"]["Cache-Control"] == "no-store"
