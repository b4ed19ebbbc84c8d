"""Tests for the user-facing error taxonomy."""

import sys
from pathlib import Path
from unittest.mock import Mock

import pytest
import requests

# Add package root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from humanizex.errors import (
    AUTH_MESSAGE,
    BAD_REQUEST_MESSAGE,
    FALLBACK_MESSAGE,
    NETWORK_MESSAGE,
    RATE_LIMIT_MESSAGE,
    SAFETY_MESSAGE,
    SERVER_MESSAGE,
    UserFacingError,
    classify_error,
    error_status_code,
    to_user_facing_error,
)


class TestClassifyError:
    """Tests for mapping failures to messages."""

    @pytest.mark.parametrize("message,expected", [
        ("API key not valid. Please pass a valid API key.", AUTH_MESSAGE),
        ("401 Unauthorized", AUTH_MESSAGE),
        ("403 Forbidden", AUTH_MESSAGE),
        ("Response blocked: SAFETY", SAFETY_MESSAGE),
        ("Network request failed", NETWORK_MESSAGE),
        ("TypeError: Failed to fetch", NETWORK_MESSAGE),
        ("Resource has been exhausted (e.g. check quota).", RATE_LIMIT_MESSAGE),
        ("429 Too Many Requests", RATE_LIMIT_MESSAGE),
        ("400 Bad Request", BAD_REQUEST_MESSAGE),
        ("500 Internal Server Error", SERVER_MESSAGE),
        ("503 Service Unavailable", SERVER_MESSAGE),
        ("Something else entirely", FALLBACK_MESSAGE),
    ])
    def test_messages(self, message, expected):
        assert classify_error(Exception(message)) == expected

    def test_auth_checked_before_server(self):
        """Checks run in order; the first match wins."""
        assert classify_error(Exception("401 after 500 upstream")) == AUTH_MESSAGE

    def test_connection_error_type(self):
        error = requests.ConnectionError("Max retries exceeded with url: /api/generate")
        assert classify_error(error) == NETWORK_MESSAGE

    def test_http_error_status(self):
        response = Mock(status_code=429)
        error = requests.HTTPError("Too Many Requests", response=response)
        assert classify_error(error) == RATE_LIMIT_MESSAGE

    def test_sdk_code_attribute(self):
        error = Exception("quota")
        error.code = 503
        assert classify_error(error) == SERVER_MESSAGE


class TestErrorStatusCode:
    """Tests for status code extraction."""

    def test_no_status(self):
        assert error_status_code(Exception("x")) is None

    def test_status_code_attribute(self):
        error = Exception("x")
        error.status_code = 500
        assert error_status_code(error) == 500

    def test_non_integer_code_ignored(self):
        error = Exception("x")
        error.code = "RESOURCE_EXHAUSTED"
        assert error_status_code(error) is None


class TestToUserFacingError:
    """Tests for translating failures."""

    def test_wraps_with_classified_message(self):
        error = to_user_facing_error(Exception("429"))
        assert isinstance(error, UserFacingError)
        assert error.message == RATE_LIMIT_MESSAGE
        assert str(error) == RATE_LIMIT_MESSAGE

    def test_user_facing_error_passes_through(self):
        original = UserFacingError("Already explained")
        assert to_user_facing_error(original) is original
