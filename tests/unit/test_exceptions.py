"""
Unit tests for exception factories.
"""

import httpx
import pytest

from dionysus.shared.exceptions import (
    APIStatusError,
    AuthenticationError,
    NetworkError,
    TokenMissingError,
    TokenRejectedError,
    create_network_exception_from_httpx_error,
    create_status_exception_from_response,
)


@pytest.mark.unit
class TestStatusExceptions:

    def test_unexpected_status(self):
        """Test unexpected status mapping"""
        error = create_status_exception_from_response(httpx.Response(500, content=b"boom"), 200)

        assert type(error) is APIStatusError
        assert error.status_code == 500
        assert error.expected_status == 200
        assert error.response_content == "boom"
        assert str(error).startswith("[500]")

    def test_unauthorized(self):
        """Test 401 maps to TokenRejectedError"""
        error = create_status_exception_from_response(httpx.Response(401, json={"detail": "Invalid token."}), 204)

        assert isinstance(error, TokenRejectedError)
        assert isinstance(error, APIStatusError)
        assert error.expected_status == 204

    def test_body_truncated(self):
        """Test long bodies are truncated"""
        error = create_status_exception_from_response(httpx.Response(502, content=b"x" * 2000), 200)
        assert len(error.response_content) == 500


@pytest.mark.unit
class TestNetworkExceptions:

    @pytest.mark.parametrize("error,fragment", [
        (httpx.ConnectTimeout("t"), "Connection timed out"),
        (httpx.ReadTimeout("t"), "Read timeout"),
        (httpx.ConnectError("refused"), "Connection failed"),
        (httpx.RemoteProtocolError("garbage"), "Network error (RemoteProtocolError)"),
    ])
    def test_messages(self, error, fragment):
        """Test httpx errors map to NetworkError messages"""
        wrapped = create_network_exception_from_httpx_error(error)

        assert isinstance(wrapped, NetworkError)
        assert fragment in str(wrapped)
        assert wrapped.original_exception is error


@pytest.mark.unit
def test_missing_token_has_no_status():
    """Test TokenMissingError carries no status code"""
    error = TokenMissingError()

    assert isinstance(error, AuthenticationError)
    assert error.status_code is None
