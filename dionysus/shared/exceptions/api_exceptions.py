"""
API-related exception classes for the Dionysus backend client.

Provides hierarchical exception structure for request construction,
transport and status errors.
"""

from typing import Optional, Dict, Any
import httpx


class DionysusAPIError(Exception):
    """Base exception for all Dionysus API errors"""

    def __init__(
        self,
        message: str,
        status_code: Optional[int] = None,
        error_code: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None
    ):
        super().__init__(message)
        self.message = message
        self.status_code = status_code
        self.error_code = error_code
        self.details = details or {}

    def __str__(self):
        if self.status_code:
            return f"[{self.status_code}] {self.message}"
        return self.message


class APIClientError(DionysusAPIError):
    """General API client error"""
    pass


class RequestBuildError(APIClientError):
    """Request could not be constructed locally (e.g. unparsable URL)"""

    def __init__(self, message: str, path: Optional[str] = None):
        super().__init__(message, error_code="request_build")
        self.path = path


class APIStatusError(APIClientError):
    """Response carried a status code other than the expected one"""

    def __init__(
        self,
        message: str,
        status_code: int,
        expected_status: Optional[int] = None,
        response_content: Optional[str] = None
    ):
        super().__init__(message, status_code=status_code, error_code="unexpected_status")
        self.expected_status = expected_status
        self.response_content = response_content


class NetworkError(APIClientError):
    """Network connectivity error"""

    def __init__(self, message: str, original_exception: Optional[Exception] = None):
        super().__init__(message, error_code="network")
        self.original_exception = original_exception


def create_status_exception_from_response(
    response: httpx.Response,
    expected_status: int
) -> APIStatusError:
    """
    Create appropriate exception from an httpx Response with an unexpected status.

    Args:
        response: httpx Response object
        expected_status: Status code the call required

    Returns:
        Authentication error for 401, APIStatusError otherwise
    """
    status_code = response.status_code
    content = response.text[:500]  # Limit content for logging

    if status_code == 401:
        from .auth_exceptions import TokenRejectedError
        return TokenRejectedError(
            f"Token rejected: {content}",
            expected_status=expected_status,
            response_content=content
        )
    return APIStatusError(
        f"HTTP {status_code} (expected {expected_status}): {content}",
        status_code=status_code,
        expected_status=expected_status,
        response_content=content
    )


def create_network_exception_from_httpx_error(error: Exception) -> NetworkError:
    """
    Create NetworkError from httpx exceptions.

    Args:
        error: Original httpx exception

    Returns:
        NetworkError with appropriate message
    """
    error_type = type(error).__name__

    if isinstance(error, httpx.ConnectTimeout):
        return NetworkError(f"Connection timed out: {str(error)}", error)
    elif isinstance(error, httpx.ReadTimeout):
        return NetworkError(f"Read timeout: {str(error)}", error)
    elif isinstance(error, httpx.WriteTimeout):
        return NetworkError(f"Write timeout: {str(error)}", error)
    elif isinstance(error, httpx.PoolTimeout):
        return NetworkError(f"Connection pool timeout: {str(error)}", error)
    elif isinstance(error, httpx.TimeoutException):
        return NetworkError(f"Request timed out: {str(error)}", error)
    elif isinstance(error, httpx.ConnectError):
        return NetworkError(f"Connection failed: {str(error)}", error)
    else:
        return NetworkError(f"Network error ({error_type}): {str(error)}", error)
