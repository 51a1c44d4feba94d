"""
Authentication-related exception classes.

Handles missing and rejected token scenarios.
"""

from typing import Optional

from .api_exceptions import APIStatusError, DionysusAPIError


class AuthenticationError(DionysusAPIError):
    """Base authentication error"""

    def __init__(self, message: str = "Authentication failed", auth_type: str = "token"):
        super().__init__(message, status_code=401)
        self.auth_type = auth_type


class TokenMissingError(AuthenticationError):
    """Call requires a token but the token store holds none"""

    def __init__(self, message: str = "No authentication token stored"):
        super().__init__(message)
        # Raised before any request is sent
        self.status_code = None


class TokenRejectedError(APIStatusError):
    """Backend answered 401 for the stored token"""

    def __init__(
        self,
        message: str = "Authentication token rejected",
        expected_status: Optional[int] = None,
        response_content: Optional[str] = None
    ):
        super().__init__(
            message,
            status_code=401,
            expected_status=expected_status,
            response_content=response_content
        )
