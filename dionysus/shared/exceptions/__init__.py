"""
Shared exceptions for the Dionysus API client.

Defines custom exception classes for different error scenarios.
"""

from .api_exceptions import *
from .auth_exceptions import *
from .data_exceptions import *

__all__ = [
    # API Exceptions
    'DionysusAPIError',
    'APIClientError',
    'RequestBuildError',
    'APIStatusError',
    'NetworkError',
    'create_status_exception_from_response',
    'create_network_exception_from_httpx_error',

    # Authentication Exceptions
    'AuthenticationError',
    'TokenMissingError',
    'TokenRejectedError',

    # Data Exceptions
    'DataEncodingError',
    'DataParsingError',
]
