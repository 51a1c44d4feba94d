"""
Core interfaces and abstract base classes for the client.

The generic request template and the token storage contract live here;
concrete implementations live in ``dionysus.shared``.
"""

from .base_api_client import (
    APIResponse,
    AuthenticationStrategy,
    BaseAPIClient,
    ErrorKind,
    RequestMethod,
)
from .token_store import TokenStore

__all__ = [
    "APIResponse",
    "AuthenticationStrategy",
    "BaseAPIClient",
    "ErrorKind",
    "RequestMethod",
    "TokenStore",
]
