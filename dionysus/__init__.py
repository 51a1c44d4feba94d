"""
Dionysus backend client.

Authenticated JSON calls against a single backend origin, with the auth
token kept in the platform keyring.
"""

from .core.interfaces import APIResponse, ErrorKind, TokenStore
from .shared.clients import DionysusAPIClient
from .shared.codec import CodecPolicy, DateFormat
from .shared.models import Addition, AdditionResults, Credentials, EmptyPayload, LoginSuccess, Profile
from .shared.stores import InMemoryTokenStore, KeyringTokenStore

__version__ = "1.0.0"

__all__ = [
    "APIResponse",
    "ErrorKind",
    "TokenStore",
    "DionysusAPIClient",
    "CodecPolicy",
    "DateFormat",
    "Addition",
    "AdditionResults",
    "Credentials",
    "EmptyPayload",
    "LoginSuccess",
    "Profile",
    "InMemoryTokenStore",
    "KeyringTokenStore",
]
