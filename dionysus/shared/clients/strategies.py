"""
Concrete authentication strategies for the Dionysus backend.

Implements Strategy pattern for flexible API integration.
"""

from typing import Dict, Any

from ...core.interfaces.base_api_client import AuthenticationStrategy
from ...core.interfaces.token_store import TokenStore


class TokenAuthStrategy(AuthenticationStrategy):
    """
    Token header authentication backed by a TokenStore.

    The store is read on every call, so a token saved or deleted by another
    operation takes effect on the next request. The header is attached
    whenever a token is present, whether or not the call requires one.
    """

    def __init__(self, token_store: TokenStore, scheme: str = "Token"):
        self.token_store = token_store
        self.scheme = scheme

    def apply_auth(self, request_params: Dict[str, Any]) -> Dict[str, Any]:
        """Apply token authentication if a token is stored"""
        token = self.token_store.read()
        if token:
            headers = request_params.get("headers", {})
            headers["Authorization"] = f"{self.scheme} {token}"
            request_params["headers"] = headers
        return request_params

