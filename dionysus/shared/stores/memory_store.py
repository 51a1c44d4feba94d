"""
Process-local token store.
"""

import threading
from typing import Optional

from ...core.interfaces.token_store import TokenStore


class InMemoryTokenStore(TokenStore):
    """Thread-safe store that lives as long as the process"""

    def __init__(self, token: Optional[str] = None):
        self._lock = threading.Lock()
        self._token = token or None

    def save(self, token: str) -> None:
        with self._lock:
            self._token = token or None

    def read(self) -> Optional[str]:
        with self._lock:
            return self._token

    def delete(self) -> None:
        with self._lock:
            self._token = None
