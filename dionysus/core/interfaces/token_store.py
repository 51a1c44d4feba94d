"""
Token store interface.

Abstract contract for persisting the single authentication secret.
"""

from abc import ABC, abstractmethod
from typing import Optional


class TokenStore(ABC):
    """
    Persists one secret string under a fixed namespace.

    Implementations never raise on storage failures: a failed read is
    reported as ``None`` (unauthenticated) and failed writes are logged.
    """

    @abstractmethod
    def save(self, token: str) -> None:
        """Persist the token, replacing any previous value"""
        pass

    @abstractmethod
    def read(self) -> Optional[str]:
        """Return the stored token or None"""
        pass

    @abstractmethod
    def delete(self) -> None:
        """Remove the stored token; a missing token is not an error"""
        pass
