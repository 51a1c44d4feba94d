from .keyring_store import KeyringTokenStore
from .memory_store import InMemoryTokenStore

__all__ = ["KeyringTokenStore", "InMemoryTokenStore"]
