"""
Token store backed by the platform keyring.
"""

import logging
from typing import Optional

import keyring
from keyring.errors import KeyringError, PasswordDeleteError

from ...core.config import settings
from ...core.interfaces.token_store import TokenStore

logger = logging.getLogger(__name__)


class KeyringTokenStore(TokenStore):
    """Stores the auth token in the OS secure storage under (service, account)"""

    def __init__(self, service: Optional[str] = None, account: Optional[str] = None):
        self.service = service or settings.keyring_service
        self.account = account or settings.keyring_account

    def save(self, token: str) -> None:
        if not token:
            self.delete()
            return
        try:
            keyring.set_password(self.service, self.account, token)
        except KeyringError as e:
            logger.error(f"Failed to save token to keyring ({self.service}/{self.account}): {e}")

    def read(self) -> Optional[str]:
        try:
            token = keyring.get_password(self.service, self.account)
        except KeyringError as e:
            logger.warning(f"Failed to read token from keyring ({self.service}/{self.account}): {e}")
            return None
        return token or None

    def delete(self) -> None:
        try:
            keyring.delete_password(self.service, self.account)
        except PasswordDeleteError:
            # Nothing stored
            pass
        except KeyringError as e:
            logger.error(f"Failed to delete token from keyring ({self.service}/{self.account}): {e}")
