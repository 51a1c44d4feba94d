"""
Unit tests for token stores.

The keyring backend is patched; tests never touch the real OS keyring.
"""

import threading
from unittest.mock import patch

import pytest
from keyring.errors import KeyringError, PasswordDeleteError

from dionysus.shared.stores import InMemoryTokenStore, KeyringTokenStore


@pytest.mark.unit
class TestInMemoryTokenStore:
    """Test the process-local store"""

    def test_starts_empty(self):
        """Test a new store is empty"""
        assert InMemoryTokenStore().read() is None

    def test_save_read_delete(self):
        """Test the save, read and delete cycle"""
        store = InMemoryTokenStore()
        store.save("tok123")
        assert store.read() == "tok123"

        store.delete()
        assert store.read() is None

    def test_save_replaces_previous_token(self):
        """Test saving replaces the token"""
        store = InMemoryTokenStore("old")
        store.save("new")
        assert store.read() == "new"

    def test_empty_token_is_absence(self):
        """Test empty tokens are stored as absence"""
        store = InMemoryTokenStore("tok")
        store.save("")
        assert store.read() is None

    def test_delete_when_empty(self):
        """Test deleting from an empty store"""
        store = InMemoryTokenStore()
        store.delete()
        assert store.read() is None

    def test_concurrent_writers(self):
        """Test concurrent saves"""
        store = InMemoryTokenStore()
        tokens = [f"tok{i}" for i in range(50)]
        threads = [threading.Thread(target=store.save, args=(token,)) for token in tokens]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()

        assert store.read() in tokens


@pytest.mark.unit
class TestKeyringTokenStore:
    """Test the keyring-backed store"""

    def test_default_namespace_from_settings(self):
        """Test default service and account"""
        store = KeyringTokenStore()
        assert store.service == "dionysus"
        assert store.account == "auth-token"

    @patch("dionysus.shared.stores.keyring_store.keyring")
    def test_save_writes_under_namespace(self, mock_keyring):
        """Test save writes to keyring"""
        KeyringTokenStore("svc", "acct").save("tok123")
        mock_keyring.set_password.assert_called_once_with("svc", "acct", "tok123")

    @patch("dionysus.shared.stores.keyring_store.keyring")
    def test_read_returns_stored_token(self, mock_keyring):
        """Test reading a stored token"""
        mock_keyring.get_password.return_value = "tok123"

        assert KeyringTokenStore("svc", "acct").read() == "tok123"
        mock_keyring.get_password.assert_called_once_with("svc", "acct")

    @patch("dionysus.shared.stores.keyring_store.keyring")
    def test_read_missing_and_empty_are_none(self, mock_keyring):
        """Test missing and empty entries"""
        store = KeyringTokenStore()

        mock_keyring.get_password.return_value = None
        assert store.read() is None

        mock_keyring.get_password.return_value = ""
        assert store.read() is None

    @patch("dionysus.shared.stores.keyring_store.keyring")
    def test_read_failure_reports_absence(self, mock_keyring):
        """Test keyring read errors"""
        mock_keyring.get_password.side_effect = KeyringError("locked")

        assert KeyringTokenStore().read() is None

    @patch("dionysus.shared.stores.keyring_store.keyring")
    def test_save_failure_is_not_raised(self, mock_keyring):
        """Test keyring write errors"""
        mock_keyring.set_password.side_effect = KeyringError("no backend")

        KeyringTokenStore().save("tok123")

    @patch("dionysus.shared.stores.keyring_store.keyring")
    def test_save_empty_token_deletes(self, mock_keyring):
        """Test saving an empty token"""
        KeyringTokenStore("svc", "acct").save("")

        mock_keyring.set_password.assert_not_called()
        mock_keyring.delete_password.assert_called_once_with("svc", "acct")

    @patch("dionysus.shared.stores.keyring_store.keyring")
    def test_delete_missing_token_is_noop(self, mock_keyring):
        """Test deleting a missing entry"""
        mock_keyring.delete_password.side_effect = PasswordDeleteError("not found")

        KeyringTokenStore().delete()

    @patch("dionysus.shared.stores.keyring_store.keyring")
    def test_delete_failure_is_not_raised(self, mock_keyring):
        """Test keyring delete errors"""
        mock_keyring.delete_password.side_effect = KeyringError("no backend")

        KeyringTokenStore().delete()
