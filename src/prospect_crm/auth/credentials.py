# ABOUTME: API key manager for securely storing the Gemini API key.
# ABOUTME: Uses the OS keyring and resolves the key from settings first.

import logging

import keyring
from keyring.errors import KeyringError, PasswordDeleteError

from prospect_crm.config import Settings

logger = logging.getLogger(__name__)


class ApiKeyManager:
    """Service for managing the extraction API key in the OS keyring."""

    SERVICE_NAME = "prospect-crm"
    KEY_NAME = "gemini-api-key"
    MIN_KEY_LENGTH = 20

    def validate_key_format(self, api_key: str) -> bool:
        """Validate the format of an API key.

        Performs basic validation: checks for non-empty, reasonable length,
        and no embedded whitespace.

        Args:
            api_key: The key string to validate.

        Returns:
            True if the key format appears valid, False otherwise.
        """
        if not api_key or not api_key.strip():
            return False
        key = api_key.strip()
        return len(key) >= self.MIN_KEY_LENGTH and not any(c.isspace() for c in key)

    def store_api_key(self, api_key: str) -> None:
        """Store the API key in the OS keyring.

        Args:
            api_key: The key to store.
        """
        keyring.set_password(self.SERVICE_NAME, self.KEY_NAME, api_key.strip())

    def get_api_key(self) -> str | None:
        """Retrieve the API key from the OS keyring.

        Returns:
            The stored key if found, None otherwise.
        """
        try:
            return keyring.get_password(self.SERVICE_NAME, self.KEY_NAME)
        except KeyringError:
            logger.warning("OS keyring is unavailable; no stored API key", exc_info=True)
            return None

    def delete_api_key(self) -> bool:
        """Delete the API key from the OS keyring.

        Returns:
            True if a key was deleted, False if none was stored.
        """
        try:
            keyring.delete_password(self.SERVICE_NAME, self.KEY_NAME)
        except PasswordDeleteError:
            return False
        except KeyringError:
            logger.warning("OS keyring is unavailable; nothing deleted", exc_info=True)
            return False
        return True


def resolve_api_key(settings: Settings, manager: ApiKeyManager | None = None) -> str | None:
    """Resolve the API key, preferring settings over the keyring.

    Args:
        settings: Application settings.
        manager: Keyring-backed key manager. A default one is created if omitted.

    Returns:
        The API key, or None if neither source has one.
    """
    if settings.gemini_api_key and settings.gemini_api_key.strip():
        return settings.gemini_api_key.strip()

    manager = manager if manager is not None else ApiKeyManager()
    return manager.get_api_key()
