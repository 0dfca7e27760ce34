# ABOUTME: Auth package for extraction service credentials.
# ABOUTME: Provides ApiKeyManager for secure API key storage using the OS keyring.

from prospect_crm.auth.credentials import ApiKeyManager, resolve_api_key

__all__ = ["ApiKeyManager", "resolve_api_key"]
