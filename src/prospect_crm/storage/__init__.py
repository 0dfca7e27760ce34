# ABOUTME: Storage package for the key-value persistence substrate.
# ABOUTME: Exports the persistence port protocol and its SQLite implementation.

from prospect_crm.storage.port import PersistencePort
from prospect_crm.storage.sqlite_store import KeyValueEntry, SQLiteKeyValueStore

__all__ = ["KeyValueEntry", "PersistencePort", "SQLiteKeyValueStore"]
