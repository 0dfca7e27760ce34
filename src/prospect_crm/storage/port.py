# ABOUTME: Persistence port consumed by the profile repository.
# ABOUTME: A whole-value key-value contract so the backing store can be swapped in tests.

from typing import Protocol


class PersistencePort(Protocol):
    """Key-value store holding serialized values."""

    def read(self, key: str) -> str | None:
        """Return the value stored under key, or None if absent."""
        ...

    def write(self, key: str, value: str) -> None:
        """Store value under key, replacing any previous value."""
        ...
