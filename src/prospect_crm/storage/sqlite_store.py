# ABOUTME: SQLite key-value store backing the persistence port.
# ABOUTME: Uses SQLModel for session management and a single key/value table.

import logging
from collections.abc import Generator
from contextlib import contextmanager
from datetime import UTC, datetime
from pathlib import Path

from sqlmodel import Field, Session, SQLModel, create_engine

logger = logging.getLogger(__name__)


class KeyValueEntry(SQLModel, table=True):
    """One stored value, keyed by name."""

    __tablename__ = "key_value_entries"

    key: str = Field(primary_key=True)
    value: str
    updated_at: datetime = Field(default_factory=lambda: datetime.now(UTC))


class SQLiteKeyValueStore:
    """Key-value store persisted in a SQLite database file."""

    DEFAULT_DB_PATH = Path.home() / ".prospect-crm" / "data.db"

    def __init__(self, db_path: Path | None = None) -> None:
        """Initialize the store.

        Args:
            db_path: Path to the SQLite database file. Defaults to ~/.prospect-crm/data.db
        """
        self.db_path = db_path if db_path is not None else self.DEFAULT_DB_PATH
        self._engine = create_engine(f"sqlite:///{self.db_path}", echo=False)

    def init_db(self) -> None:
        """Initialize the database by creating tables and parent directories."""
        self.db_path.parent.mkdir(parents=True, exist_ok=True)
        SQLModel.metadata.create_all(self._engine)

    @contextmanager
    def get_session(self) -> Generator[Session, None, None]:
        """Get a database session as a context manager.

        Yields:
            SQLModel Session for database operations.
        """
        with Session(self._engine) as session:
            yield session

    def read(self, key: str) -> str | None:
        """Read the value stored under a key.

        Args:
            key: Name of the entry.

        Returns:
            The stored value, or None if the key is absent.
        """
        with self.get_session() as session:
            entry = session.get(KeyValueEntry, key)
            return entry.value if entry is not None else None

    def write(self, key: str, value: str) -> None:
        """Store a value under a key, replacing any previous value.

        Args:
            key: Name of the entry.
            value: Serialized value to store.
        """
        with self.get_session() as session:
            entry = session.get(KeyValueEntry, key)
            if entry is None:
                entry = KeyValueEntry(key=key, value=value)
            else:
                entry.value = value
                entry.updated_at = datetime.now(UTC)
            session.add(entry)
            session.commit()
        logger.debug("Stored %d characters under '%s'", len(value), key)
