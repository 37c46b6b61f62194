"""Store factory functions for creating store instances."""

from pathlib import Path
from typing import Optional

from shoplist.database.sqlalchemy_db import SQLAlchemyStore
from shoplist.domain.errors import StorageError

DEFAULT_DIRECTORY = ".shoplist"
DEFAULT_FILENAME = "shoplist.db"


def default_database_path() -> Path:
    """Return ~/.shoplist/shoplist.db, creating the directory if needed.

    Raises:
        StorageError: If the directory cannot be created
    """
    db_dir = Path.home() / DEFAULT_DIRECTORY
    try:
        db_dir.mkdir(exist_ok=True)
    except OSError as e:
        raise StorageError(f"Could not create data directory {db_dir}: {e}") from e
    return db_dir / DEFAULT_FILENAME


def create_sqlite_store(database_path: Optional[str] = None) -> SQLAlchemyStore:
    """Create a SQLite-backed store instance.

    The SHOPLIST_DB_PATH environment variable is resolved by the CLI's
    ``--db-path`` option; this function only sees the resulting path.

    Args:
        database_path: Path to SQLite database file. If None, defaults to
            ~/.shoplist/shoplist.db

    Returns:
        SQLAlchemyStore instance configured for SQLite

    Raises:
        StorageError: If the database or its directory cannot be opened
    """
    if database_path is None:
        database_path = str(default_database_path())

    return SQLAlchemyStore(f"sqlite:///{database_path}")
