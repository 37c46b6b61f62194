"""Shared pytest fixtures for shoplist tests."""

import logging
import tempfile
import os
from decimal import Decimal
import pytest
import structlog

from shoplist.database.factories import create_sqlite_store
from shoplist.database.memory import InMemoryStore
from shoplist.domain.entities import Entry
from shoplist.domain.list_store import ListStore


@pytest.fixture(autouse=True)
def reset_logging():
    """Undo logging configuration done by CLI invocations."""
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield
    structlog.reset_defaults()
    root.handlers = handlers
    root.setLevel(level)


@pytest.fixture
def temp_db():
    """Create a temporary SQLite store for testing."""
    # Create a temporary file for the database
    fd, db_path = tempfile.mkstemp(suffix=".db")
    os.close(fd)

    # Create store
    store = create_sqlite_store(database_path=db_path)
    # Store the path for tests that need it
    store.database_path = db_path
    store.connect()

    yield store

    # Cleanup
    store.disconnect()
    if os.path.exists(db_path):
        os.unlink(db_path)


@pytest.fixture
def memory_store():
    """Create an empty in-memory store."""
    return InMemoryStore()


@pytest.fixture
def list_store(temp_db):
    """Create a loaded ListStore backed by a temporary database."""
    store = ListStore(temp_db)
    store.load()
    return store


@pytest.fixture
def sample_entries():
    """Entries in storage order: A(0), B(5), C(0), D(3)."""
    return [
        Entry(id="a", name="Apples", value=Decimal("0"), quantity=2),
        Entry(id="b", name="Bread", value=Decimal("5.00"), quantity=1),
        Entry(id="c", name="Cheese", value=Decimal("0"), quantity=1),
        Entry(id="d", name="Dates", value=Decimal("3.00"), quantity=4),
    ]


@pytest.fixture
def cli_runner():
    """Create a Click CLI test runner."""
    from click.testing import CliRunner

    return CliRunner()
