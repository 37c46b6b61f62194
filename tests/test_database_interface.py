"""Tests for key-value store implementations."""

import pytest
from pathlib import Path
from sqlalchemy.exc import OperationalError

from shoplist.database.base import KeyValueStore
from shoplist.database.factories import create_sqlite_store
from shoplist.database.memory import InMemoryStore
from shoplist.database.sqlalchemy_db import SQLAlchemyStore
from shoplist.domain.errors import StorageError


class TestSQLAlchemyStore:
    """Tests for the SQLite-backed store."""

    def test_is_key_value_store(self, temp_db):
        assert isinstance(temp_db, KeyValueStore)
        assert isinstance(temp_db, SQLAlchemyStore)

    def test_get_missing_key(self, temp_db):
        """Test a key never written returns None."""
        assert temp_db.get("missing") is None

    def test_set_and_get(self, temp_db):
        temp_db.set("items", "[]")
        assert temp_db.get("items") == "[]"

    def test_set_overwrites(self, temp_db):
        """Test a second write replaces the first."""
        temp_db.set("items", "first")
        temp_db.set("items", "second")
        assert temp_db.get("items") == "second"

    def test_keys_are_independent(self, temp_db):
        temp_db.set("a", "1")
        temp_db.set("b", "2")
        assert temp_db.get("a") == "1"
        assert temp_db.get("b") == "2"

    def test_persists_across_instances(self, temp_db):
        """Test a new store on the same file sees earlier writes."""
        temp_db.set("items", "saved")
        temp_db.disconnect()

        other = create_sqlite_store(database_path=temp_db.database_path)
        try:
            assert other.get("items") == "saved"
        finally:
            other.disconnect()

    def test_default_path_under_home(self, tmp_path, monkeypatch):
        """Test the database defaults to ~/.shoplist/shoplist.db."""
        monkeypatch.setattr(Path, "home", lambda: tmp_path)

        store = create_sqlite_store()
        try:
            store.set("items", "[]")
        finally:
            store.disconnect()
        assert (tmp_path / ".shoplist" / "shoplist.db").exists()

    def test_unusable_home_raises_storage_error(self, tmp_path, monkeypatch):
        """Test a data directory that cannot be created fails with StorageError."""
        home_file = tmp_path / "not-a-directory"
        home_file.write_text("")
        monkeypatch.setattr(Path, "home", lambda: home_file)

        with pytest.raises(StorageError, match="Could not create data directory"):
            create_sqlite_store()

    def test_unopenable_database_raises_storage_error(self, tmp_path):
        """Test a path inside a missing directory fails with StorageError."""
        with pytest.raises(StorageError):
            create_sqlite_store(database_path=str(tmp_path / "missing" / "list.db"))

    def test_write_failure_raises_storage_error(self, temp_db, monkeypatch):
        """Test a failing commit surfaces as StorageError and is rolled back."""
        temp_db.set("items", "kept")
        session = temp_db._get_session()

        def failing_commit():
            raise OperationalError("UPDATE key_values", {}, Exception("disk I/O error"))

        monkeypatch.setattr(session, "commit", failing_commit)
        with pytest.raises(StorageError, match="Could not write 'items'"):
            temp_db.set("items", "lost")

        monkeypatch.undo()
        assert temp_db.get("items") == "kept"


class TestInMemoryStore:
    """Tests for the dict-backed store."""

    def test_is_key_value_store(self, memory_store):
        assert isinstance(memory_store, KeyValueStore)

    def test_get_missing_key(self, memory_store):
        assert memory_store.get("missing") is None

    def test_set_and_get(self, memory_store):
        memory_store.set("items", "[]")
        assert memory_store.get("items") == "[]"

    def test_initial_contents_are_copied(self):
        initial = {"items": "[]"}
        store = InMemoryStore(initial)
        store.set("items", "changed")
        assert initial["items"] == "[]"
