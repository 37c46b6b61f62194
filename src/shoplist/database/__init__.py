"""Durable storage layer for shoplist application."""

from shoplist.database.base import KeyValueStore
from shoplist.database.factories import create_sqlite_store
from shoplist.database.memory import InMemoryStore

__all__ = ["KeyValueStore", "InMemoryStore", "create_sqlite_store"]
