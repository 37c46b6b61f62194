"""In-memory key-value store."""

from typing import Optional

from shoplist.database.base import KeyValueStore


class InMemoryStore(KeyValueStore):
    """Dict-backed store. Contents live only as long as the instance."""

    def __init__(self, initial: Optional[dict[str, str]] = None):
        self._data: dict[str, str] = dict(initial or {})

    def connect(self) -> None:
        pass

    def disconnect(self) -> None:
        pass

    def get(self, key: str) -> Optional[str]:
        return self._data.get(key)

    def set(self, key: str, text: str) -> None:
        self._data[key] = text
