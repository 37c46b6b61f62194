"""Abstract durable key-value store interface."""

from abc import ABC, abstractmethod
from typing import Optional


class KeyValueStore(ABC):
    """Abstract key-value persistence interface for shoplist.

    Implementations raise ``StorageError`` when the backend fails.
    """

    @abstractmethod
    def connect(self) -> None:
        """Connect to the store."""
        pass

    @abstractmethod
    def disconnect(self) -> None:
        """Disconnect from the store."""
        pass

    @abstractmethod
    def get(self, key: str) -> Optional[str]:
        """Get the text stored under key, or None if absent."""
        pass

    @abstractmethod
    def set(self, key: str, text: str) -> None:
        """Store text under key, overwriting any previous value."""
        pass
