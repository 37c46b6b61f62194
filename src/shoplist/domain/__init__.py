"""Domain layer for shoplist application.

``ListStore`` lives in ``shoplist.domain.list_store`` and is imported from
there directly; it depends on the storage and utils packages, which import
errors from this package.
"""

from shoplist.domain.entities import Entry
from shoplist.domain.errors import (
    DomainError,
    ValidationError,
    InvalidQuantityError,
    NotFoundError,
    CorruptDataError,
    StorageError,
)

__all__ = [
    "Entry",
    "DomainError",
    "ValidationError",
    "InvalidQuantityError",
    "NotFoundError",
    "CorruptDataError",
    "StorageError",
]
