"""List store: the in-memory entry collection and its write-through persistence."""

from dataclasses import replace
from decimal import Decimal
from typing import Optional

import structlog

from shoplist.database.base import KeyValueStore
from shoplist.domain.entities import Entry
from shoplist.domain.errors import (
    CorruptDataError,
    NotFoundError,
    StorageError,
    ValidationError,
    display_position_out_of_range,
    entry_not_found,
    unknown_field,
)
from shoplist.domain.serialization import dump_entries, load_entries
from shoplist.utils.currency import parse_currency_input
from shoplist.utils.quantity_parser import parse_quantity
from shoplist.utils.text import capitalize_first

logger = structlog.get_logger(__name__)

DEFAULT_STORAGE_KEY = "lista-compras-itens"

EDITABLE_FIELDS = ("name", "value", "quantity")


class ListStore:
    """Owns the entry collection for one session.

    The collection is loaded once from the key-value store and written back
    in full after every mutation. Entries keep their insertion order in
    storage; ``display_order()`` is a separate read-only projection.
    """

    def __init__(self, store: KeyValueStore, key: str = DEFAULT_STORAGE_KEY):
        """Initialize list store.

        Args:
            store: Durable key-value store
            key: Key the whole collection is stored under
        """
        self.store = store
        self.key = key
        self._entries: list[Entry] = []
        self.is_loaded = False
        self.last_persist_error: Optional[StorageError] = None

    @property
    def entries(self) -> list[Entry]:
        """Entries in storage order."""
        return list(self._entries)

    def load(self) -> list[Entry]:
        """Load the collection from the store.

        Missing, unreadable or corrupt data all yield an empty collection.
        Only the first of several stored blank entries is kept.

        Returns:
            Loaded entries in storage order
        """
        entries: list[Entry] = []
        try:
            text = self.store.get(self.key)
            if text is not None:
                entries = load_entries(text)
        except CorruptDataError as e:
            logger.warning("list_load_corrupt", key=self.key, error=str(e))
        except StorageError as e:
            logger.error("list_load_failed", key=self.key, error=str(e))

        self._entries = self._drop_extra_blank_entries(entries)
        self.is_loaded = True
        logger.debug("list_loaded", key=self.key, count=len(self._entries))
        return self.entries

    def persist(self) -> bool:
        """Write the whole collection back to the store.

        Returns:
            True if the write succeeded. On failure the error is logged and kept
            in ``last_persist_error``; the in-memory collection is unaffected.
        """
        try:
            self.store.set(self.key, dump_entries(self._entries))
        except StorageError as e:
            self.last_persist_error = e
            logger.error("list_persist_failed", key=self.key, error=str(e))
            return False

        self.last_persist_error = None
        logger.debug("list_persisted", key=self.key, count=len(self._entries))
        return True

    @property
    def has_blank_entry(self) -> bool:
        """True if an entry is still waiting for user input."""
        return any(entry.is_blank for entry in self._entries)

    @property
    def can_add_entry(self) -> bool:
        """Whether the "add row" action is enabled."""
        return not self.has_blank_entry

    def add_entry(self) -> Optional[Entry]:
        """Append a blank entry and persist.

        Returns:
            The new entry, or None if a blank entry was already pending
        """
        if self.has_blank_entry:
            logger.debug("entry_add_skipped", reason="blank_entry_pending")
            return None

        entry = Entry()
        self._entries.append(entry)
        logger.debug("entry_added", entry_id=entry.id)
        self.persist()
        return entry

    def get_entry(self, entry_id: str) -> Entry:
        """Get entry by ID.

        Raises:
            NotFoundError: If no entry has this ID
        """
        return self._entries[self._index_of(entry_id)]

    def edit_field(self, entry_id: str, field: str, raw_input: str) -> Entry:
        """Set one field of one entry from raw user input, then persist.

        Args:
            entry_id: ID of the entry to edit
            field: One of "name", "value", "quantity"
            raw_input: Text as typed by the user

        Returns:
            The updated entry

        Raises:
            NotFoundError: If no entry has this ID
            ValidationError: If the field is unknown or the quantity is not a number;
                the entry is left unchanged
        """
        index = self._index_of(entry_id)
        current = self._entries[index]

        if field == "name":
            updated = replace(current, name=capitalize_first(raw_input))
        elif field == "value":
            updated = replace(current, value=parse_currency_input(raw_input))
        elif field == "quantity":
            try:
                quantity = parse_quantity(raw_input)
            except ValidationError:
                logger.info("entry_edit_rejected", entry_id=entry_id, field=field, raw_input=raw_input)
                raise
            updated = replace(current, quantity=quantity)
        else:
            raise ValidationError(unknown_field(field))

        self._entries[index] = updated
        logger.debug("entry_edited", entry_id=entry_id, field=field)
        self.persist()
        return updated

    def edit_field_at(self, display_index: int, field: str, raw_input: str) -> Entry:
        """Edit the entry at a position of the display order.

        Args:
            display_index: 0-based position in ``display_order()``
            field: One of "name", "value", "quantity"
            raw_input: Text as typed by the user

        Returns:
            The updated entry

        Raises:
            NotFoundError: If the position is outside the list
            ValidationError: See ``edit_field``
        """
        ordered = self.display_order()
        if not 0 <= display_index < len(ordered):
            # Messages number rows from 1, as they are shown to the user
            raise NotFoundError(display_position_out_of_range(display_index + 1, len(ordered)))
        return self.edit_field(ordered[display_index].id, field, raw_input)

    def display_order(self) -> list[Entry]:
        """Entries with a value first, then zero-valued ones.

        Relative order within each group is the storage order (sorted() is stable).
        """
        return sorted(self._entries, key=lambda entry: 0 if entry.value > 0 else 1)

    def total(self) -> Decimal:
        """Sum of value times quantity over all entries."""
        return sum((entry.subtotal for entry in self._entries), Decimal("0"))

    def _drop_extra_blank_entries(self, entries: list[Entry]) -> list[Entry]:
        """Keep only the first blank entry of a loaded collection."""
        kept: list[Entry] = []
        seen_blank = False
        for entry in entries:
            if entry.is_blank:
                if seen_blank:
                    continue
                seen_blank = True
            kept.append(entry)
        if len(kept) != len(entries):
            logger.warning("list_load_extra_blanks", key=self.key, dropped=len(entries) - len(kept))
        return kept

    def _index_of(self, entry_id: str) -> int:
        for index, entry in enumerate(self._entries):
            if entry.id == entry_id:
                return index
        raise NotFoundError(entry_not_found(entry_id))
