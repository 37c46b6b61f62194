"""JSON codec for the entry collection.

The whole collection is stored as one JSON array of
``{"id", "name", "value", "quantity"}`` records in storage order. Lists
saved by the earlier web page under the same key use Portuguese field names
(``nome``, ``valor``, ``quantidade``) and no ``id``; those records are read
too and get a fresh identifier on load.
"""

import json
from decimal import Decimal
from typing import Any

from shoplist.domain.entities import Entry, new_entry_id
from shoplist.domain.errors import CorruptDataError

FIELD_NAMES = ("name", "value", "quantity")
LEGACY_FIELD_NAMES = {"name": "nome", "value": "valor", "quantity": "quantidade"}


def _encode_value(value: Decimal) -> str:
    """Render a Decimal as an exact JSON number."""
    if not value.is_finite():
        raise ValueError(f"Cannot store non-finite value {value}")
    # Fixed-point text, so large or long values are written digit for digit.
    # A fraction part keeps it on the Decimal path when read back.
    text = format(value, "f")
    if "." not in text:
        text += ".0"
    return text


def _encode_entry(entry: Entry) -> str:
    return (
        "{"
        f'"id": {json.dumps(entry.id)}, '
        f'"name": {json.dumps(entry.name, ensure_ascii=False)}, '
        f'"value": {_encode_value(entry.value)}, '
        f'"quantity": {entry.quantity}'
        "}"
    )


def record_to_entry(record: Any) -> Entry:
    """Convert a stored record back to an Entry.

    Raises:
        CorruptDataError: If the record is not an object, a field is missing or
            a field has the wrong type
    """
    if not isinstance(record, dict):
        raise CorruptDataError(f"Expected an object, got {type(record).__name__}")

    if all(key in record for key in FIELD_NAMES):
        fields = {key: record[key] for key in FIELD_NAMES}
    elif all(key in record for key in LEGACY_FIELD_NAMES.values()):
        fields = {key: record[legacy] for key, legacy in LEGACY_FIELD_NAMES.items()}
    else:
        raise CorruptDataError(f"Record is missing fields: {sorted(record)}")

    entry_id = record.get("id")
    if entry_id is None:
        entry_id = new_entry_id()
    elif not isinstance(entry_id, str):
        raise CorruptDataError(f"Invalid id {entry_id!r}")

    name = fields["name"]
    if not isinstance(name, str):
        raise CorruptDataError(f"Invalid name {name!r}")

    return Entry(
        id=entry_id,
        name=name,
        value=_read_value(fields["value"]),
        quantity=_read_quantity(fields["quantity"]),
    )


def _read_value(raw: Any) -> Decimal:
    # null is what a NaN amount serializes to
    if raw is None:
        return Decimal("0")
    if isinstance(raw, bool) or not isinstance(raw, (int, Decimal)):
        raise CorruptDataError(f"Invalid value {raw!r}")
    value = Decimal(raw)
    if not value.is_finite():
        raise CorruptDataError(f"Invalid value {raw!r}")
    return value


def _read_quantity(raw: Any) -> int:
    if raw is None:
        return 0
    if isinstance(raw, bool):
        raise CorruptDataError(f"Invalid quantity {raw!r}")
    if isinstance(raw, Decimal):
        if not raw.is_finite() or raw != raw.to_integral_value():
            raise CorruptDataError(f"Invalid quantity {raw!r}")
        return int(raw)
    if not isinstance(raw, int):
        raise CorruptDataError(f"Invalid quantity {raw!r}")
    return raw


def dump_entries(entries: list[Entry]) -> str:
    """Serialize the collection to a JSON string.

    Values are written as exact JSON numbers; nothing passes through float.
    """
    return "[" + ", ".join(_encode_entry(entry) for entry in entries) + "]"


def load_entries(text: str) -> list[Entry]:
    """Deserialize a JSON string into the collection.

    Args:
        text: Stored JSON text

    Returns:
        Entries in storage order

    Raises:
        CorruptDataError: If the text is not a valid serialized collection
    """
    try:
        data = json.loads(text, parse_float=Decimal)
    except (TypeError, ValueError) as e:
        raise CorruptDataError(f"Stored list is not valid JSON: {e}") from e

    if not isinstance(data, list):
        raise CorruptDataError(f"Expected a list, got {type(data).__name__}")

    return [record_to_entry(record) for record in data]
