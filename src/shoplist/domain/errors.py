"""Shared domain error messages and error types."""


class DomainError(ValueError):
    """Base class for domain-level errors.

    Subclasses provide semantic categories while preserving ValueError
    compatibility for existing error handling.
    """


class ValidationError(DomainError):
    """Invalid input or failed validation in domain logic."""


class InvalidQuantityError(ValidationError):
    """Quantity input that does not start with an integer."""


class NotFoundError(DomainError):
    """Requested entry or display position does not exist."""


class CorruptDataError(DomainError):
    """Stored collection could not be deserialized."""


class StorageError(RuntimeError):
    """Durable store failed to read or write."""


def entry_not_found(entry_id: str) -> str:
    """Return message for missing entry by ID."""
    return f"Entry {entry_id} not found"


def display_position_out_of_range(position: int, size: int) -> str:
    """Return message for a 1-based display position outside the list."""
    if size == 0:
        return f"No entry at position {position}: the list is empty"
    return f"No entry at position {position}: the list has {size} entr{'y' if size == 1 else 'ies'}"


def unknown_field(field_name: str) -> str:
    """Return message for an edit targeting an unsupported field."""
    return f"Unknown field '{field_name}'. Expected one of: name, value, quantity"


def invalid_quantity(raw_input: str) -> str:
    """Return message for quantity input without a leading integer."""
    shown = raw_input if len(raw_input) <= 20 else raw_input[:20] + "..."
    return f"Invalid quantity '{shown}': expected a whole number"


def blank_entry_pending() -> str:
    """Return message when a blank entry already waits for input."""
    return "A blank entry is already pending. Fill it in before adding another."
