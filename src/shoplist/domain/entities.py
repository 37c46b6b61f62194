"""Domain model entities for shoplist.

These are pure data classes representing list entries, independent of how
the collection is serialized or which store holds it.
"""

from dataclasses import dataclass, field
from decimal import Decimal
from uuid import uuid4


def new_entry_id() -> str:
    """Return a fresh synthetic entry identifier."""
    return uuid4().hex


@dataclass(frozen=True)
class Entry:
    """List line item domain entity."""

    id: str = field(default_factory=new_entry_id)
    name: str = ""
    value: Decimal = Decimal("0")
    quantity: int = 0

    @property
    def is_blank(self) -> bool:
        """True while the entry is still waiting for user input."""
        return self.name == "" and self.value == 0 and self.quantity == 0

    @property
    def subtotal(self) -> Decimal:
        """Value multiplied by quantity."""
        return self.value * self.quantity
