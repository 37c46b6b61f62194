"""Quantity parsing utilities."""

import re

from shoplist.domain.errors import InvalidQuantityError, invalid_quantity

_LEADING_INTEGER = re.compile(r"\s*([+-]?\d+)")


def parse_quantity(quantity_str: str) -> int:
    """Parse quantity input into an integer.

    Reads an optional sign followed by the leading run of digits and ignores
    whatever comes after it:
    - "3" -> 3
    - " 12 " -> 12
    - "3.7" -> 3
    - "12abc" -> 12
    - "-2" -> -2

    Args:
        quantity_str: Raw quantity text

    Returns:
        Integer quantity

    Raises:
        InvalidQuantityError: If the text does not start with an integer
    """
    match = _LEADING_INTEGER.match(quantity_str or "")
    if match is None:
        raise InvalidQuantityError(invalid_quantity(quantity_str))
    try:
        return int(match.group(1))
    except ValueError as e:
        # Digit strings past the interpreter's int conversion limit
        raise InvalidQuantityError(invalid_quantity(quantity_str)) from e
