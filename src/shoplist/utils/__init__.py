"""Utility functions for shoplist."""

from shoplist.utils.currency import format_currency, parse_currency_input
from shoplist.utils.quantity_parser import parse_quantity
from shoplist.utils.text import capitalize_first

__all__ = ["format_currency", "parse_currency_input", "parse_quantity", "capitalize_first"]
