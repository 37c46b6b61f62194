"""Currency parsing and formatting utilities."""

from dataclasses import dataclass
from decimal import Decimal, ROUND_HALF_UP, localcontext
import re

CENTS = Decimal("0.01")


@dataclass(frozen=True)
class CurrencyFormat:
    """Display rules for one currency in one locale."""

    symbol: str
    thousands_separator: str
    decimal_separator: str


BRL = CurrencyFormat(symbol="R$", thousands_separator=".", decimal_separator=",")


def parse_currency_input(text: str) -> Decimal:
    """Parse masked currency input into a Decimal.

    Every non-digit character is dropped and the remaining digits are read as
    minor units (cents), so typing "5" then "0" yields 0.50:
    - "R$ 12,34" -> 12.34
    - "1.234,56" -> 1234.56
    - "" -> 0

    Args:
        text: Raw input text, possibly already formatted

    Returns:
        Decimal amount with two decimal places
    """
    digits = re.sub(r"\D", "", text or "")
    if not digits:
        return Decimal("0.00")
    # Built from text so long inputs keep every digit
    return Decimal(f"{digits}E-2")


def format_currency(value: Decimal | int | float, currency: CurrencyFormat = BRL) -> str:
    """Format an amount as a currency string, e.g. "R$ 1.234,56".

    Args:
        value: Amount to format
        currency: Symbol and separators to use (defaults to Brazilian Real)

    Returns:
        Formatted string with symbol, grouping and two decimals
    """
    amount = Decimal(str(value))
    sign = "-" if amount < 0 else ""

    # Enough precision that long amounts are rounded to cents only
    with localcontext() as ctx:
        ctx.prec = max(ctx.prec, amount.adjusted() + 3)
        amount = abs(amount).quantize(CENTS, rounding=ROUND_HALF_UP)

    # Format with "," grouping and "." decimals, then swap in the locale's separators
    grouped = f"{amount:,.2f}"
    integer_part, fraction_part = grouped.split(".")
    integer_part = integer_part.replace(",", currency.thousands_separator)

    return f"{sign}{currency.symbol} {integer_part}{currency.decimal_separator}{fraction_part}"
