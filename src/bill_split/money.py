"""Conversion between human-entered amounts and integer minor units."""

from decimal import (
    ROUND_HALF_UP,
    Decimal,
    DecimalException,
    InvalidOperation,
    localcontext,
)

from .exceptions import InvalidAmount


def to_minor_units(amount: Decimal, decimal_places: int = 2) -> int:
    """
    Convert a Decimal amount to integer minor units.
    Uses ROUND_HALF_UP for anything finer than the minor unit.

    Args:
        amount: Amount in display units (e.g. dinars, dollars)
        decimal_places: Number of minor-unit digits of the currency

    Returns:
        Amount in minor units (integer)
    """
    with localcontext() as ctx:
        # enough digits for the whole integer part, however large
        ctx.prec = max(ctx.prec, amount.adjusted() + decimal_places + 2)
        minor = amount.scaleb(decimal_places)
        return int(minor.quantize(Decimal("1"), rounding=ROUND_HALF_UP))


def parse_amount(text: str, decimal_places: int = 2) -> int:
    """
    Parse a user-entered amount such as "1,234.50" into minor units.

    Thousands separators and surrounding whitespace are ignored.

    Raises:
        InvalidAmount: If the text is empty, not a number, or negative
    """
    cleaned = text.strip().replace(",", "").replace("_", "")
    if not cleaned:
        raise InvalidAmount(text, "Amount is empty")

    try:
        amount = Decimal(cleaned)
    except InvalidOperation as e:
        raise InvalidAmount(text, f"Not a valid amount: {text!r}") from e

    if not amount.is_finite():
        raise InvalidAmount(text, f"Not a valid amount: {text!r}")
    if amount < 0:
        raise InvalidAmount(text, f"Amount cannot be negative: {text!r}")

    try:
        return to_minor_units(amount, decimal_places)
    except DecimalException as e:
        raise InvalidAmount(text, f"Amount out of range: {text!r}") from e


def format_amount(minor_units: int, decimal_places: int = 2) -> str:
    """Format minor units with grouped thousands, e.g. 123450 -> "1,234.50"."""
    sign = "-" if minor_units < 0 else ""
    major, minor = divmod(abs(minor_units), 10**decimal_places)
    if decimal_places == 0:
        return f"{sign}{major:,}"
    return f"{sign}{major:,}.{minor:0{decimal_places}d}"
