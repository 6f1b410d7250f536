"""Decimal helpers shared by the engine and its output edges."""

from decimal import Decimal, InvalidOperation, ROUND_HALF_UP

from maplecalc.engine.errors import MissingInputError, NumericError

TWO_PLACES = Decimal("0.01")
FOUR_PLACES = Decimal("0.0001")
ZERO = Decimal("0")
ONE = Decimal("1")
INFINITY = Decimal("Infinity")


def to_cents(value: Decimal) -> Decimal:
    """Round a money amount to cents (half up)."""
    if not value.is_finite():
        raise NumericError()
    return value.quantize(TWO_PLACES, ROUND_HALF_UP)


def to_dollars(value: Decimal) -> Decimal:
    return value.quantize(ONE, ROUND_HALF_UP)


def to_rate(value: Decimal) -> Decimal:
    return value.quantize(FOUR_PLACES, ROUND_HALF_UP)


def monthly_rate(annual_rate: Decimal) -> Decimal:
    return annual_rate / 12


def percent(value: Decimal) -> Decimal:
    """Percent form field (e.g. 19.99) to a decimal rate (0.1999)."""
    return value / 100


def parse_decimal(raw: str | int | float | Decimal | None, field_name: str = "value") -> Decimal:
    """Parse a raw form value. Blank or non-numeric raises MissingInputError."""
    if raw is None:
        raise MissingInputError(f"{field_name} is required")
    if isinstance(raw, Decimal):
        value = raw
    else:
        text = str(raw).strip().replace(",", "").replace("$", "")
        if not text:
            raise MissingInputError(f"{field_name} is required")
        try:
            value = Decimal(text)
        except InvalidOperation:
            raise MissingInputError(f"{field_name} must be a number")
    if not value.is_finite():
        raise MissingInputError(f"{field_name} must be a number")
    return value


def fmt_money(value: Decimal, cents: bool = False) -> str:
    """Format like the site does: $12,345 or $12,345.67."""
    if cents:
        return f"${to_cents(value):,.2f}"
    return f"${to_dollars(value):,.0f}"


def fmt_months(months: int) -> str:
    years, rem = divmod(months, 12)
    if years == 0:
        return f"{rem} month{'s' if rem != 1 else ''}"
    if rem == 0:
        return f"{years} year{'s' if years != 1 else ''}"
    return f"{years} yr {rem} mo"
