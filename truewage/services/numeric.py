"""
Numeric Helpers

Text-to-number coercion, clamping, and display formatting shared by
the provenance tracker, the calculation engine, and the export formatter.
"""

import re
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation, localcontext

ZERO = Decimal("0")

# Anything other than digits, the decimal point and a minus sign is dropped
_NON_NUMERIC = re.compile(r"[^0-9.\-]")

PLACEHOLDER = "—"


def to_number(raw: object) -> Decimal:
    """
    Coerce raw field content into a finite Decimal.

    Strips currency symbols, thousands separators, units and whitespace
    before parsing. Empty, unparseable, NaN and infinite input all
    become 0; malformed text is never an error.

    Examples:
        "$80,000" -> 80000
        "30 min"  -> 30
        "1.2.3"   -> 0
        ""        -> 0
    """
    if raw is None or isinstance(raw, bool):
        return ZERO

    if isinstance(raw, (int, float, Decimal)):
        try:
            value = Decimal(str(raw))
        except InvalidOperation:
            return ZERO
        return value if value.is_finite() else ZERO

    cleaned = _NON_NUMERIC.sub("", str(raw))
    if not cleaned:
        return ZERO

    try:
        value = Decimal(cleaned)
    except InvalidOperation:
        return ZERO

    return value if value.is_finite() else ZERO


def clamp(value: Decimal, minimum: Decimal, maximum: Decimal) -> Decimal:
    """Bound value to the closed interval [minimum, maximum]."""
    return max(minimum, min(maximum, value))


def _round_half_up(value: Decimal, places: int) -> Decimal:
    """Round to `places` decimals; precision grows with the value's magnitude."""
    with localcontext() as ctx:
        ctx.prec = max(ctx.prec, value.adjusted() + places + 2)
        return value.quantize(Decimal(1).scaleb(-places), rounding=ROUND_HALF_UP)


def _is_displayable(value: Decimal | float | None) -> bool:
    if value is None:
        return False
    return Decimal(str(value)).is_finite()


def format_money(value: Decimal | float | None, symbol: str = "$") -> str:
    """Format a currency amount with two decimals and thousands separators."""
    if not _is_displayable(value):
        return f"{symbol}{PLACEHOLDER}"

    amount = _round_half_up(Decimal(str(value)), 2)
    if amount < 0:
        return f"-{symbol}{amount.copy_abs():,.2f}"
    return f"{symbol}{amount:,.2f}"


def format_number(value: Decimal | float | None, digits: int = 1) -> str:
    """
    Format a number with at most `digits` fractional digits.

    Trailing zeros are dropped, so 50.0 renders as "50" and 2541.67
    as "2,541.7".
    """
    if not _is_displayable(value):
        return PLACEHOLDER

    rounded = _round_half_up(Decimal(str(value)), digits)
    text = f"{rounded:,.{digits}f}"
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    if text == "-0":
        text = "0"
    return text


def format_hours(value: Decimal | float | None) -> str:
    """Format an hour count, e.g. "166.7 hrs"."""
    if not _is_displayable(value):
        return PLACEHOLDER
    return f"{format_number(value, 1)} hrs"
