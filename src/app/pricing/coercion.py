"""Defensive value coercion

Form inputs and server payloads carry numbers as numbers, numeric strings,
formatted strings ("₱1,250.00") or nothing at all. Every function here is
total: unparsable input degrades to a default instead of raising.
"""

import re
from datetime import date, datetime
from decimal import Decimal, InvalidOperation
from typing import Any, Optional

ZERO = Decimal("0")
HUNDRED = Decimal("100")
# Integer digits accepted before a value is treated as unparsable
MAX_DIGITS = 15

_NON_NUMERIC = re.compile(r"[^0-9.\-]")
_CURRENCY_CODE = re.compile(r"^[A-Z]{3}$")


def to_decimal(value: Any, default: Decimal = ZERO) -> Decimal:
    """
    Coerce a value to a finite Decimal.

    Strings have every character except digits, '.' and '-' stripped before
    parsing. Booleans, None, NaN, infinities, values with more than
    MAX_DIGITS integer digits and anything unparsable yield the default.
    """
    if isinstance(value, bool) or value is None:
        return default

    if isinstance(value, Decimal):
        candidate = value
    elif isinstance(value, int):
        candidate = Decimal(value)
    elif isinstance(value, float):
        # repr() keeps 0.1 as Decimal("0.1") instead of its binary expansion
        candidate = Decimal(repr(value))
    elif isinstance(value, str):
        try:
            candidate = Decimal(_NON_NUMERIC.sub("", value))
        except InvalidOperation:
            return default
    else:
        return default

    if not candidate.is_finite() or candidate.adjusted() >= MAX_DIGITS:
        return default
    return candidate


def to_int(value: Any, default: int = 0) -> int:
    """Coerce a value to an int, truncating toward zero"""
    candidate = to_decimal(value, default=None)
    if candidate is None:
        return default
    return int(candidate)


def to_quantity(value: Any) -> int:
    """Non-negative integer quantity"""
    quantity = to_int(value)
    return quantity if quantity > 0 else 0


def to_money(value: Any) -> Decimal:
    """Non-negative currency amount"""
    amount = to_decimal(value)
    return amount if amount > ZERO else ZERO


def to_percentage(value: Any) -> Decimal:
    """Percentage clamped to [0, 100]"""
    percentage = to_decimal(value)
    if percentage < ZERO:
        return ZERO
    if percentage > HUNDRED:
        return HUNDRED
    return percentage


def to_currency(value: Any, default: str) -> str:
    """Upper-cased 3-letter currency code, or the default"""
    if not isinstance(value, str):
        return default
    code = value.strip().upper()
    return code if _CURRENCY_CODE.match(code) else default


def to_text(value: Any) -> str:
    if value is None:
        return ""
    return str(value)


def to_date(value: Any) -> Optional[date]:
    """
    Coerce a value to a date.

    Accepts dates, datetimes and strings such as "2024-05-01",
    "2024-05-01T08:00:00Z" or "2024-05-01 08:00:00". Anything else is None.
    """
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if not isinstance(value, str):
        return None

    day = value.strip().split("T")[0].split(" ")[0]
    try:
        return date.fromisoformat(day)
    except ValueError:
        return None
