"""
Parser for buy-in and table-minimum amounts.

Accepts the free-text amounts written in strategy documents:
    "Any"        -> (0, MAX_AMOUNT)
    "$5"         -> (5, 5)
    "$100-$300"  -> (100, 300)

Anything that is not a plain integer parses as 0, so an unrecognized
amount becomes the zero-width range (0, 0). Integers above MAX_AMOUNT
are treated as unrecognized.
"""

import re

from ohcraps.config import MAX_AMOUNT

ANY_AMOUNT = "any"

INTEGER_PATTERN = re.compile(r"\+?[0-9]+")

MAX_AMOUNT_DIGITS = len(str(MAX_AMOUNT))


def bounded_int(digits: str) -> int | None:
    """
    Convert a run of decimal digits to an int no larger than MAX_AMOUNT.

    Returns:
        The value, or None if it would exceed MAX_AMOUNT.
    """
    digits = digits.lstrip("0") or "0"
    if len(digits) > MAX_AMOUNT_DIGITS:
        return None
    value = int(digits)
    return value if value <= MAX_AMOUNT else None


def _parse_int(value: str) -> int:
    value = value.strip()
    if not INTEGER_PATTERN.fullmatch(value):
        return 0
    parsed = bounded_int(value.lstrip("+"))
    return 0 if parsed is None else parsed


def parse_range(text: str) -> tuple[int, int]:
    """
    Parse an amount or amount range into inclusive integer bounds.

    Bounds are returned as written; a reversed range like "$300-$100"
    stays reversed.

    Args:
        text: Amount text (e.g., "$100-$300", "Any", "$5")

    Returns:
        (min, max) tuple. Never raises.
    """
    trimmed = text.strip()
    if trimmed.casefold() == ANY_AMOUNT:
        return 0, MAX_AMOUNT

    cleaned = trimmed.replace("$", "")

    if "-" in cleaned:
        low, _, high = cleaned.partition("-")
        return _parse_int(low), _parse_int(high)

    value = _parse_int(cleaned)
    return value, value
