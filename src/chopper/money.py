"""Fixed-point currency helpers.

Prices are stored as NUMERIC(10, 2) and handled as Decimal internally; callers
see floats.
"""

from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal

CENTS = Decimal("0.01")
MAX_PRICE = Decimal("100000000")


def to_cents(value: Decimal | int | float | str) -> Decimal:
    """Quantize to 2 decimal places the way NUMERIC(10, 2) rounds."""
    if not isinstance(value, Decimal):
        value = Decimal(str(value))
    return value.quantize(CENTS, rounding=ROUND_HALF_UP)


def to_float(value: Decimal | int | float | str) -> float:
    return float(to_cents(value))
