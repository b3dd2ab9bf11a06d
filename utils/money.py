# utils/money.py
from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal

CURRENCY_SYMBOL = "₹"


def round_half_up(x: float) -> int:
    """Round to the nearest whole rupee, halves away from zero (not banker's rounding)."""
    return int(Decimal(str(x)).quantize(Decimal("1"), rounding=ROUND_HALF_UP))


def group_indian(amount: float) -> str:
    """
    Digit grouping used on Indian price tags: last three digits, then pairs.
    5499 -> '5,499', 123456 -> '1,23,456', 12345678 -> '1,23,45,678'
    """
    value = round_half_up(amount)
    sign = "-" if value < 0 else ""
    digits = str(abs(value))
    if len(digits) <= 3:
        return sign + digits

    head, tail = digits[:-3], digits[-3:]
    pairs = []
    while len(head) > 2:
        pairs.insert(0, head[-2:])
        head = head[:-2]
    if head:
        pairs.insert(0, head)
    return sign + ",".join(pairs + [tail])


def format_inr(amount: float) -> str:
    return f"{CURRENCY_SYMBOL}{group_indian(amount)}"
