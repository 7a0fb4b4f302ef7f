"""Decimal helpers for won-denominated money math"""

from decimal import Decimal, ROUND_HALF_UP
from typing import Union

# Smallest unit every monetary output is rounded to (1 won)
WON = Decimal("1")

MONTHS_PER_YEAR = 12

Number = Union[Decimal, int, float, str]


def to_decimal(value: Number) -> Decimal:
    """Convert to Decimal without inheriting binary float noise (0.1 -> Decimal("0.1"))"""
    if isinstance(value, Decimal):
        return value
    if isinstance(value, float):
        return Decimal(repr(value))
    return Decimal(value)


def round_won(amount: Decimal) -> Decimal:
    """Round half-up to the whole won"""
    return amount.quantize(WON, rounding=ROUND_HALF_UP)


def monthly_rate(annual_rate_percent: Number) -> Decimal:
    """4.8 (% per year) -> Decimal("0.004")"""
    return to_decimal(annual_rate_percent) / 100 / MONTHS_PER_YEAR
