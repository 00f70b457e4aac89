"""Money rounding utilities"""

from decimal import Decimal, ROUND_HALF_UP

CENTS = Decimal("0.01")


def round_half_up(value: float, places: Decimal = CENTS) -> float:
    """Round to 2 decimals, halves away from zero (2.675 -> 2.68, unlike round())"""
    return float(Decimal(repr(value)).quantize(places, rounding=ROUND_HALF_UP))
