"""Display rounding for converted amounts.

The rate engine never rounds. Response models call `display_amount` to get the
human-facing figure, quantized to the target currency's minor units
(ROUND_HALF_UP, so 0.125 USD shows as 0.13).
"""

from __future__ import annotations
import math
from decimal import Context, Decimal, ROUND_HALF_UP

from currency_converter.models.constants import DEFAULT_MINOR_UNITS, MINOR_UNITS


def round_to(value: float, places: int) -> float:
    if not math.isfinite(value):
        return value
    amount = Decimal(str(value))
    # Enough digits for the integer part plus the kept decimals.
    prec = max(28, amount.adjusted() + places + 2)
    ctx = Context(prec=prec, rounding=ROUND_HALF_UP)
    return float(amount.quantize(Decimal(1).scaleb(-places), context=ctx))


def display_amount(value: float, currency: str) -> float:
    return round_to(value, MINOR_UNITS.get(currency, DEFAULT_MINOR_UNITS))
