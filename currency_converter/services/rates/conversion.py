from __future__ import annotations

import math
from dataclasses import dataclass

from .errors import InvalidAmountError
from .table import RateTable

"""Amount conversion on top of a RateTable.

Responsibilities:
    - Reject negative or non-finite amounts before touching the table.
    - Resolve the rate via the injected table (overrides first, then base).
    - Multiply without rounding; display rounding belongs to the caller.
"""


@dataclass(frozen=True)
class ConversionResult:
    original_amount: float
    from_code: str
    to_code: str
    rate: float
    converted_amount: float


class RateConverter:
    def __init__(self, table: RateTable):
        self._table = table

    @property
    def table(self) -> RateTable:
        return self._table

    def convert(self, from_code: str, to_code: str, amount: float) -> float:
        return self.quote(from_code, to_code, amount).converted_amount

    def quote(self, from_code: str, to_code: str, amount: float) -> ConversionResult:
        if not math.isfinite(amount) or amount < 0:
            raise InvalidAmountError(amount)
        rate = self._table.resolve_rate(from_code, to_code)
        converted = amount * rate
        if not math.isfinite(converted):
            raise InvalidAmountError(amount, reason="converted value overflows")
        return ConversionResult(
            original_amount=amount,
            from_code=from_code,
            to_code=to_code,
            rate=rate,
            converted_amount=converted,
        )
