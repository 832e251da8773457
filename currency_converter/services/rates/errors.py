"""Domain errors raised by the rate table and converter.

All of them derive from ValueError so callers that only care about "bad
input" can catch one type, while the HTTP layer maps each subclass to its
own status code.
"""

from __future__ import annotations


class ConversionError(ValueError):
    """Base class for rate resolution and conversion failures."""


class UnsupportedCurrencyError(ConversionError):
    def __init__(self, code: str):
        self.code = code
        super().__init__(f"Unsupported currency code '{code}'")


class InvalidRateError(ConversionError):
    def __init__(self, rate: float, reason: str = "rate must be positive"):
        self.rate = rate
        super().__init__(f"Invalid rate {rate!r}: {reason}")


class InvalidAmountError(ConversionError):
    def __init__(
        self, amount: float, reason: str = "must be a finite non-negative number"
    ):
        self.amount = amount
        super().__init__(f"Invalid amount {amount!r}: {reason}")
