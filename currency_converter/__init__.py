"""Currency conversion through a base-currency rate table with overrides."""

from .services.rates import (
    ConversionError,
    ConversionResult,
    InvalidAmountError,
    InvalidRateError,
    RateConverter,
    RateTable,
    UnsupportedCurrencyError,
)
from .services.registry import CurrencyRegistry

__version__ = "0.1.0"

__all__ = [
    "ConversionError",
    "ConversionResult",
    "CurrencyRegistry",
    "InvalidAmountError",
    "InvalidRateError",
    "RateConverter",
    "RateTable",
    "UnsupportedCurrencyError",
]
