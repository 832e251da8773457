"""Rate resolution engine: table, converter and their errors."""

from .conversion import ConversionResult, RateConverter
from .errors import (
    ConversionError,
    InvalidAmountError,
    InvalidRateError,
    UnsupportedCurrencyError,
)
from .table import RateTable

__all__ = [
    "ConversionError",
    "ConversionResult",
    "InvalidAmountError",
    "InvalidRateError",
    "RateConverter",
    "RateTable",
    "UnsupportedCurrencyError",
]
