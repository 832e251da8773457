"""Pydantic models and default data for the currency converter."""

from .constants import (
    DEFAULT_BASE_CURRENCY,
    DEFAULT_BASE_RATES,
    DEFAULT_CURRENCIES,
)  # re-export
from .currency import Currency
from .rates import (
    ConversionOut,
    CurrencyIn,
    CurrencyListOut,
    CurrencyOut,
    OverrideOut,
    OverrideSetPayload,
    RateOut,
)

__all__ = [
    "DEFAULT_BASE_CURRENCY",
    "DEFAULT_BASE_RATES",
    "DEFAULT_CURRENCIES",
    "Currency",
    "ConversionOut",
    "CurrencyIn",
    "CurrencyListOut",
    "CurrencyOut",
    "OverrideOut",
    "OverrideSetPayload",
    "RateOut",
]
