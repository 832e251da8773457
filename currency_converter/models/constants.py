"""Default currency data used to seed the rate table and registry.

Rates are approximate demo values ("1 USD = x units"), not market data.
"""

from typing import Dict, Tuple

DEFAULT_BASE_CURRENCY: str = "USD"

DEFAULT_BASE_RATES: Dict[str, float] = {
    "USD": 1.0,  # base
    "EUR": 0.92,
    "INR": 83.10,
    "GBP": 0.79,
    "JPY": 141.50,
    "AUD": 1.47,
    "CAD": 1.34,
}

# (code, name, symbol)
DEFAULT_CURRENCIES: Tuple[Tuple[str, str, str], ...] = (
    ("USD", "US Dollar", "$"),
    ("EUR", "Euro", "€"),
    ("INR", "Indian Rupee", "₹"),
    ("GBP", "British Pound", "£"),
    ("JPY", "Japanese Yen", "¥"),
    ("AUD", "Australian Dollar", "$"),
    ("CAD", "Canadian Dollar", "$"),
)

# Decimal places shown for an amount; anything unlisted uses two.
DEFAULT_MINOR_UNITS: int = 2
MINOR_UNITS: Dict[str, int] = {
    "JPY": 0,
}
