from __future__ import annotations

"""Display metadata (name, symbol) per currency code.

The registry is independent from the rate table: a code can be described
without having a base rate and vice versa. Routers join the two when listing.
"""
from typing import Dict, Iterable, List, Optional

from currency_converter.models.constants import DEFAULT_CURRENCIES
from currency_converter.models.currency import Currency


class CurrencyRegistry:
    def __init__(self, currencies: Iterable[Currency] = ()):
        self._currencies: Dict[str, Currency] = {}
        for currency in currencies:
            self.register(currency)

    @classmethod
    def with_defaults(cls) -> "CurrencyRegistry":
        return cls(
            Currency(code=code, name=name, symbol=symbol)
            for code, name, symbol in DEFAULT_CURRENCIES
        )

    def __contains__(self, code: object) -> bool:
        return isinstance(code, str) and code.upper() in self._currencies

    def __len__(self) -> int:
        return len(self._currencies)

    def register(self, currency: Currency) -> None:
        self._currencies[currency.code] = currency

    def get(self, code: str) -> Optional[Currency]:
        return self._currencies.get(code.upper())

    def describe(self, code: str) -> Currency:
        """Metadata for `code`, or a bare entry named after the code itself."""
        return self.get(code) or Currency(code=code, name=code.upper(), symbol="")

    def list_currencies(self) -> List[Currency]:
        return [self._currencies[c] for c in sorted(self._currencies)]
