from __future__ import annotations

"""Base-currency rate table with directional overrides.

Every base rate is expressed as "1 unit of base_code = rate units of code".
Any pair of registered codes is resolved through the base currency:

    rate(from -> to) = base_rates[to] / base_rates[from]

Overrides are keyed by the ordered pair (from, to) and win over the derived
value for that direction only. An override may name codes that have no base
rate at all.

Known behavior: identical codes short-circuit to 1.0 before overrides are
consulted, so an override stored for (X, X) is accepted but never returned.

Codes are matched case-sensitively; callers normalize them.
"""
import logging
import math
from threading import RLock
from typing import Dict, List, Mapping, Optional, Tuple

from .errors import InvalidRateError, UnsupportedCurrencyError

logger = logging.getLogger("currency_converter.rates")

OverrideKey = Tuple[str, str]


def check_rate(rate: float) -> float:
    """Return `rate` as a float if it is finite and positive."""
    if not math.isfinite(rate) or rate <= 0:
        raise InvalidRateError(rate)
    return float(rate)


class RateTable:
    def __init__(
        self, base_code: str, base_rates: Optional[Mapping[str, float]] = None
    ):
        self.base_code = base_code
        self._base_rates: Dict[str, float] = {base_code: 1.0}
        self._overrides: Dict[OverrideKey, float] = {}
        # Reads and writes may come from concurrent request handlers.
        self._lock = RLock()
        for code, rate in (base_rates or {}).items():
            if code == base_code:
                continue
            self.register_base_rate(code, rate)

    def __repr__(self) -> str:
        return (
            f"RateTable(base={self.base_code}, codes={len(self._base_rates)}, "
            f"overrides={len(self._overrides)})"
        )

    def __contains__(self, code: object) -> bool:
        with self._lock:
            return code in self._base_rates

    # Registration ---------------------------------------------
    def register_base_rate(self, code: str, rate: float) -> None:
        """Insert or overwrite the rate of `code` versus the base currency."""
        rate = check_rate(rate)
        if code == self.base_code and rate != 1.0:
            raise InvalidRateError(
                rate, reason=f"base currency {self.base_code} is fixed at 1.0"
            )
        with self._lock:
            self._base_rates[code] = rate
        logger.info(
            "registered base rate %s=%s vs %s",
            code,
            rate,
            self.base_code,
            extra={"code": code, "rate": rate},
        )

    def set_override_rate(self, from_code: str, to_code: str, rate: float) -> None:
        """Pin the from->to multiplier, shadowing the derived base rate.

        The reverse direction is left untouched.
        """
        rate = check_rate(rate)
        with self._lock:
            self._overrides[(from_code, to_code)] = rate
        logger.info(
            "override set %s->%s=%s",
            from_code,
            to_code,
            rate,
            extra={"from_code": from_code, "to_code": to_code, "rate": rate},
        )

    # Lookup ---------------------------------------------------
    def resolve_rate(self, from_code: str, to_code: str) -> float:
        """Return how many units of `to_code` one unit of `from_code` buys."""
        return self.resolve_with_source(from_code, to_code)[0]

    def resolve_with_source(self, from_code: str, to_code: str) -> Tuple[float, bool]:
        """Resolve a pair and report whether an override supplied the rate.

        Both values come from a single locked read.
        """
        if from_code == to_code:
            return 1.0, False
        with self._lock:
            override = self._overrides.get((from_code, to_code))
            if override is not None:
                logger.debug("override hit %s->%s", from_code, to_code)
                return override, True
            rate_from = self._base_rates.get(from_code)
            rate_to = self._base_rates.get(to_code)
        if rate_from is None:
            raise UnsupportedCurrencyError(from_code)
        if rate_to is None:
            raise UnsupportedCurrencyError(to_code)
        return rate_to / rate_from, False

    def base_rate(self, code: str) -> float:
        with self._lock:
            rate = self._base_rates.get(code)
        if rate is None:
            raise UnsupportedCurrencyError(code)
        return rate

    def list_supported_codes(self) -> List[str]:
        with self._lock:
            return sorted(self._base_rates)

    def list_overrides(self) -> Dict[OverrideKey, float]:
        with self._lock:
            return dict(self._overrides)
