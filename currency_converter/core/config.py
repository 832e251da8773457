import math
from functools import lru_cache
from typing import Dict

from pydantic_settings import BaseSettings, SettingsConfigDict

from currency_converter.models.constants import (
    DEFAULT_BASE_CURRENCY,
    DEFAULT_BASE_RATES,
)


class Settings(BaseSettings):
    """Application settings loaded from environment with defaults.

    Environment variable mapping follows pydantic's rules (e.g., APP_NAME, DEBUG,
    BASE_CURRENCY, BASE_RATES as a JSON object, ENABLE_RATE_OVERRIDE).
    """

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False)

    # Basic app metadata
    app_name: str = "Currency Converter"
    debug: bool = False
    version: str = "0.1.0"

    # Rate table seed; "1 base_currency = rate units of code"
    base_currency: str = DEFAULT_BASE_CURRENCY
    base_rates: Dict[str, float] = dict(DEFAULT_BASE_RATES)

    # Logging
    log_level: str = "INFO"
    log_json: bool = True

    # Feature toggles
    enable_rate_override: bool = True

    def init_post_load(self) -> None:
        """Normalize codes and validate the seed table."""
        self.base_currency = self.base_currency.strip().upper()
        rates: Dict[str, float] = {}
        for code, rate in self.base_rates.items():
            if not math.isfinite(rate) or rate <= 0:
                raise ValueError(
                    f"Seed rate for '{code}' must be finite and positive, got {rate}"
                )
            rates[code.strip().upper()] = rate
        # Seed rates are relative to the base, so the base itself must read 1.0.
        if rates.get(self.base_currency) != 1.0:
            raise ValueError(
                f"Seed rates must list base currency '{self.base_currency}' at 1.0, "
                f"got {rates.get(self.base_currency)}"
            )
        self.base_rates = rates


@lru_cache
def get_settings() -> Settings:
    settings = Settings()
    settings.init_post_load()
    return settings
