"""Shared fixtures: a small three-currency table and an app built around it."""

import pytest
from fastapi.testclient import TestClient

from currency_converter.core.config import Settings
from currency_converter.main import create_app
from currency_converter.services.rates import RateConverter, RateTable

SMALL_RATES = {"USD": 1.0, "EUR": 0.92, "INR": 83.10}


@pytest.fixture
def table() -> RateTable:
    return RateTable("USD", SMALL_RATES)


@pytest.fixture
def converter(table: RateTable) -> RateConverter:
    return RateConverter(table)


@pytest.fixture
def settings() -> Settings:
    return Settings(base_currency="USD", base_rates=dict(SMALL_RATES))


@pytest.fixture
def client(settings: Settings) -> TestClient:
    return TestClient(create_app(settings_override=settings))
