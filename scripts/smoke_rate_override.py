"""Smoke script for manual rate overrides.

Sequence:
 1. Resolve baseline USD->INR and INR->USD through the base table.
 2. Override USD->INR only.
 3. Resolve both directions again (only USD->INR changes).
 4. Try a non-positive override (rejected, previous override kept).
 5. Repeat the same sequence over HTTP with a fresh app.
"""

from pprint import pprint

from fastapi.testclient import TestClient

from currency_converter.core.config import Settings
from currency_converter.main import create_app
from currency_converter.models.constants import DEFAULT_BASE_RATES
from currency_converter.services.rates import (
    InvalidRateError,
    RateConverter,
    RateTable,
)


def run_core() -> dict:
    table = RateTable("USD", DEFAULT_BASE_RATES)
    converter = RateConverter(table)
    output = {}

    output["baseline_usd_inr"] = converter.convert("USD", "INR", 10)
    output["baseline_inr_usd"] = converter.convert("INR", "USD", 10)

    table.set_override_rate("USD", "INR", 90)
    output["override_usd_inr"] = converter.convert("USD", "INR", 10)
    output["reverse_untouched"] = converter.convert("INR", "USD", 10)

    try:
        table.set_override_rate("USD", "INR", 0)
    except InvalidRateError as e:
        output["zero_override_rejected"] = str(e)
    output["override_kept"] = table.resolve_rate("USD", "INR")
    output["overrides"] = table.list_overrides()
    return output


def run_http() -> dict:
    client = TestClient(create_app(settings_override=Settings()))
    output = {}
    output["baseline"] = client.get("/convert?from=usd&to=inr&amount=10").json()
    output["set_override"] = client.post(
        "/rates/overrides", json={"from_code": "usd", "to_code": "inr", "rate": 90}
    ).json()
    output["after_override"] = client.get("/convert?from=USD&to=INR&amount=10").json()
    bad = client.post(
        "/rates/overrides", json={"from_code": "USD", "to_code": "INR", "rate": -1}
    )
    output["negative_status"] = bad.status_code
    output["negative_body"] = bad.json()
    output["overrides"] = client.get("/rates/overrides").json()
    return output


if __name__ == "__main__":
    pprint(run_core())
    pprint(run_http())
