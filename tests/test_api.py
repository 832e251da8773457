import logging

import pytest
from fastapi.testclient import TestClient

from currency_converter.core.config import Settings
from currency_converter.main import create_app


def test_root(client):
    body = client.get("/").json()
    assert body["base_currency"] == "USD"
    assert body["version"] == "0.1.0"


def test_request_id_header_is_echoed(client):
    resp = client.get("/", headers={"X-Request-ID": "abc-123"})
    assert resp.headers["x-request-id"] == "abc-123"


def test_list_currencies_joins_metadata(client):
    body = client.get("/currencies").json()
    assert body["base_currency"] == "USD"
    assert [c["code"] for c in body["currencies"]] == ["EUR", "INR", "USD"]
    inr = body["currencies"][1]
    assert inr == {
        "code": "INR",
        "name": "Indian Rupee",
        "symbol": "₹",
        "rate_vs_base": 83.10,
    }


def test_register_currency(client):
    resp = client.post(
        "/currencies", json={"code": "chf", "name": "Swiss Franc", "symbol": "Fr", "rate": 0.88}
    )
    assert resp.status_code == 201
    assert resp.json() == {
        "code": "CHF",
        "name": "Swiss Franc",
        "symbol": "Fr",
        "rate_vs_base": 0.88,
    }
    assert client.get("/rates/USD/CHF").json()["rate"] == 0.88
    codes = [c["code"] for c in client.get("/currencies").json()["currencies"]]
    assert "CHF" in codes


def test_register_currency_rejects_non_positive_rate(client):
    resp = client.post("/currencies", json={"code": "CHF", "name": "Swiss Franc", "rate": 0})
    assert resp.status_code == 422
    assert resp.json()["error"] == "validation_error"


def test_register_base_currency_with_other_rate_rejected(client):
    resp = client.post("/currencies", json={"code": "USD", "name": "US Dollar", "rate": 2})
    assert resp.status_code == 400
    assert resp.json()["error"] == "invalid_rate"
    assert client.get("/rates/EUR/USD").json()["rate"] == 1.0 / 0.92


def test_get_rate_normalizes_codes(client):
    body = client.get("/rates/usd/inr").json()
    assert body == {"from_code": "USD", "to_code": "INR", "rate": 83.10, "overridden": False}


def test_get_rate_unknown_code(client):
    resp = client.get("/rates/ZZZ/USD")
    assert resp.status_code == 404
    assert resp.json()["error"] == "unsupported_currency"
    assert "ZZZ" in resp.json()["detail"]


def test_convert(client):
    resp = client.get("/convert", params={"from": "usd", "to": "inr", "amount": 10})
    assert resp.status_code == 200
    body = resp.json()
    assert body["converted_amount"] == 831.0
    assert body["display_amount"] == 831.0
    assert body["rate"] == 83.10


def test_convert_display_amount_is_rounded(client):
    body = client.get("/convert", params={"from": "EUR", "to": "USD", "amount": 1}).json()
    assert body["converted_amount"] == 1.0 / 0.92
    assert body["display_amount"] == 1.09


def test_convert_negative_amount(client):
    resp = client.get("/convert", params={"from": "USD", "to": "INR", "amount": -5})
    assert resp.status_code == 400
    assert resp.json()["error"] == "invalid_amount"


def test_convert_missing_param(client):
    resp = client.get("/convert", params={"from": "USD", "amount": 5})
    assert resp.status_code == 422


def test_override_flow(client):
    resp = client.post(
        "/rates/overrides", json={"from_code": "usd", "to_code": "inr", "rate": 90}
    )
    assert resp.status_code == 200
    assert resp.json() == {"from_code": "USD", "to_code": "INR", "rate": 90.0}

    assert client.get("/rates/USD/INR").json()["overridden"] is True
    forward = client.get("/convert", params={"from": "USD", "to": "INR", "amount": 10})
    assert forward.json()["converted_amount"] == 900.0
    reverse = client.get("/convert", params={"from": "INR", "to": "USD", "amount": 10})
    assert reverse.json()["converted_amount"] == pytest.approx(10 / 83.10)

    listed = client.get("/rates/overrides").json()
    assert listed == [{"from_code": "USD", "to_code": "INR", "rate": 90.0}]


@pytest.mark.parametrize("rate", [0, -1])
def test_override_non_positive_rate(client, rate):
    client.post("/rates/overrides", json={"from_code": "USD", "to_code": "INR", "rate": 90})
    resp = client.post(
        "/rates/overrides", json={"from_code": "USD", "to_code": "INR", "rate": rate}
    )
    assert resp.status_code == 400
    assert resp.json()["error"] == "invalid_rate"
    assert client.get("/rates/USD/INR").json()["rate"] == 90.0


def test_identity_override_not_applied(client):
    client.post("/rates/overrides", json={"from_code": "EUR", "to_code": "EUR", "rate": 3})
    body = client.get("/rates/EUR/EUR").json()
    assert body["rate"] == 1.0
    assert body["overridden"] is False


def test_overrides_disabled():
    settings = Settings(base_rates={"USD": 1.0, "EUR": 0.92}, enable_rate_override=False)
    client = TestClient(create_app(settings_override=settings))
    resp = client.post(
        "/rates/overrides", json={"from_code": "USD", "to_code": "EUR", "rate": 1}
    )
    assert resp.status_code == 403
    assert resp.json() == {"error": "http_error", "detail": "rate override feature disabled"}
    assert client.get("/rates/overrides").status_code == 403
    # Lookups still work.
    assert client.get("/rates/USD/EUR").json()["rate"] == 0.92


def test_apps_do_not_share_tables(settings):
    first = TestClient(create_app(settings_override=settings))
    second = TestClient(create_app(settings_override=Settings(base_rates={"USD": 1.0, "INR": 83.10})))
    first.post("/rates/overrides", json={"from_code": "USD", "to_code": "INR", "rate": 90})
    assert first.get("/rates/USD/INR").json()["rate"] == 90.0
    assert second.get("/rates/USD/INR").json()["rate"] == 83.10


def test_unknown_route(client):
    resp = client.get("/nope")
    assert resp.status_code == 404
    assert resp.json()["error"] == "not_found"


def test_rate_table_logs_overrides(client, caplog):
    with caplog.at_level(logging.INFO, logger="currency_converter.rates"):
        client.post("/rates/overrides", json={"from_code": "USD", "to_code": "EUR", "rate": 0.9})
    assert any("override set USD->EUR" in r.getMessage() for r in caplog.records)


@pytest.mark.parametrize("raw_rate", ["NaN", "Infinity", "-Infinity"])
def test_override_non_finite_rate(client, raw_rate):
    resp = client.post(
        "/rates/overrides",
        content='{"from_code": "USD", "to_code": "INR", "rate": %s}' % raw_rate,
        headers={"content-type": "application/json"},
    )
    assert resp.status_code == 400
    assert resp.json()["error"] == "invalid_rate"
    body = client.get("/rates/USD/INR").json()
    assert body == {"from_code": "USD", "to_code": "INR", "rate": 83.10, "overridden": False}
    assert client.get("/rates/overrides").json() == []


@pytest.mark.parametrize("amount", ["nan", "inf", "-inf"])
def test_convert_non_finite_amount(client, amount):
    resp = client.get("/convert", params={"from": "USD", "to": "INR", "amount": amount})
    assert resp.status_code == 400
    assert resp.json()["error"] == "invalid_amount"


def test_convert_large_amount(client):
    resp = client.get("/convert", params={"from": "USD", "to": "USD", "amount": "1e27"})
    assert resp.status_code == 200
    body = resp.json()
    assert body["converted_amount"] == 1e27
    assert body["display_amount"] == 1e27


def test_convert_overflow_is_a_client_error(client):
    resp = client.get("/convert", params={"from": "USD", "to": "INR", "amount": "1e308"})
    assert resp.status_code == 400
    assert resp.json()["error"] == "invalid_amount"
