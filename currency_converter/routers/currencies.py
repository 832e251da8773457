from __future__ import annotations

from fastapi import APIRouter, Depends, status

from currency_converter.dependencies import get_rate_table, get_registry
from currency_converter.models.currency import Currency
from currency_converter.models.rates import CurrencyIn, CurrencyListOut, CurrencyOut
from currency_converter.services.rates import RateTable
from currency_converter.services.registry import CurrencyRegistry

router = APIRouter(prefix="/currencies", tags=["currencies"])


def _currency_out(
    code: str, table: RateTable, registry: CurrencyRegistry
) -> CurrencyOut:
    meta = registry.describe(code)
    return CurrencyOut(
        code=code, name=meta.name, symbol=meta.symbol, rate_vs_base=table.base_rate(code)
    )


@router.get("", response_model=CurrencyListOut, summary="List supported currencies")
async def list_currencies(
    table: RateTable = Depends(get_rate_table),
    registry: CurrencyRegistry = Depends(get_registry),
):
    return CurrencyListOut(
        base_currency=table.base_code,
        currencies=[
            _currency_out(code, table, registry)
            for code in table.list_supported_codes()
        ],
    )


@router.post(
    "",
    response_model=CurrencyOut,
    status_code=status.HTTP_201_CREATED,
    summary="Register a currency and its rate versus the base",
)
async def register_currency(
    payload: CurrencyIn,
    table: RateTable = Depends(get_rate_table),
    registry: CurrencyRegistry = Depends(get_registry),
):
    # Rate first: a rejected rate must not leave orphan metadata behind.
    table.register_base_rate(payload.code, payload.rate)
    registry.register(
        Currency(code=payload.code, name=payload.name, symbol=payload.symbol)
    )
    return _currency_out(payload.code, table, registry)
