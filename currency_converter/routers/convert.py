from __future__ import annotations

from fastapi import APIRouter, Depends, Query

from currency_converter.dependencies import get_converter
from currency_converter.models.rates import ConversionOut
from currency_converter.services.money import display_amount
from currency_converter.services.rates import RateConverter

router = APIRouter(prefix="/convert", tags=["convert"])


@router.get("", response_model=ConversionOut, summary="Convert an amount")
async def convert(
    from_code: str = Query(..., alias="from", description="Source currency code"),
    to_code: str = Query(..., alias="to", description="Target currency code"),
    amount: float = Query(..., description="Non-negative amount in the source currency"),
    converter: RateConverter = Depends(get_converter),
):
    result = converter.quote(from_code.strip().upper(), to_code.strip().upper(), amount)
    return ConversionOut(
        original_amount=result.original_amount,
        from_code=result.from_code,
        to_code=result.to_code,
        rate=result.rate,
        converted_amount=result.converted_amount,
        display_amount=display_amount(result.converted_amount, result.to_code),
    )
