from __future__ import annotations

from typing import List

from pydantic import BaseModel, Field

from .currency import CurrencyCode


class OverrideSetPayload(BaseModel):
    from_code: CurrencyCode = Field(..., description="Source currency (e.g. USD)")
    to_code: CurrencyCode = Field(..., description="Target currency (e.g. INR)")
    # Positivity is enforced by the rate table so the domain error surfaces.
    rate: float = Field(..., description="Units of to_code per 1 unit of from_code")


class OverrideOut(BaseModel):
    from_code: str
    to_code: str
    rate: float


class RateOut(BaseModel):
    from_code: str
    to_code: str
    rate: float
    overridden: bool = False


class CurrencyIn(BaseModel):
    code: CurrencyCode
    name: str
    symbol: str = ""
    rate: float = Field(..., gt=0, description="Units of this currency per 1 base unit")


class CurrencyOut(BaseModel):
    code: str
    name: str
    symbol: str
    rate_vs_base: float


class CurrencyListOut(BaseModel):
    base_currency: str
    currencies: List[CurrencyOut]


class ConversionOut(BaseModel):
    original_amount: float
    from_code: str
    to_code: str
    rate: float
    converted_amount: float
    display_amount: float
