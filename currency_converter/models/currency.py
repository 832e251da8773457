from __future__ import annotations

from typing import Annotated

from pydantic import AfterValidator, BaseModel


def normalize_code(v: str) -> str:
    v = v.strip().upper()
    if not v:
        raise ValueError("currency code cannot be empty")
    return v


CurrencyCode = Annotated[str, AfterValidator(normalize_code)]


class Currency(BaseModel):
    code: CurrencyCode
    name: str
    symbol: str = ""
