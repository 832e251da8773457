from __future__ import annotations

from typing import List

from fastapi import APIRouter, Depends

from currency_converter.dependencies import get_rate_table, require_override_enabled
from currency_converter.models.rates import OverrideOut, OverrideSetPayload, RateOut
from currency_converter.services.rates import RateTable

"""Rates router: pair lookup and manual overrides.

Endpoints:
    - GET /rates/overrides             -> list overrides
    - POST /rates/overrides            -> set override {from_code, to_code, rate}
    - GET /rates/{from_code}/{to_code} -> effective rate for the pair

Overrides are in-memory only and directional; there is no delete. Override
endpoints are guarded by settings.enable_rate_override.
"""

router = APIRouter(prefix="/rates", tags=["rates"])


def _override_list(table: RateTable) -> List[OverrideOut]:
    return [
        OverrideOut(from_code=f, to_code=t, rate=rate)
        for (f, t), rate in sorted(table.list_overrides().items())
    ]


@router.get(
    "/overrides", response_model=List[OverrideOut], summary="List manual rate overrides"
)
async def list_overrides(
    _: bool = Depends(require_override_enabled),
    table: RateTable = Depends(get_rate_table),
):
    return _override_list(table)


@router.post("/overrides", response_model=OverrideOut, summary="Set a manual rate override")
async def set_override(
    payload: OverrideSetPayload,
    _: bool = Depends(require_override_enabled),
    table: RateTable = Depends(get_rate_table),
):
    table.set_override_rate(payload.from_code, payload.to_code, payload.rate)
    return OverrideOut(
        from_code=payload.from_code,
        to_code=payload.to_code,
        rate=table.list_overrides()[(payload.from_code, payload.to_code)],
    )


@router.get(
    "/{from_code}/{to_code}", response_model=RateOut, summary="Resolve a pair rate"
)
async def get_rate(
    from_code: str,
    to_code: str,
    table: RateTable = Depends(get_rate_table),
):
    from_code, to_code = from_code.strip().upper(), to_code.strip().upper()
    rate, overridden = table.resolve_with_source(from_code, to_code)
    return RateOut(
        from_code=from_code, to_code=to_code, rate=rate, overridden=overridden
    )
