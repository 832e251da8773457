"""Shared FastAPI dependencies.

The rate table, converter and registry are owned by the application instance
(built in `create_app`) and handed to routes from `app.state`, so each app,
including every test app, works on its own table.
"""

from __future__ import annotations

from fastapi import HTTPException, Request, status

from .core.config import Settings
from .services.rates import RateConverter, RateTable
from .services.registry import CurrencyRegistry


def get_app_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_rate_table(request: Request) -> RateTable:
    return request.app.state.rate_table


def get_converter(request: Request) -> RateConverter:
    return request.app.state.converter


def get_registry(request: Request) -> CurrencyRegistry:
    return request.app.state.registry


def require_override_enabled(request: Request) -> bool:
    settings = get_app_settings(request)
    if not settings.enable_rate_override:
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="rate override feature disabled",
        )
    return True
