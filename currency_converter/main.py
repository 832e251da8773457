import logging

from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException

from .core.config import get_settings, Settings
from .core.logging import init_logging, request_context_middleware
from .core import errors
from .routers import convert, currencies, rates
from .services.rates import ConversionError, RateConverter, RateTable
from .services.registry import CurrencyRegistry


def build_rate_table(settings: Settings) -> RateTable:
    return RateTable(settings.base_currency, settings.base_rates)


def create_app(settings_override: Settings | None = None) -> FastAPI:
    """Application factory.

    settings_override: pass an already constructed Settings instance for tests
    to isolate configuration. Falls back to cached get_settings().
    """
    settings = settings_override or get_settings()
    if settings_override is not None:
        settings.init_post_load()
    # Initialize logging early
    init_logging(
        level="DEBUG" if settings.debug else settings.log_level,
        json_format=settings.log_json,
    )

    app = FastAPI(
        title=settings.app_name, debug=settings.debug, version=settings.version
    )

    # One table per app; routes receive it through dependencies.
    table = build_rate_table(settings)
    app.state.settings = settings
    app.state.rate_table = table
    app.state.converter = RateConverter(table)
    app.state.registry = CurrencyRegistry.with_defaults()
    logging.getLogger("currency_converter").info(
        "rate table ready: base=%s codes=%d",
        table.base_code,
        len(table.list_supported_codes()),
    )

    # Middleware (request id / structured logging)
    app.middleware("http")(request_context_middleware)

    # Error handlers
    app.add_exception_handler(StarletteHTTPException, errors.http_error_handler)
    app.add_exception_handler(RequestValidationError, errors.validation_error_handler)
    app.add_exception_handler(ConversionError, errors.conversion_error_handler)
    app.add_exception_handler(Exception, errors.server_error_handler)

    # Routers
    app.include_router(currencies.router)
    app.include_router(rates.router)
    app.include_router(convert.router)

    @app.get("/")
    async def root():
        return {
            "message": f"{settings.app_name} API",
            "version": settings.version,
            "base_currency": table.base_code,
        }

    return app


app = create_app()
