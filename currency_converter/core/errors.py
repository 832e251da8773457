from fastapi import Request
from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse
from fastapi.exceptions import RequestValidationError
from starlette import status
from starlette.exceptions import HTTPException as StarletteHTTPException
import logging

from currency_converter.services.rates.errors import (
    ConversionError,
    InvalidAmountError,
    InvalidRateError,
    UnsupportedCurrencyError,
)

logger = logging.getLogger("currency_converter.errors")

# Most specific first; ConversionError catches any future subclass.
_CONVERSION_ERRORS = (
    (UnsupportedCurrencyError, status.HTTP_404_NOT_FOUND, "unsupported_currency"),
    (InvalidRateError, status.HTTP_400_BAD_REQUEST, "invalid_rate"),
    (InvalidAmountError, status.HTTP_400_BAD_REQUEST, "invalid_amount"),
    (ConversionError, status.HTTP_400_BAD_REQUEST, "conversion_error"),
)


def http_error_handler(request: Request, exc: StarletteHTTPException):  # type: ignore
    if exc.status_code == status.HTTP_404_NOT_FOUND:
        error = "not_found"
        detail = (
            f"No route for {request.method} {request.url.path}"
            if exc.detail == "Not Found"
            else exc.detail
        )
    else:
        error = "http_error"
        detail = exc.detail
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": error, "detail": detail},
    )


def validation_error_handler(request: Request, exc: RequestValidationError):  # type: ignore
    return JSONResponse(
        status_code=422,
        content={
            "error": "validation_error",
            "detail": jsonable_encoder(exc.errors()),
        },
    )


def conversion_error_handler(request: Request, exc: ConversionError):  # type: ignore
    status_code, error = status.HTTP_400_BAD_REQUEST, "conversion_error"
    for exc_type, code, name in _CONVERSION_ERRORS:
        if isinstance(exc, exc_type):
            status_code, error = code, name
            break
    logger.info("%s on %s: %s", error, request.url.path, exc)
    return JSONResponse(
        status_code=status_code,
        content={"error": error, "detail": str(exc)},
    )


def server_error_handler(request: Request, exc: Exception):  # type: ignore
    logger.exception("unhandled exception")
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={
            "error": "internal_error",
            "detail": "An unexpected error occurred.",
        },
    )
