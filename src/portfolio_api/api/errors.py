"""Central mapping from exceptions to the JSON error envelope."""

from __future__ import annotations

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from portfolio_api.errors import FieldError, PortfolioError, ValidationError

logger = logging.getLogger(__name__)

NOT_FOUND_MESSAGE = "Ruta no encontrada"
SERVER_ERROR_MESSAGE = "Error interno del servidor"


def _envelope(status_code: int, message: str, **extra: object) -> JSONResponse:
    content: dict[str, object] = {"success": False, "message": message}
    content.update({key: value for key, value in extra.items() if value is not None})
    return JSONResponse(status_code=status_code, content=content)


def _request_errors(exc: RequestValidationError) -> list[FieldError]:
    errors: list[FieldError] = []
    for error in exc.errors():
        # Drop the leading "body"/"query"/"path" segment.
        location = [str(part) for part in error.get("loc", ())[1:]]
        errors.append({"field": ".".join(location) or "body", "message": error.get("msg", "")})
    return errors


async def handle_portfolio_error(request: Request, exc: PortfolioError) -> JSONResponse:
    if exc.status_code >= status.HTTP_500_INTERNAL_SERVER_ERROR:
        logger.error("%s %s failed: %s", request.method, request.url.path, exc.message)
    errors = exc.errors if isinstance(exc, ValidationError) else None
    return _envelope(exc.status_code, exc.message, errors=errors)


async def handle_request_validation(request: Request, exc: RequestValidationError) -> JSONResponse:
    return _envelope(
        status.HTTP_400_BAD_REQUEST,
        "Datos inválidos",
        errors=_request_errors(exc),
    )


async def handle_http_exception(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    if exc.status_code == status.HTTP_404_NOT_FOUND:
        return _envelope(exc.status_code, NOT_FOUND_MESSAGE)
    return _envelope(exc.status_code, str(exc.detail))


async def handle_unexpected(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    settings = request.app.state.settings
    detail = None if settings.is_production else str(exc)
    return _envelope(status.HTTP_500_INTERNAL_SERVER_ERROR, SERVER_ERROR_MESSAGE, error=detail)


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(PortfolioError, handle_portfolio_error)
    app.add_exception_handler(RequestValidationError, handle_request_validation)
    app.add_exception_handler(StarletteHTTPException, handle_http_exception)
    app.add_exception_handler(Exception, handle_unexpected)
