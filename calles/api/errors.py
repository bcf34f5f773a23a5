"""JSON error bodies for every failure that reaches the API layer."""

from __future__ import annotations

import structlog
from fastapi import FastAPI, HTTPException, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from calles.core.exceptions import DataLoadError, DomainError, NotFoundError, ValidationError

logger = structlog.get_logger(__name__)

# Most specific first; DomainError catches anything not listed.
_DOMAIN_STATUS: tuple[tuple[type[DomainError], int, str], ...] = (
    (NotFoundError, 404, "Not Found"),
    (ValidationError, 400, "Bad Request"),
    (DataLoadError, 503, "Service Unavailable"),
    (DomainError, 400, "Bad Request"),
)


def _body(status_code: int, detail: object) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"detail": detail})


async def _on_http_error(_: Request, exc: HTTPException) -> JSONResponse:
    return _body(exc.status_code, exc.detail)


async def _on_request_validation(request: Request, exc: RequestValidationError) -> JSONResponse:
    logger.info("request_rejected", path=request.url.path, errors=len(exc.errors()))
    return _body(422, "Unprocessable Entity")


async def _on_domain_error(request: Request, exc: DomainError) -> JSONResponse:
    for exc_type, status_code, default_detail in _DOMAIN_STATUS:
        if isinstance(exc, exc_type):
            break
    if isinstance(exc, DataLoadError):
        logger.warning("dataset_unavailable", path=exc.path, error=str(exc))
    return _body(status_code, str(exc) or default_detail)


async def _on_unhandled(request: Request, exc: Exception) -> JSONResponse:
    # The request-id middleware already logged the traceback.
    return _body(500, "Internal Server Error")


def install(app: FastAPI) -> None:
    app.add_exception_handler(HTTPException, _on_http_error)
    app.add_exception_handler(RequestValidationError, _on_request_validation)
    app.add_exception_handler(DomainError, _on_domain_error)
    app.add_exception_handler(Exception, _on_unhandled)
