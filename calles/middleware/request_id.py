from __future__ import annotations

import time
import uuid
from collections.abc import Callable

import sentry_sdk
import structlog
from fastapi import Request, Response

REQUEST_ID_HEADER = "X-Request-ID"


def _tag_sentry_scope(rid: str, request: Request) -> None:
    try:
        sentry_sdk.set_tag("request_id", rid)
        sentry_sdk.set_tag("path", request.url.path)
    except Exception:
        # Sentry instrumentation must not break request processing
        pass


def _elapsed_ms(start_ns: int) -> float:
    return round((time.perf_counter_ns() - start_ns) / 1_000_000.0, 3)


async def request_id_middleware(request: Request, call_next: Callable) -> Response:
    """Reuse or mint X-Request-ID and emit one ``http_request`` log per request.

    ``request_id``, ``path`` and ``method`` are bound to contextvars for the
    duration of the request, so service logs (selection, search, loading)
    carry them too.
    """
    logger = structlog.get_logger(__name__)
    rid = request.headers.get(REQUEST_ID_HEADER) or str(uuid.uuid4())
    client_ip = (request.client.host if request.client else None) or "-"

    structlog.contextvars.bind_contextvars(
        request_id=rid, path=request.url.path, method=request.method
    )
    _tag_sentry_scope(rid, request)
    start_ns = time.perf_counter_ns()
    try:
        try:
            response = await call_next(request)
        except Exception:
            logger.error(
                "http_request",
                status=500,
                duration_ms=_elapsed_ms(start_ns),
                client_ip=client_ip,
                exc_info=True,
            )
            raise
        logger.info(
            "http_request",
            status=response.status_code,
            duration_ms=_elapsed_ms(start_ns),
            client_ip=client_ip,
        )
        response.headers[REQUEST_ID_HEADER] = rid
        return response
    finally:
        structlog.contextvars.clear_contextvars()
