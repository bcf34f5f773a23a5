from __future__ import annotations

from collections.abc import Callable

from fastapi import Request, Response

# The map page asks for the visitor's position, so geolocation stays allowed
# for the same origin.
SECURITY_HEADERS: dict[str, str] = {
    "X-Content-Type-Options": "nosniff",
    "X-Frame-Options": "DENY",
    "Referrer-Policy": "strict-origin-when-cross-origin",
    "Permissions-Policy": "geolocation=(self)",
}

# Selection responses depend on client-sent state and must not be cached.
_NO_STORE_PREFIXES = ("/session/",)


async def security_headers_middleware(request: Request, call_next: Callable) -> Response:
    response = await call_next(request)
    for name, value in SECURITY_HEADERS.items():
        response.headers.setdefault(name, value)
    if request.url.path.startswith(_NO_STORE_PREFIXES):
        response.headers.setdefault("Cache-Control", "no-store")
    return response
