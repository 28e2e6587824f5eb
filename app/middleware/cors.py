from __future__ import annotations

from typing import Callable

from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware

ALLOW_METHODS = "GET, POST, OPTIONS"
ALLOW_HEADERS = "Content-Type"


class CORSHeadersMiddleware(BaseHTTPMiddleware):
    """Echo the caller's origin, or pin it to ``allow_origin`` when deployed.

    OPTIONS on any path is answered with 204 and never reaches the router.
    """

    def __init__(self, app, allow_origin: str | None = None):
        super().__init__(app)
        self.allow_origin = allow_origin

    def _headers_for(self, request: Request) -> dict[str, str]:
        origin = self.allow_origin or request.headers.get("origin") or "*"
        return {
            "Access-Control-Allow-Origin": origin,
            "Access-Control-Allow-Methods": ALLOW_METHODS,
            "Access-Control-Allow-Headers": ALLOW_HEADERS,
        }

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        if request.method == "OPTIONS":
            response = Response(status_code=204)
        else:
            response = await call_next(request)

        response.headers.update(self._headers_for(request))
        return response
