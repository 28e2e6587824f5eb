from __future__ import annotations

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse, PlainTextResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from app.models.chat import ErrorResponse


def error_response(
    status_code: int, error: str, details: str | None = None
) -> JSONResponse:
    payload = ErrorResponse(error=error, details=details)
    return JSONResponse(
        status_code=status_code,
        content=payload.model_dump(exclude_none=True),
    )


async def http_error_handler(request: Request, exc: StarletteHTTPException):
    # The static catch-all owns every GET path, so a 405 here just means
    # nothing serves this method/path pair.
    if exc.status_code in (404, 405):
        return PlainTextResponse("Not Found", status_code=404)
    return error_response(exc.status_code, "Request failed", str(exc.detail))


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(StarletteHTTPException, http_error_handler)
