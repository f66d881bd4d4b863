from __future__ import annotations

import logging
from typing import Any

from fastapi import FastAPI, Request
from fastapi.exception_handlers import http_exception_handler, request_validation_exception_handler
from fastapi.exceptions import RequestValidationError
from fastapi.responses import PlainTextResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from .app_context import templates

logger = logging.getLogger("search.errors")


def _is_html_page_request(request: Request) -> bool:
    accept = (request.headers.get("accept") or "").lower()
    return "text/html" in accept


# Status codes this app can produce: (title, reason).
ERROR_TEXT = {
    400: ("Bad request", "The request data was invalid or incomplete."),
    404: ("Page not found", "The URL does not match any existing route."),
    405: ("Method not allowed", "This endpoint exists, but it does not allow this HTTP method."),
    422: ("Invalid request", "The submitted form data is invalid."),
    500: ("Internal server error", "The server hit an unexpected condition while processing your request."),
}
_FALLBACK_TEXT = ("Request failed", "The request could not be completed.")


def error_text(status_code: int) -> tuple[str, str]:
    return ERROR_TEXT.get(status_code, _FALLBACK_TEXT)


def _detail_from_exc(exc: Any, fallback: str) -> str:
    raw = getattr(exc, "detail", None)
    if isinstance(raw, str) and raw.strip():
        return raw
    return fallback


def _detail_from_validation(exc: RequestValidationError) -> str:
    errors = exc.errors() or []
    if not errors:
        return "Request validation failed."
    first = errors[0]
    field = ".".join(str(x) for x in first.get("loc", []) if x not in ("body", "query"))
    msg = first.get("msg") or "Invalid input."
    if field:
        return f"{field}: {msg}"
    return msg


def _render_error_page(request: Request, status_code: int, detail: str):
    title, reason = error_text(status_code)
    return templates.TemplateResponse(
        request=request,
        name="common/error.html",
        context={
            "status_code": status_code,
            "path": request.url.path,
            "detail": detail,
            "error_title": title,
            "error_reason": reason,
        },
        status_code=status_code,
    )


def register_error_handlers(app: FastAPI) -> None:
    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(request: Request, exc: RequestValidationError):
        if _is_html_page_request(request):
            return _render_error_page(request, 422, _detail_from_validation(exc))
        return await request_validation_exception_handler(request, exc)

    @app.exception_handler(StarletteHTTPException)
    async def starlette_http_exception_handler(request: Request, exc: StarletteHTTPException):
        if _is_html_page_request(request):
            status_code = exc.status_code
            detail = _detail_from_exc(exc, error_text(status_code)[1])
            return _render_error_page(request, status_code, detail)
        return await http_exception_handler(request, exc)

    @app.exception_handler(Exception)
    async def unhandled_exception_handler(request: Request, exc: Exception):
        logger.exception("Unhandled error on %s %s", request.method, request.url.path)
        if _is_html_page_request(request):
            return _render_error_page(request, 500, "Unhandled server exception")
        return PlainTextResponse("Internal Server Error", status_code=500)
