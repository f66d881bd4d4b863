"""
AUDIT TRAIL
===========
Lightweight audit logging helper.
"""

# FLOW:
# - Middleware binds ip/request id/method/path for the current request.
# - Call audit() on search decisions to emit structured audit events.
# WHY:
# - Rejections are silent for the client; the audit log records the reason.
# HOW:
# - Emits key=value log lines to <LOG_DIR>/audit.log.

from __future__ import annotations

import contextvars
import logging
import os
from logging.handlers import RotatingFileHandler

from starlette.middleware.base import BaseHTTPMiddleware

from Security.security_config import SECURITY_SETTINGS, feature_enabled


def _get_logger() -> logging.Logger:
    logger = logging.getLogger("security.audit")
    if logger.handlers:
        return logger

    log_dir = os.getenv("LOG_DIR", SECURITY_SETTINGS["LOG_DIR"])
    os.makedirs(log_dir, exist_ok=True)
    handler = RotatingFileHandler(os.path.join(log_dir, "audit.log"), maxBytes=2_000_000, backupCount=3)
    formatter = logging.Formatter("%(asctime)s %(levelname)s %(message)s")
    handler.setFormatter(formatter)
    logger.setLevel(logging.INFO)
    logger.addHandler(handler)
    return logger


_audit_ctx: contextvars.ContextVar[dict[str, str] | None] = contextvars.ContextVar("audit_ctx", default=None)


def _client_ip(request) -> str:
    xff = (request.headers.get("x-forwarded-for") or "").strip()
    if xff:
        return xff.split(",")[0].strip()
    xrip = (request.headers.get("x-real-ip") or "").strip()
    if xrip:
        return xrip
    if request.client and request.client.host:
        return request.client.host
    return "-"


def set_audit_request_context(request):
    request_id = getattr(request.state, "request_id", "") or request.headers.get("x-request-id", "")
    payload = {
        "ip": _client_ip(request),
        "request_id": str(request_id or "").strip(),
        "path": str(request.url.path or "").strip(),
        "method": str(request.method or "").strip(),
    }
    return _audit_ctx.set(payload)


def clear_audit_request_context(token) -> None:
    _audit_ctx.reset(token)


class AuditContextMiddleware(BaseHTTPMiddleware):
    async def dispatch(self, request, call_next):
        token = set_audit_request_context(request)
        try:
            return await call_next(request)
        finally:
            clear_audit_request_context(token)


def audit(event: str, details: str | None = None) -> None:
    if not SECURITY_SETTINGS["AUDIT_LOG_ENABLED"] or not feature_enabled("audit-trail", True):
        return
    ctx = _audit_ctx.get() or {}
    _get_logger().info(
        "event=%s ip=%s request_id=%s method=%s path=%s details=%s",
        event,
        ctx.get("ip", "-"),
        ctx.get("request_id", ""),
        ctx.get("method", ""),
        ctx.get("path", ""),
        details or "",
    )
