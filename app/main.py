from fastapi import FastAPI

from Security.security_config import SECURITY_SETTINGS, feature_enabled
from Security.activity_logging import ActivityLoggingMiddleware
from Security.audit_trail import AuditContextMiddleware
from Security.request_id import RequestIdMiddleware

from .error_handlers import register_error_handlers
from .search_routes import register_search_routes


def create_app() -> FastAPI:
    app = FastAPI(title="Search Echo", docs_url=None, redoc_url=None, openapi_url=None)

    register_search_routes(app)
    register_error_handlers(app)

    # Last added runs first: request id must be set before audit/activity read it.
    if SECURITY_SETTINGS["ACTIVITY_LOG_ENABLED"] and feature_enabled("activity-logging", True):
        app.add_middleware(ActivityLoggingMiddleware)
    app.add_middleware(AuditContextMiddleware)
    if feature_enabled("request-id", True):
        app.add_middleware(RequestIdMiddleware)
    return app


app = create_app()
