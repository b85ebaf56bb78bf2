"""
HTTP middlewares for the FastAPI application: CORS, security headers,
JSON-only request bodies and per-request ids.
"""

import uuid

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.middleware.base import BaseHTTPMiddleware

from lunch_shared.config.logging import request_id_var
from lunch_shared.config.settings import settings

REQUEST_ID_HEADER = "X-Request-ID"

# Local web clients allowed when ALLOWED_ORIGINS is unset
DEV_ORIGINS = ("http://localhost:3000", "http://localhost:5173")

CSP = "; ".join((
    "default-src 'self'",
    "img-src 'self' data: https:",
    "frame-ancestors 'none'",
    "base-uri 'self'",
    "form-action 'self'",
))

SECURITY_HEADERS = {
    "X-Content-Type-Options": "nosniff",
    "X-Frame-Options": "DENY",
    "Referrer-Policy": "strict-origin-when-cross-origin",
    "Content-Security-Policy": CSP,
}
HSTS = "max-age=31536000; includeSubDomains"

# Request bodies must be JSON; health checks are exempt
BODY_METHODS = frozenset({"POST", "PUT", "PATCH"})
JSON_EXEMPT_PREFIXES = ("/api/health",)


class SecurityHeadersMiddleware(BaseHTTPMiddleware):
    """Stamp SECURITY_HEADERS on every response, plus HSTS in production."""

    async def dispatch(self, request: Request, call_next):
        response = await call_next(request)
        response.headers.update(SECURITY_HEADERS)
        if settings.environment == "production":
            response.headers["Strict-Transport-Security"] = HSTS
        return response


class ContentTypeValidationMiddleware(BaseHTTPMiddleware):
    """Answer 415 when a request declares a non-JSON body."""

    async def dispatch(self, request: Request, call_next):
        content_type = request.headers.get("content-type", "")
        if (
            request.method in BODY_METHODS
            and content_type
            and not content_type.startswith("application/json")
            and not request.url.path.startswith(JSON_EXEMPT_PREFIXES)
        ):
            return JSONResponse(
                status_code=415,
                content={"detail": "Unsupported Media Type. Use application/json"},
            )
        return await call_next(request)


class RequestIdMiddleware(BaseHTTPMiddleware):
    """
    Tag each request with an id for log correlation.

    A client-supplied X-Request-ID is kept, otherwise a UUID4 is minted.
    The id is echoed on the response and visible to loggers while the
    request is served.
    """

    async def dispatch(self, request: Request, call_next):
        request_id = request.headers.get(REQUEST_ID_HEADER) or str(uuid.uuid4())
        token = request_id_var.set(request_id)
        try:
            response = await call_next(request)
        finally:
            request_id_var.reset(token)
        response.headers[REQUEST_ID_HEADER] = request_id
        return response


def cors_origins() -> list[str]:
    """ALLOWED_ORIGINS (comma-separated) when set, else the local dev clients."""
    configured = [origin.strip() for origin in settings.allowed_origins.split(",")]
    return [origin for origin in configured if origin] or list(DEV_ORIGINS)


def register_middlewares(app: FastAPI) -> None:
    """
    Register all middlewares on the FastAPI application.

    Starlette runs them in reverse order of registration, so the request id
    is set before anything else logs and CORS answers preflights first.
    """
    app.add_middleware(SecurityHeadersMiddleware)
    app.add_middleware(ContentTypeValidationMiddleware)
    app.add_middleware(RequestIdMiddleware)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=cors_origins(),
        allow_credentials=True,
        allow_methods=["GET", "POST", "PATCH", "DELETE", "OPTIONS"],
        allow_headers=["Authorization", "Content-Type", "Accept", REQUEST_ID_HEADER],
        expose_headers=[REQUEST_ID_HEADER],
        max_age=0 if settings.environment == "development" else 600,
    )
