"""
Security Headers

Response hardening headers added to every response.
"""

from __future__ import annotations

from starlette.middleware.base import BaseHTTPMiddleware

from core.config.runtime import SecurityConfig


DOCS_PATHS = ("/docs", "/redoc")


class SecurityHeadersMiddleware(BaseHTTPMiddleware):
    """Set hardening headers on responses that do not already carry them."""

    def __init__(self, app, config: SecurityConfig | None = None):
        super().__init__(app)
        self.config = config or SecurityConfig()

    async def dispatch(self, request, call_next):
        response = await call_next(request)
        headers = response.headers
        headers.setdefault("X-Content-Type-Options", "nosniff")
        headers.setdefault("X-Frame-Options", "DENY")
        headers.setdefault("Referrer-Policy", "no-referrer")
        headers.setdefault("Permissions-Policy", "geolocation=(), microphone=(), camera=()")
        # Interactive docs load their assets from a CDN
        if request.url.path not in DOCS_PATHS:
            headers.setdefault("Content-Security-Policy", self.config.content_security_policy)
        # HSTS is ignored by browsers over plain http
        if request.url.scheme == "https":
            headers.setdefault(
                "Strict-Transport-Security",
                f"max-age={self.config.hsts_max_age}; includeSubDomains",
            )
        return response
