"""
Security Headers Middleware for FastAPI

Adds security headers to every JSON API response:
- X-Frame-Options / frame-ancestors: the API is never framed
- X-Content-Type-Options: Prevents MIME type sniffing
- Referrer-Policy: Controls referrer information leakage
- Content-Security-Policy: Nothing but same-origin resources
- Strict-Transport-Security: Enforces HTTPS (production only)
- Cache-Control: Prevents caching of authenticated data
"""

import logging
import os
from typing import Callable, Optional

from fastapi import Request
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.responses import Response

logger = logging.getLogger(__name__)

IS_PRODUCTION = os.getenv("ENVIRONMENT", "development").lower() == "production"

CSP_POLICY = "; ".join(
    [
        "default-src 'none'",
        "frame-ancestors 'none'",
        "base-uri 'none'",
        "form-action 'none'",
    ]
)

PERMISSIONS_POLICY = ", ".join(
    [
        "accelerometer=()",
        "camera=()",
        "geolocation=()",
        "microphone=()",
        "payment=()",
        "usb=()",
        "interest-cohort=()",
    ]
)


def get_security_headers() -> dict:
    headers = {
        "X-Frame-Options": "DENY",
        "X-Content-Type-Options": "nosniff",
        "Referrer-Policy": "strict-origin-when-cross-origin",
        "Content-Security-Policy": CSP_POLICY,
        "Permissions-Policy": PERMISSIONS_POLICY,
        "X-Permitted-Cross-Domain-Policies": "none",
    }
    if IS_PRODUCTION:
        headers["Strict-Transport-Security"] = "max-age=31536000; includeSubDomains; preload"
    return headers


class SecurityHeadersMiddleware(BaseHTTPMiddleware):
    """Adds the headers above to all responses except excluded paths"""

    def __init__(self, app, exclude_paths: Optional[list[str]] = None):
        super().__init__(app)
        self.exclude_paths = exclude_paths or []

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        response = await call_next(request)

        path = request.url.path
        if any(path.startswith(excluded) for excluded in self.exclude_paths):
            return response

        for name, value in get_security_headers().items():
            response.headers[name] = value

        # Endpoints may opt into caching by setting their own header
        if "Cache-Control" not in response.headers:
            response.headers["Cache-Control"] = "no-store, no-cache, must-revalidate"

        return response
