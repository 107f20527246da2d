"""HTTP middleware: request ID and security headers.

Applied in main app; order matters (first added = outermost).
"""

from app.middleware.request_id import RequestIDMiddleware
from app.middleware.security_headers import SecurityHeadersMiddleware

__all__ = [
    "RequestIDMiddleware",
    "SecurityHeadersMiddleware",
]
