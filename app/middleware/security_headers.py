"""Security headers middleware.

API responses are never framed, sniffed or cached (they may carry session
tokens). HSTS is only sent when the app is served over HTTPS, signalled by
the secure-cookie setting. Raw ASGI (no BaseHTTPMiddleware).
"""

from typing import Callable

BASE_HEADERS = {
    "Content-Security-Policy": "default-src 'none'; frame-ancestors 'none'",
    "X-Content-Type-Options": "nosniff",
    "X-Frame-Options": "DENY",
    "Referrer-Policy": "no-referrer",
    "Cache-Control": "no-store",
}
HSTS_HEADER = ("Strict-Transport-Security", "max-age=31536000; includeSubDomains")


def build_security_headers(https: bool) -> list[tuple[bytes, bytes]]:
    headers = dict(BASE_HEADERS)
    if https:
        headers[HSTS_HEADER[0]] = HSTS_HEADER[1]
    return [(k.lower().encode(), v.encode()) for k, v in headers.items()]


def SecurityHeadersMiddleware(app: Callable, https: bool = False) -> Callable:
    """Add security headers unless the route already set them."""
    header_list = build_security_headers(https)

    async def asgi_app(scope: dict, receive: Callable, send: Callable) -> None:
        if scope["type"] != "http":
            await app(scope, receive, send)
            return

        async def send_with_headers(message: dict) -> None:
            if message["type"] == "http.response.start":
                headers = list(message.get("headers", []))
                present = {name.lower() for name, _ in headers}
                headers.extend(h for h in header_list if h[0] not in present)
                message["headers"] = headers
            await send(message)

        await app(scope, receive, send_with_headers)

    return asgi_app
