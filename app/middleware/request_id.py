"""Request ID middleware.

Forwards a well-formed client X-Request-ID or mints a new one, exposes it
on the response and binds it to the logging context for the duration of
the request. Raw ASGI (no BaseHTTPMiddleware).
"""

import re
import uuid
from typing import Callable

from app.shared.context import reset_request_id, set_request_id

REQUEST_ID_MAX_LENGTH = 64
# Only these characters are accepted from clients; anything else could forge log lines.
REQUEST_ID_PATTERN = re.compile(rf"^[A-Za-z0-9_-]{{1,{REQUEST_ID_MAX_LENGTH}}}$")


def _header_value(scope: dict, name: bytes) -> str | None:
    for key, value in scope.get("headers", []):
        if key.lower() == name:
            return value.decode("latin-1")
    return None


def resolve_request_id(raw: str | None) -> str:
    """Return raw if it is a safe id, else a new uuid4 hex string."""
    if raw is not None:
        candidate = raw.strip()
        if REQUEST_ID_PATTERN.match(candidate):
            return candidate
    return uuid.uuid4().hex


def RequestIDMiddleware(app: Callable, header_name: str = "X-Request-ID") -> Callable:
    """Attach a request id to scope state, logs and the response headers."""
    header_key = header_name.lower().encode()

    async def asgi_app(scope: dict, receive: Callable, send: Callable) -> None:
        if scope["type"] != "http":
            await app(scope, receive, send)
            return
        request_id = resolve_request_id(_header_value(scope, header_key))
        scope.setdefault("state", {})["request_id"] = request_id

        async def send_with_id(message: dict) -> None:
            if message["type"] == "http.response.start":
                message["headers"] = [
                    *message.get("headers", []),
                    (header_name.encode(), request_id.encode()),
                ]
            await send(message)

        token = set_request_id(request_id)
        try:
            await app(scope, receive, send_with_id)
        finally:
            reset_request_id(token)

    return asgi_app
