"""Request context using contextvars.

Holds the current request id so log records emitted anywhere during a
request can carry it. Scoped to the current async task.
"""

from contextvars import ContextVar, Token

_request_id: ContextVar[str | None] = ContextVar("request_id", default=None)


def set_request_id(request_id: str | None) -> Token[str | None]:
    """Set the request id for this task; return the token for reset_request_id."""
    return _request_id.set(request_id)


def reset_request_id(token: Token[str | None]) -> None:
    _request_id.reset(token)


def get_request_id() -> str | None:
    """Return the current request id, or None outside a request."""
    return _request_id.get()
