"""Request context management using contextvars.

Provides async-safe storage for request-scoped data. The request ID set by
RequestIDMiddleware is visible to every log record emitted while the request
(and the background workflow pass it schedules) runs.

Usage:
    token = set_request_id("abc123")
    request_id = get_request_id()
    reset_request_id(token)
"""

from contextvars import ContextVar, Token

_current_request_id: ContextVar[str | None] = ContextVar(
    "current_request_id", default=None
)


def set_request_id(request_id: str | None) -> Token[str | None]:
    """Set the request ID for the current context and return the reset token."""
    return _current_request_id.set(request_id)


def reset_request_id(token: Token[str | None]) -> None:
    """Restore the request ID that was active before set_request_id()."""
    _current_request_id.reset(token)


def get_request_id() -> str | None:
    """Return the current request ID, or None outside a request."""
    return _current_request_id.get()
