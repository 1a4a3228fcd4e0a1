"""Request id management for the exchange currently being logged."""

from __future__ import annotations

import uuid
from contextvars import ContextVar, Token

# ContextVar so concurrent exchanges in different tasks never share an id.
_request_id: ContextVar[str | None] = ContextVar("exchange_request_id", default=None)


def get_request_id() -> str | None:
    """Get the request id bound to the current context."""
    return _request_id.get()


def set_request_id(request_id: str | None) -> Token[str | None]:
    """Bind *request_id* to the current context; returns a reset token."""
    return _request_id.set(request_id)


def reset_request_id(token: Token[str | None]) -> None:
    """Restore the request id that was bound before ``set_request_id``."""
    _request_id.reset(token)


def generate_request_id() -> str:
    """Generate a new request id."""
    return str(uuid.uuid4())
