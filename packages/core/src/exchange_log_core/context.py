"""ExchangeContext — the structured record produced for one exchange."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class ExchangeContext:
    """Uniform log record for a request/response exchange.

    Attributes:
        caller_address: Caller address, or the ordered chain for proxied calls.
        method: Transport operation kind (HTTP verb, GraphQL operation,
            ``REQUEST``/``EVENT`` for messaging).
        call_point: Target that was invoked (route, query name, topic).
        response_time: Elapsed milliseconds, never negative.
        content_length: Byte length of the serialized payload.
        protocol: Transport label, e.g. ``HTTP/1.1``.
        status: Status code as plain text or wrapped in color markup.
        meta: Adapter-defined supplementary data, ``None`` by default.
    """

    caller_address: str | list[str]
    method: str
    call_point: str
    response_time: int
    content_length: int
    protocol: str
    status: str
    meta: Any = None

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for logging/serialization."""
        caller = self.caller_address
        return {
            "caller_address": list(caller) if isinstance(caller, list) else caller,
            "method": self.method,
            "call_point": self.call_point,
            "response_time": self.response_time,
            "content_length": self.content_length,
            "protocol": self.protocol,
            "status": self.status,
            "meta": self.meta,
        }
