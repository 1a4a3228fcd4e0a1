"""MessageExchangeAdapter — RPC / microservice message transports."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, Literal

from ..config import DEFAULT_REQUEST_ID_HEADER
from .base import AbstractExchangeAdapter

if TYPE_CHECKING:
    from ..config import InterceptorOptions

UNKNOWN_CALLER = "unknown"


@dataclass
class MessageExchange:
    """A message/reply or event delivered over a message transport.

    Attributes:
        pattern: Message pattern or topic the handler is bound to.
        payload: Incoming message body.
        kind: ``"request"`` when a reply is expected, ``"event"`` otherwise.
        sender: Address or id of the publishing service, if known.
        transport: Transport label (``rpc``, ``nats``, ``kafka``, ...).
        headers: Message headers; the request id is stored here.
    """

    pattern: str
    payload: Any = None
    kind: Literal["request", "event"] = "request"
    sender: str | None = None
    transport: str = "rpc"
    headers: dict[str, str] = field(default_factory=dict)


class MessageExchangeAdapter(AbstractExchangeAdapter):
    """Adapter for :class:`MessageExchange` handles."""

    def __init__(self, request_id_header: str = DEFAULT_REQUEST_ID_HEADER) -> None:
        self.request_id_header = request_id_header

    def get_caller_address(
        self, exchange: MessageExchange, options: InterceptorOptions
    ) -> str:
        return exchange.sender or UNKNOWN_CALLER

    def get_method(self, exchange: MessageExchange, options: InterceptorOptions) -> str:
        return exchange.kind.upper()

    def get_call_point(
        self, exchange: MessageExchange, options: InterceptorOptions
    ) -> str:
        return exchange.pattern

    def get_protocol(
        self, exchange: MessageExchange, options: InterceptorOptions
    ) -> str:
        return exchange.transport

    def set_request_id(self, exchange: MessageExchange, request_id: str) -> None:
        exchange.headers[self.request_id_header] = request_id

    def get_request_id(self, exchange: MessageExchange) -> str:
        return exchange.headers.get(self.request_id_header, "")
