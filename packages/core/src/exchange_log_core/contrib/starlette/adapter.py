"""StarletteExchangeAdapter — HTTP REST exchanges served by Starlette/FastAPI."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from ...adapters.base import AbstractExchangeAdapter
from ...config import DEFAULT_REQUEST_ID_HEADER
from ...status import format_status, status_from_error

if TYPE_CHECKING:
    from starlette.requests import Request
    from starlette.responses import Response

    from ...config import InterceptorOptions

FORWARDED_FOR_HEADER = "x-forwarded-for"
UNKNOWN_CALLER = "unknown"


@dataclass
class HTTPExchange:
    """A Starlette request and, once the handler ran, its response."""

    request: Request
    response: Response | None = None


class StarletteExchangeAdapter(AbstractExchangeAdapter):
    """Adapter for :class:`HTTPExchange` handles.

    The caller address is the ``X-Forwarded-For`` chain when a proxy set
    one, otherwise the socket peer. The request id lives on
    ``request.state`` and falls back to the incoming request-id header.
    """

    def __init__(self, request_id_header: str = DEFAULT_REQUEST_ID_HEADER) -> None:
        self.request_id_header = request_id_header

    def get_caller_address(
        self, exchange: HTTPExchange, options: InterceptorOptions
    ) -> str | list[str]:
        forwarded = exchange.request.headers.get(FORWARDED_FOR_HEADER)
        if forwarded:
            return [ip.strip() for ip in forwarded.split(",") if ip.strip()]
        client = exchange.request.client
        return client.host if client else UNKNOWN_CALLER

    def get_method(self, exchange: HTTPExchange, options: InterceptorOptions) -> str:
        return exchange.request.method

    def get_call_point(
        self, exchange: HTTPExchange, options: InterceptorOptions
    ) -> str:
        return exchange.request.url.path

    def get_protocol(self, exchange: HTTPExchange, options: InterceptorOptions) -> str:
        return f"HTTP/{exchange.request.scope.get('http_version', '1.1')}"

    def set_request_id(self, exchange: HTTPExchange, request_id: str) -> None:
        exchange.request.state.request_id = request_id

    def get_request_id(self, exchange: HTTPExchange) -> str:
        request_id = getattr(exchange.request.state, "request_id", None)
        if request_id:
            return str(request_id)
        return exchange.request.headers.get(self.request_id_header, "")

    def get_status(
        self,
        exchange: HTTPExchange,
        in_color: bool,
        error: BaseException | None,
        options: InterceptorOptions,
    ) -> str:
        if error is not None:
            return format_status(status_from_error(error), in_color)
        if exchange.response is not None:
            return format_status(exchange.response.status_code, in_color)
        return super().get_status(exchange, in_color, error, options)

    def get_meta(
        self, exchange: HTTPExchange, data: Any, options: InterceptorOptions
    ) -> Any:
        if not options.extra_option("log_user_agent", False):
            return None
        return {"user_agent": exchange.request.headers.get("user-agent")}
