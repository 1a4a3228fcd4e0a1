"""ExchangeLoggingInterceptor — logs every exchange flowing through a handler."""

from __future__ import annotations

import logging
from dataclasses import replace
from typing import TYPE_CHECKING, Any

from .builder import ContextBuilder
from .config import InterceptorOptions
from .correlation import generate_request_id, reset_request_id, set_request_id
from .sinks import LoggingSink

if TYPE_CHECKING:
    from collections.abc import Awaitable, Callable

    from .context import ExchangeContext
    from .ports.adapter import IExchangeAdapter
    from .ports.sink import IContextSink

logger = logging.getLogger("exchange_log.interceptor")


class ExchangeLoggingInterceptor:
    """Wraps a handler call and emits one context per exchange.

    Order of operations:
    1. Skip — exchanges matching *skip* pass straight through.
    2. Start — ``adapter.get_start_time`` captures the start timestamp.
    3. Request id — reuse the exchange's id or generate and attach one;
       it is bound in :mod:`exchange_log_core.correlation` for the call.
    4. Handle — await the handler; build the success or error context.
       *payload_of* maps the handler result to the logged payload when
       the two differ (e.g. an HTTP response and its body).
    5. Emit — hand the context to the sink. Sink failures are logged and
       never change the handler outcome; handler errors are re-raised.
    """

    def __init__(
        self,
        adapter: IExchangeAdapter,
        sink: IContextSink | None = None,
        *,
        options: InterceptorOptions | None = None,
        builder: ContextBuilder | None = None,
        request_id_factory: Callable[[], str] = generate_request_id,
        skip: Callable[[Any], bool] | None = None,
        payload_of: Callable[[Any], Any] | None = None,
    ) -> None:
        self.adapter = adapter
        self.sink = sink or LoggingSink()
        self.options = options or InterceptorOptions()
        self.builder = builder or ContextBuilder(adapter)
        self._request_id_factory = request_id_factory
        self._skip = skip
        self._payload_of = payload_of

    def ensure_request_id(self, exchange: Any) -> str:
        """Return the exchange's request id, attaching a new one if missing."""
        request_id = self.adapter.get_request_id(exchange)
        if not request_id:
            request_id = self._request_id_factory()
            self.adapter.set_request_id(exchange, request_id)
        return request_id

    async def __call__(
        self,
        exchange: Any,
        next_handler: Callable[[Any], Awaitable[Any]],
    ) -> Any:
        if self._skip is not None and self._skip(exchange):
            return await next_handler(exchange)

        start_time = self.adapter.get_start_time(exchange)
        request_id = self.ensure_request_id(exchange)
        token = set_request_id(request_id)
        try:
            try:
                result = await next_handler(exchange)
            except Exception as exc:
                self.record_error(exc, exchange, start_time, request_id)
                raise
            payload = result if self._payload_of is None else self._payload_of(result)
            self.record_success(payload, exchange, start_time, request_id)
            return result
        finally:
            reset_request_id(token)

    def record_success(
        self,
        payload: Any,
        exchange: Any,
        start_time: float,
        request_id: str,
        *,
        content_length: int | None = None,
    ) -> ExchangeContext:
        """Build and emit the success context.

        *content_length* replaces the computed length when the payload was
        streamed and only its byte count is known.
        """
        context = self.builder.build_success_context(
            payload, exchange, start_time, self.options
        )
        if content_length is not None:
            context = replace(context, content_length=content_length)
        self._emit(context, request_id, None)
        return context

    def record_error(
        self,
        error: BaseException,
        exchange: Any,
        start_time: float,
        request_id: str,
    ) -> ExchangeContext:
        """Build and emit the error context."""
        context = self.builder.build_error_context(
            error, exchange, start_time, self.options
        )
        self._emit(context, request_id, error)
        return context

    def _emit(
        self,
        context: ExchangeContext,
        request_id: str,
        error: BaseException | None,
    ) -> None:
        try:
            self.sink.emit(context, self.options, request_id=request_id, error=error)
        except Exception:  # noqa: BLE001
            logger.warning(
                "Failed to emit exchange context for %s %s",
                context.method,
                context.call_point,
                exc_info=True,
            )
