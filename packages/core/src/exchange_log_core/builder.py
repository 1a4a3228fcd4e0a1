"""ContextBuilder — assembles a uniform ExchangeContext for any transport."""

from __future__ import annotations

import logging
import time
from typing import TYPE_CHECKING, Any

from .context import ExchangeContext
from .serialization import payload_byte_length

if TYPE_CHECKING:
    from collections.abc import Callable

    from .config import InterceptorOptions
    from .ports.adapter import IExchangeAdapter

logger = logging.getLogger("exchange_log.builder")


def wall_clock_ms() -> float:
    """Current wall-clock time in epoch milliseconds."""
    return time.time() * 1000


def error_message(error: BaseException) -> str:
    """The message an error was raised with.

    ``str(KeyError("boom"))`` is ``"'boom'"``, so a single string argument
    is taken as-is.
    """
    if len(error.args) == 1 and isinstance(error.args[0], str):
        return error.args[0]
    return str(error)


class ContextBuilder:
    """Builds success and error contexts by delegating to an adapter.

    The builder owns only the transport-independent parts of the record:
    elapsed time, payload byte length and the color decision. Everything
    else is asked of the adapter, and adapter failures propagate to the
    caller unchanged. No state is kept between calls, so one builder can
    serve concurrent exchanges.
    """

    def __init__(
        self,
        adapter: IExchangeAdapter,
        *,
        clock: Callable[[], float] | None = None,
    ) -> None:
        self._adapter = adapter
        self._clock = clock or wall_clock_ms

    @property
    def adapter(self) -> IExchangeAdapter:
        return self._adapter

    def build_success_context(
        self,
        data: Any,
        exchange: Any,
        start_time: float,
        options: InterceptorOptions,
    ) -> ExchangeContext:
        """Context for an exchange whose handler returned *data*."""
        adapter = self._adapter
        return ExchangeContext(
            caller_address=adapter.get_caller_address(exchange, options),
            method=adapter.get_method(exchange, options),
            call_point=adapter.get_call_point(exchange, options),
            response_time=self.get_response_time(start_time),
            content_length=payload_byte_length(data),
            protocol=adapter.get_protocol(exchange, options),
            status=adapter.get_status(exchange, options.in_color, None, options),
            meta=adapter.get_meta(exchange, data, options),
        )

    def build_error_context(
        self,
        error: BaseException,
        exchange: Any,
        start_time: float,
        options: InterceptorOptions,
    ) -> ExchangeContext:
        """Context for an exchange whose handler raised *error*.

        ``content_length`` counts the bytes of the error message.
        """
        adapter = self._adapter
        return ExchangeContext(
            caller_address=adapter.get_caller_address(exchange, options),
            method=adapter.get_method(exchange, options),
            call_point=adapter.get_call_point(exchange, options),
            response_time=self.get_response_time(start_time),
            content_length=payload_byte_length(error_message(error)),
            protocol=adapter.get_protocol(exchange, options),
            status=adapter.get_status(exchange, options.in_color, error, options),
            meta=adapter.get_meta(exchange, error, options),
        )

    def get_response_time(self, start_time: float) -> int:
        """Milliseconds since *start_time*, clamped at 0."""
        elapsed = round(self._clock() - start_time)
        if elapsed < 0:
            logger.warning(
                "Clock went backwards by %dms; clamping response time to 0",
                -elapsed,
            )
            return 0
        return elapsed
