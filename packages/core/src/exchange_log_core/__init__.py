"""exchange-log-core — transport-agnostic request/response logging contexts.

A :class:`ContextBuilder` turns any in-flight exchange into a uniform
:class:`ExchangeContext` by delegating every transport-specific question to
an :class:`IExchangeAdapter`.
"""

from __future__ import annotations

from .adapters import (
    AbstractExchangeAdapter,
    MessageExchange,
    MessageExchangeAdapter,
)
from .builder import ContextBuilder, error_message, wall_clock_ms
from .config import DEFAULT_REQUEST_ID_HEADER, InterceptorOptions
from .context import ExchangeContext
from .correlation import (
    generate_request_id,
    get_request_id,
    reset_request_id,
    set_request_id,
)
from .interceptor import ExchangeLoggingInterceptor
from .ports import IContextSink, IExchangeAdapter
from .primitives.exceptions import (
    ConfigurationError,
    ExchangeLogError,
    ExchangeStatusError,
)
from .rendering import render_markup, strip_markup
from .serialization import payload_byte_length, serialize_payload
from .sinks import LoggingSink, format_line
from .status import (
    DEFAULT_ERROR_STATUS,
    DEFAULT_SUCCESS_STATUS,
    StatusBucket,
    classify_status,
    format_status,
    status_from_error,
)

__all__ = [
    "AbstractExchangeAdapter",
    "ConfigurationError",
    "ContextBuilder",
    "DEFAULT_ERROR_STATUS",
    "DEFAULT_REQUEST_ID_HEADER",
    "DEFAULT_SUCCESS_STATUS",
    "ExchangeContext",
    "ExchangeLogError",
    "ExchangeLoggingInterceptor",
    "ExchangeStatusError",
    "IContextSink",
    "IExchangeAdapter",
    "InterceptorOptions",
    "LoggingSink",
    "MessageExchange",
    "MessageExchangeAdapter",
    "StatusBucket",
    "classify_status",
    "error_message",
    "format_line",
    "format_status",
    "generate_request_id",
    "get_request_id",
    "payload_byte_length",
    "render_markup",
    "reset_request_id",
    "serialize_payload",
    "set_request_id",
    "status_from_error",
    "strip_markup",
    "wall_clock_ms",
]
