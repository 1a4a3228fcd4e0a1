"""LoggingSink — writes exchange contexts to a stdlib logger."""

from __future__ import annotations

import json
import logging
from typing import TYPE_CHECKING, Any

from rich.markup import escape

from .ports.sink import IContextSink
from .rendering import render_markup

if TYPE_CHECKING:
    from .config import InterceptorOptions
    from .context import ExchangeContext

_log = logging.getLogger("exchange_log.access")


def format_caller(caller_address: str | list[str]) -> str:
    """Join a proxied caller chain into one display string."""
    if isinstance(caller_address, list):
        return ", ".join(caller_address)
    return caller_address


def format_line(context: ExchangeContext, *, markup: bool = False) -> str:
    """Single-line, human-readable rendering of *context*.

    With *markup* every field except the status is escaped so that only
    the status tag is interpreted by the renderer.
    """
    quote = escape if markup else str
    return (
        f"{quote(format_caller(context.caller_address))} - {quote(context.method)} "
        f"{quote(context.call_point)} {quote(context.protocol)} {context.status} "
        f"{context.response_time}ms - {context.content_length}"
    )


class LoggingSink(IContextSink):
    """Emits one log line per exchange, plus a second line for meta.

    Text mode renders status markup to ANSI when the options ask for
    color; JSON mode logs ``context.to_dict()`` as a JSON document.
    Successes go out at INFO, failures at ERROR.
    """

    def __init__(self, logger: logging.Logger | None = None) -> None:
        self._log = logger or _log

    def emit(
        self,
        context: ExchangeContext,
        options: InterceptorOptions,
        *,
        request_id: str = "",
        error: BaseException | None = None,
    ) -> None:
        level = logging.INFO if error is None else logging.ERROR
        payload = context.to_dict()
        extra: dict[str, Any] = {"exchange": payload, "request_id": request_id}

        if options.json_mode:
            message = json.dumps({**payload, "request_id": request_id}, default=str)
        elif options.in_color:
            message = render_markup(format_line(context, markup=True))
        else:
            message = format_line(context)
        self._log.log(level, message, extra=extra)

        if context.meta is not None:
            meta = context.meta
            if options.json_mode or not isinstance(meta, str):
                meta = json.dumps(meta, default=str)
            self._log.log(level, meta, extra=extra)
