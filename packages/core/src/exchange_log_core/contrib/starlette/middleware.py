"""Starlette/FastAPI middleware that logs every HTTP exchange.

Example:
    ```python
    from fastapi import FastAPI
    from exchange_log_core import InterceptorOptions
    from exchange_log_core.contrib.starlette import ExchangeLoggingMiddleware

    app = FastAPI()
    app.add_middleware(
        ExchangeLoggingMiddleware,
        options=InterceptorOptions(json=True),
        skip_paths=["/health"],
    )
    ```
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from starlette.middleware.base import BaseHTTPMiddleware

from ...config import InterceptorOptions
from ...correlation import reset_request_id, set_request_id
from ...interceptor import ExchangeLoggingInterceptor
from .adapter import HTTPExchange, StarletteExchangeAdapter

if TYPE_CHECKING:
    from collections.abc import AsyncIterator

    from starlette.requests import Request
    from starlette.responses import Response

    from ...ports.sink import IContextSink


class ExchangeLoggingMiddleware(BaseHTTPMiddleware):
    """Logs each request through :class:`ExchangeLoggingInterceptor`.

    The response is passed through untouched apart from the request-id
    header. Body bytes are counted as they are sent, and the success
    context is emitted once the body has been fully sent or the client
    went away. Failures raised by the app are logged right away.
    """

    def __init__(
        self,
        app: Any,
        *,
        options: InterceptorOptions | None = None,
        sink: IContextSink | None = None,
        adapter: StarletteExchangeAdapter | None = None,
        skip_paths: list[str] | None = None,
    ) -> None:
        super().__init__(app)
        self.options = options or InterceptorOptions()
        self.adapter = adapter or StarletteExchangeAdapter(
            request_id_header=self.options.request_id_header
        )
        self.skip_paths = set(skip_paths or [])
        self.interceptor = ExchangeLoggingInterceptor(
            self.adapter,
            sink,
            options=self.options,
        )

    def _is_skipped(self, exchange: HTTPExchange) -> bool:
        return exchange.request.url.path in self.skip_paths

    async def dispatch(self, request: Request, call_next: Any) -> Response:
        exchange = HTTPExchange(request)
        if self._is_skipped(exchange):
            return await call_next(request)  # type: ignore[no-any-return]

        start_time = self.adapter.get_start_time(exchange)
        request_id = self.interceptor.ensure_request_id(exchange)
        token = set_request_id(request_id)
        try:
            response: Response = await call_next(request)
        except Exception as exc:
            self.interceptor.record_error(exc, exchange, start_time, request_id)
            raise
        finally:
            reset_request_id(token)

        exchange.response = response
        response.headers[self.options.request_id_header] = request_id
        response.body_iterator = self._count_body(  # type: ignore[attr-defined]
            response.body_iterator,  # type: ignore[attr-defined]
            exchange,
            start_time,
            request_id,
        )
        return response

    async def _count_body(
        self,
        body: AsyncIterator[bytes | str],
        exchange: HTTPExchange,
        start_time: float,
        request_id: str,
    ) -> AsyncIterator[bytes | str]:
        sent = 0
        try:
            async for chunk in body:
                sent += len(chunk if isinstance(chunk, bytes) else chunk.encode())
                yield chunk
        finally:
            self.interceptor.record_success(
                None, exchange, start_time, request_id, content_length=sent
            )
