"""Starlette/FastAPI integration (requires the ``starlette`` extra)."""

from .adapter import HTTPExchange, StarletteExchangeAdapter
from .middleware import ExchangeLoggingMiddleware

__all__ = [
    "ExchangeLoggingMiddleware",
    "HTTPExchange",
    "StarletteExchangeAdapter",
]
