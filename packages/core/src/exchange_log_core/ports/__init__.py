from .adapter import IExchangeAdapter
from .sink import IContextSink

__all__ = [
    "IContextSink",
    "IExchangeAdapter",
]
