from .base import AbstractExchangeAdapter
from .message import MessageExchange, MessageExchangeAdapter

__all__ = [
    "AbstractExchangeAdapter",
    "MessageExchange",
    "MessageExchangeAdapter",
]
