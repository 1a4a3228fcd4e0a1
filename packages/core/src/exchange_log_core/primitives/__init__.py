"""Primitive building blocks shared across the package."""

from .exceptions import ConfigurationError, ExchangeLogError, ExchangeStatusError

__all__ = [
    "ConfigurationError",
    "ExchangeLogError",
    "ExchangeStatusError",
]
