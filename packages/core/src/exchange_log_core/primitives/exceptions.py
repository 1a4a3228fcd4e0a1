"""Exceptions for exchange-log-core."""

from __future__ import annotations


class ExchangeLogError(Exception):
    """Root exception for the exchange logging toolkit."""


class ConfigurationError(ExchangeLogError):
    """Raised when interceptor options cannot be built from the given values."""

    def __init__(self, errors: dict[str, list[str]] | str | None = None) -> None:
        if isinstance(errors, str):
            self.errors: dict[str, list[str]] = {"__root__": [errors]}
        elif errors is None:
            self.errors = {}
        else:
            self.errors = errors
        super().__init__(str(self.errors))


class ExchangeStatusError(ExchangeLogError):
    """Error that carries an explicit transport status code.

    Handlers raise this (or any exception exposing an integer
    ``status_code``) when a failure should be logged with a more
    specific status than the 500 default.
    """

    def __init__(self, message: str = "", status_code: int = 500) -> None:
        self.status_code = status_code
        super().__init__(message)
