"""AbstractExchangeAdapter — base class with default hook implementations."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any

from ..builder import wall_clock_ms
from ..ports.adapter import IExchangeAdapter
from ..status import DEFAULT_SUCCESS_STATUS, format_status, status_from_error

if TYPE_CHECKING:
    from ..config import InterceptorOptions


class AbstractExchangeAdapter(IExchangeAdapter, ABC):
    """Base for transport adapters.

    Subclasses implement the six extraction methods. ``get_status``,
    ``get_meta`` and ``get_start_time`` have defaults that may be
    overridden when a transport knows better (e.g. a real response code).
    """

    @abstractmethod
    def get_caller_address(
        self, exchange: Any, options: InterceptorOptions
    ) -> str | list[str]:
        """Address of the caller, or the ordered proxy chain."""

    @abstractmethod
    def get_method(self, exchange: Any, options: InterceptorOptions) -> str:
        """Transport operation kind.

        REST: an HTTP verb (GET, POST, PATCH, ...).
        GraphQL: query, mutation or subscription.
        Messaging: REQUEST or EVENT.
        """

    @abstractmethod
    def get_call_point(self, exchange: Any, options: InterceptorOptions) -> str:
        """What was called.

        REST: route path. GraphQL: operation name. Messaging: pattern or
        topic. WebSockets: subscription event name.
        """

    @abstractmethod
    def get_protocol(self, exchange: Any, options: InterceptorOptions) -> str:
        """Transport label."""

    @abstractmethod
    def set_request_id(self, exchange: Any, request_id: str) -> None:
        """Attach a correlation id to the exchange."""

    @abstractmethod
    def get_request_id(self, exchange: Any) -> str:
        """Correlation id of the exchange; ``""`` when none was set."""

    def get_status(
        self,
        exchange: Any,
        in_color: bool,
        error: BaseException | None,
        options: InterceptorOptions,
    ) -> str:
        """200 on success; on failure the error's own code, else 500."""
        status = DEFAULT_SUCCESS_STATUS if error is None else status_from_error(error)
        return format_status(status, in_color)

    def get_meta(self, exchange: Any, data: Any, options: InterceptorOptions) -> Any:
        """No metadata unless a subclass adds some."""
        return None

    def get_start_time(self, exchange: Any) -> float:
        return wall_clock_ms()
