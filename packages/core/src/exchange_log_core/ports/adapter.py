"""IExchangeAdapter — transport-specific extraction protocol."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol, runtime_checkable

if TYPE_CHECKING:
    from ..config import InterceptorOptions


@runtime_checkable
class IExchangeAdapter(Protocol):
    """Protocol every transport adapter implements.

    The context builder asks the adapter every transport-dependent
    question and never looks inside the exchange handle itself. What
    ``method`` and ``call_point`` mean depends on the transport:

    ============  ===========================  ======================
    transport     method                       call_point
    ============  ===========================  ======================
    REST          HTTP verb                    route path
    GraphQL       query/mutation/subscription  operation name
    RPC           ``REQUEST`` / ``EVENT``      message pattern/topic
    WebSocket     subscription event marker    event name
    ============  ===========================  ======================

    :class:`~exchange_log_core.adapters.base.AbstractExchangeAdapter`
    supplies defaults for ``get_status``, ``get_meta`` and
    ``get_start_time``.
    """

    def get_caller_address(
        self, exchange: Any, options: InterceptorOptions
    ) -> str | list[str]:
        """Address of the caller, or the ordered proxy chain."""
        ...

    def get_method(self, exchange: Any, options: InterceptorOptions) -> str:
        """Transport operation kind."""
        ...

    def get_call_point(self, exchange: Any, options: InterceptorOptions) -> str:
        """The specific target that was invoked."""
        ...

    def get_protocol(self, exchange: Any, options: InterceptorOptions) -> str:
        """Transport label."""
        ...

    def set_request_id(self, exchange: Any, request_id: str) -> None:
        """Attach a correlation id to the exchange."""
        ...

    def get_request_id(self, exchange: Any) -> str:
        """Correlation id of the exchange; ``""`` when none was set."""
        ...

    def get_status(
        self,
        exchange: Any,
        in_color: bool,
        error: BaseException | None,
        options: InterceptorOptions,
    ) -> str:
        """Formatted status for the exchange outcome."""
        ...

    def get_meta(self, exchange: Any, data: Any, options: InterceptorOptions) -> Any:
        """Supplementary data for the record; receives payload or error."""
        ...

    def get_start_time(self, exchange: Any) -> float:
        """Start of the exchange in epoch milliseconds."""
        ...
