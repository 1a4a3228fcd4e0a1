"""IContextSink — receiver of finished exchange contexts."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from ..config import InterceptorOptions
    from ..context import ExchangeContext


@runtime_checkable
class IContextSink(Protocol):
    """Protocol for sinks that persist or ship exchange contexts."""

    def emit(
        self,
        context: ExchangeContext,
        options: InterceptorOptions,
        *,
        request_id: str = "",
        error: BaseException | None = None,
    ) -> None:
        """Hand *context* off; *error* is set for failed exchanges."""
        ...
