"""Status classification and formatting.

A status code is classified into one of five half-open ranges. The same
bucket drives both the color tag used for human-readable output and the
semantic classification.
"""

from __future__ import annotations

from enum import Enum

from rich.text import Text

DEFAULT_SUCCESS_STATUS = 200
DEFAULT_ERROR_STATUS = 500


class StatusBucket(str, Enum):
    """Half-open status ranges and the color each one renders with."""

    INFORMATIONAL = "informational"
    REDIRECTION = "redirection"
    CLIENT_ERROR = "client_error"
    SERVER_ERROR = "server_error"
    UNCLASSIFIED = "unclassified"

    @property
    def color(self) -> str:
        return _BUCKET_COLORS[self]


_BUCKET_RANGES: tuple[tuple[int, int, StatusBucket], ...] = (
    (100, 300, StatusBucket.INFORMATIONAL),
    (300, 400, StatusBucket.REDIRECTION),
    (400, 500, StatusBucket.CLIENT_ERROR),
    (500, 600, StatusBucket.SERVER_ERROR),
)

_BUCKET_COLORS: dict[StatusBucket, str] = {
    StatusBucket.INFORMATIONAL: "green",
    StatusBucket.REDIRECTION: "cyan",
    StatusBucket.CLIENT_ERROR: "yellow",
    StatusBucket.SERVER_ERROR: "red",
    StatusBucket.UNCLASSIFIED: "white",
}


def is_between(value: int, bottom: int, top: int) -> bool:
    """Return True when ``bottom <= value < top``."""
    return bottom <= value < top


def classify_status(code: int) -> StatusBucket:
    """Return the bucket *code* falls into; total over all integers."""
    for bottom, top, bucket in _BUCKET_RANGES:
        if is_between(code, bottom, top):
            return bucket
    return StatusBucket.UNCLASSIFIED


def format_status(code: int, color_enabled: bool) -> str:
    """Render *code* as a plain decimal string or as rich console markup.

    With ``color_enabled`` the result is e.g. ``"[red]500[/red]"``; a
    downstream renderer (see :mod:`exchange_log_core.rendering`) turns the
    tag into terminal styling.
    """
    if not color_enabled:
        return str(code)
    return Text(str(code), style=classify_status(code).color).markup


def status_from_error(error: BaseException | None) -> int:
    """Status code carried by *error*, falling back to 500.

    Recognises an integer ``status_code`` attribute (Starlette/FastAPI
    ``HTTPException``, :class:`ExchangeStatusError`) and then an integer
    ``status`` attribute.
    """
    if error is None:
        return DEFAULT_SUCCESS_STATUS
    for attr in ("status_code", "status"):
        value = getattr(error, attr, None)
        if isinstance(value, int) and not isinstance(value, bool):
            return value
    return DEFAULT_ERROR_STATUS
