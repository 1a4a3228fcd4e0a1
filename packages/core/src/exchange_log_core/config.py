"""InterceptorOptions — read-only per-call logging configuration."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from pydantic import BaseModel, ConfigDict, Field
from pydantic import ValidationError as PydanticValidationError

from .primitives.exceptions import ConfigurationError

if TYPE_CHECKING:
    from collections.abc import Mapping

DEFAULT_REQUEST_ID_HEADER = "x-request-id"


class InterceptorOptions(BaseModel):
    """Options handed to every build call.

    ``color`` enables status coloring and ``json`` (``json_mode``) switches
    to structured output, which always suppresses coloring because markup
    would corrupt the JSON. Unknown keys are kept as adapter passthrough
    options.
    """

    model_config = ConfigDict(frozen=True, extra="allow", populate_by_name=True)

    color: bool = True
    json_mode: bool = Field(default=False, alias="json")
    request_id_header: str = DEFAULT_REQUEST_ID_HEADER

    @property
    def in_color(self) -> bool:
        """Whether status strings should carry color markup."""
        return self.color and not self.json_mode

    def extra_option(self, name: str, default: Any = None) -> Any:
        """Return an adapter-specific option, or *default* when unset."""
        return (self.model_extra or {}).get(name, default)

    @classmethod
    def from_mapping(cls, mapping: Mapping[str, Any]) -> InterceptorOptions:
        """Build options from a plain mapping (e.g. loaded app settings)."""
        try:
            return cls.model_validate(dict(mapping))
        except PydanticValidationError as exc:
            errors: dict[str, list[str]] = {}
            for err in exc.errors():
                key = ".".join(str(part) for part in err["loc"]) or "__root__"
                errors.setdefault(key, []).append(err["msg"])
            raise ConfigurationError(errors) from exc
