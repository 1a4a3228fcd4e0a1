"""Payload serialization used for content-length accounting."""

from __future__ import annotations

import json
from typing import Any

_JSON_SEPARATORS = (",", ":")


def serialize_payload(payload: Any) -> bytes:
    """Serialize *payload* to the bytes that would be sent on the wire.

    Absent or empty payloads serialize to ``b""``. Binary payloads are
    taken as-is and text is encoded as UTF-8 without JSON quoting, so a
    string and its encoded bytes always report the same length. Values JSON
    cannot encode (circular references, tuple keys) fall back to their
    ``str()`` text.
    """
    if not payload:
        return b""
    if isinstance(payload, (bytes, bytearray, memoryview)):
        return bytes(payload)
    if isinstance(payload, str):
        return payload.encode("utf-8")
    if hasattr(payload, "model_dump_json"):
        return str(payload.model_dump_json()).encode("utf-8")
    try:
        text = json.dumps(
            payload,
            separators=_JSON_SEPARATORS,
            ensure_ascii=False,
            default=str,
        )
    except (TypeError, ValueError):
        text = str(payload)
    return text.encode("utf-8")


def payload_byte_length(payload: Any) -> int:
    """Byte length of the serialized *payload*; 0 when empty or absent."""
    return len(serialize_payload(payload))
