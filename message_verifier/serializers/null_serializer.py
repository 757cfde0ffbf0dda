"""Pass-through serializer for payloads that are already text."""

from __future__ import annotations

from typing import Any, Optional

from ..errors import DecodeError, EncodeError


class NullSerializer:
    """Encode text as UTF-8 and hand it back unchanged on decode."""

    name = "null"

    def encode(self, value: Any) -> bytes:
        if not isinstance(value, str):
            raise EncodeError(f"NullSerializer expects str, got {type(value).__name__}")
        return value.encode("utf-8")

    def decode(self, data: bytes, target: Optional[type] = None) -> str:
        if target is not None and target is not str:
            raise DecodeError(f"NullSerializer can only decode into str, not {getattr(target, '__name__', target)!r}")
        try:
            return data.decode("utf-8")
        except UnicodeDecodeError as exc:
            raise DecodeError(f"payload is not valid UTF-8: {exc}") from exc
