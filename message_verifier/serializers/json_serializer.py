"""Compact JSON serializer."""

from __future__ import annotations

import json
from typing import Any, Optional

from ..errors import DecodeError, EncodeError
from ._plain import from_plain, to_plain


class JSONSerializer:
    """JSON-based implementation of the Serializer interface.

    - compact separators, no whitespace
    - dataclass fields in declaration order, mapping keys sorted
    - non-ASCII text kept as UTF-8
    """

    name = "json"

    def encode(self, value: Any) -> bytes:
        try:
            text = json.dumps(to_plain(value), separators=(",", ":"), ensure_ascii=False, allow_nan=False)
        except (TypeError, ValueError) as exc:
            raise EncodeError(f"value is not JSON serializable: {exc}") from exc
        return text.encode("utf-8")

    def decode(self, data: bytes, target: Optional[type] = None) -> Any:
        try:
            obj = json.loads(data.decode("utf-8"))
        except (UnicodeDecodeError, ValueError) as exc:
            raise DecodeError(f"payload is not valid JSON: {exc}") from exc
        return from_plain(obj, target)
