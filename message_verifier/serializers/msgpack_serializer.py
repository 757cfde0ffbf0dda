"""MsgPack serializer."""

from __future__ import annotations

from typing import Any, Optional

import msgpack

from ..errors import DecodeError, EncodeError
from ._plain import from_plain, to_plain


class MsgPackSerializer:
    """
    MsgPack-based implementation of the Serializer interface.

    - deterministic binary encoding
    - compact, so tokens stay shorter than their JSON equivalent
    - shares the dataclass handling of the JSON serializer
    """

    name = "msgpack"

    def encode(self, value: Any) -> bytes:
        try:
            return msgpack.packb(to_plain(value), use_bin_type=True)
        except (TypeError, ValueError, OverflowError) as exc:
            raise EncodeError(f"value is not msgpack serializable: {exc}") from exc

    def decode(self, data: bytes, target: Optional[type] = None) -> Any:
        try:
            obj = msgpack.unpackb(data, raw=False)
        except (ValueError, TypeError, msgpack.exceptions.UnpackException) as exc:
            raise DecodeError(f"payload is not valid msgpack: {exc}") from exc
        return from_plain(obj, target)
