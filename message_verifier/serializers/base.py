"""Serializer interface."""

from __future__ import annotations

from typing import Any, Optional, Protocol, runtime_checkable


@runtime_checkable
class Serializer(Protocol):
    """Contract for turning payloads into bytes and back.

    Implementations must be deterministic and free of side effects. The
    verifier renders the bytes into text itself, so a serializer never has
    to worry about the token separator.
    """

    def encode(self, value: Any) -> bytes:
        """Encode ``value``.

        Raises:
            EncodeError: If the format cannot represent ``value``.
        """
        ...

    def decode(self, data: bytes, target: Optional[type] = None) -> Any:
        """Decode ``data``, shaping the result as ``target`` when given.

        Raises:
            DecodeError: If ``data`` is malformed or does not fit ``target``.
        """
        ...
