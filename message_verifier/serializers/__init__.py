"""Built-in payload serializers."""

from __future__ import annotations

from typing import Callable, Dict

from .base import Serializer
from .json_serializer import JSONSerializer
from .msgpack_serializer import MsgPackSerializer
from .null_serializer import NullSerializer
from .xml_serializer import XMLSerializer

_REGISTRY: Dict[str, Callable[[], Serializer]] = {
    NullSerializer.name: NullSerializer,
    JSONSerializer.name: JSONSerializer,
    XMLSerializer.name: XMLSerializer,
    MsgPackSerializer.name: MsgPackSerializer,
}


def get_serializer(name: str) -> Serializer:
    """Return a fresh built-in serializer by name."""
    key = name.strip().lower()
    if key not in _REGISTRY:
        raise ValueError(f"Unknown serializer '{name}'. Expected one of: {', '.join(_REGISTRY.keys())}.")
    return _REGISTRY[key]()


__all__ = [
    "Serializer",
    "NullSerializer",
    "JSONSerializer",
    "XMLSerializer",
    "MsgPackSerializer",
    "get_serializer",
]
