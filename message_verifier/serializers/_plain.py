"""Conversion between payload objects and plain structures.

Encoding walks dataclasses, mappings and sequences down to the dict/list/
scalar shapes every codec understands. Decoding goes the other way, guided
by the requested target type and the type hints of dataclass fields.
"""

from __future__ import annotations

import dataclasses
import types
import typing
from collections.abc import Mapping
from typing import Any, Optional, Tuple

from ..errors import DecodeError

_UNION_TYPES: Tuple[Any, ...] = (typing.Union, types.UnionType)
_SEQUENCE_TYPES = (list, tuple, set, frozenset)


def is_dataclass_instance(value: Any) -> bool:
    return dataclasses.is_dataclass(value) and not isinstance(value, type)


def is_empty(value: Any) -> bool:
    if value is None or value is False:
        return True
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return value == 0
    if isinstance(value, (str, bytes, Mapping, list, tuple, set, frozenset)):
        return len(value) == 0
    return False


def exported_fields(obj: Any):
    """Yield ``(name, value)`` for the fields of a dataclass that get encoded.

    Underscore-prefixed fields are unexported. Fields declared with
    ``metadata={"omitempty": True}`` are skipped while empty.
    """
    for f in dataclasses.fields(obj):
        if f.name.startswith("_"):
            continue
        value = getattr(obj, f.name)
        if f.metadata.get("omitempty") and is_empty(value):
            continue
        yield f.name, value


def to_plain(value: Any) -> Any:
    """Reduce ``value`` to dicts, lists and scalars.

    Dataclass fields keep their declaration order; mapping keys are sorted so
    the encoding of a dict does not depend on insertion order.
    """
    if is_dataclass_instance(value):
        return {name: to_plain(item) for name, item in exported_fields(value)}
    if isinstance(value, Mapping):
        return {key: to_plain(item) for key, item in sorted(value.items(), key=lambda kv: str(kv[0]))}
    if isinstance(value, _SEQUENCE_TYPES):
        items = sorted(value, key=repr) if isinstance(value, (set, frozenset)) else value
        return [to_plain(item) for item in items]
    return value


def unwrap_optional(tp: Any) -> Tuple[Any, bool]:
    """Return ``(inner, nullable)`` for ``Optional[inner]`` style hints."""
    if typing.get_origin(tp) in _UNION_TYPES:
        args = [arg for arg in typing.get_args(tp) if arg is not type(None)]
        nullable = len(args) != len(typing.get_args(tp))
        if len(args) == 1:
            return args[0], nullable
        return typing.Union[tuple(args)], nullable
    return tp, False


def sequence_item_type(tp: Any) -> Tuple[bool, Any]:
    """Return ``(is_sequence, item_type)`` for a type hint."""
    tp, _ = unwrap_optional(tp)
    origin = typing.get_origin(tp) or tp
    if isinstance(origin, type) and issubclass(origin, _SEQUENCE_TYPES):
        args = typing.get_args(tp)
        return True, (args[0] if args else None)
    return False, None


def field_hints(target: type) -> dict[str, Any]:
    try:
        return typing.get_type_hints(target)
    except (NameError, TypeError):
        return {f.name: f.type for f in dataclasses.fields(target) if not isinstance(f.type, str)}


def missing_value(f: dataclasses.Field) -> Any:
    """Value for a field absent from the decoded data."""
    if f.default is not dataclasses.MISSING:
        return f.default
    if f.default_factory is not dataclasses.MISSING:
        return f.default_factory()
    return None


def from_plain(obj: Any, target: Optional[Any] = None) -> Any:
    """Shape a decoded plain structure as ``target``."""
    if target is None or target is Any:
        return obj

    if typing.get_origin(target) in _UNION_TYPES:
        candidates = typing.get_args(target)
        if obj is None and type(None) in candidates:
            return None
        for candidate in candidates:
            if candidate is type(None):
                continue
            try:
                return from_plain(obj, candidate)
            except DecodeError:
                continue
        raise DecodeError(f"cannot decode {type(obj).__name__} as {target!r}")

    if dataclasses.is_dataclass(target) and isinstance(target, type):
        if not isinstance(obj, dict):
            raise DecodeError(f"cannot decode {type(obj).__name__} into {target.__name__}")
        hints = field_hints(target)
        kwargs = {}
        for f in dataclasses.fields(target):
            if not f.init:
                continue
            if f.name.startswith("_") or f.name not in obj:
                kwargs[f.name] = missing_value(f)
            elif obj[f.name] is None:
                # null keeps the default unless the field is declared nullable
                hint = hints.get(f.name)
                kwargs[f.name] = None if hint in (None, Any) or unwrap_optional(hint)[1] else missing_value(f)
            else:
                kwargs[f.name] = from_plain(obj[f.name], hints.get(f.name))
        return target(**kwargs)

    origin = typing.get_origin(target) or target
    args = typing.get_args(target)

    if isinstance(origin, type) and issubclass(origin, _SEQUENCE_TYPES):
        if not isinstance(obj, list):
            raise DecodeError(f"cannot decode {type(obj).__name__} into {origin.__name__}")
        if origin is tuple and args and args[-1] is not Ellipsis:
            if len(args) != len(obj):
                raise DecodeError(f"expected {len(args)} items, got {len(obj)}")
            return tuple(from_plain(item, arg) for item, arg in zip(obj, args))
        item_type = args[0] if args else None
        return origin(from_plain(item, item_type) for item in obj)

    if isinstance(origin, type) and issubclass(origin, Mapping):
        if not isinstance(obj, dict):
            raise DecodeError(f"cannot decode {type(obj).__name__} into {origin.__name__}")
        value_type = args[1] if len(args) == 2 else None
        return {key: from_plain(item, value_type) for key, item in obj.items()}

    if origin is float:
        if isinstance(obj, (int, float)) and not isinstance(obj, bool):
            return float(obj)
    elif origin is int:
        if isinstance(obj, int) and not isinstance(obj, bool):
            return obj
    elif isinstance(origin, type) and isinstance(obj, origin):
        return obj
    raise DecodeError(f"cannot decode {type(obj).__name__} into {getattr(origin, '__name__', origin)!r}")
