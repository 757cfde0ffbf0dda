"""Markup serializer built on ElementTree."""

from __future__ import annotations

import dataclasses
import typing
import xml.etree.ElementTree as ET
from collections.abc import Mapping
from typing import Any, Optional

from ..errors import DecodeError, EncodeError
from ._plain import field_hints, is_dataclass_instance, missing_value, sequence_item_type, to_plain, unwrap_optional

ITEM_TAG = "item"


class XMLSerializer:
    """XML-based implementation of the Serializer interface.

    A dataclass becomes an element named after its class with one child per
    field. Sequences repeat the child element, mappings produce one child per
    key in sorted order and scalars are element text.
    """

    name = "xml"

    def __init__(self, root_tag: str = "message") -> None:
        self.root_tag = root_tag

    def encode(self, value: Any) -> bytes:
        tag = type(value).__name__ if is_dataclass_instance(value) else self.root_tag
        try:
            root = ET.Element(tag)
            _fill(root, to_plain(value))
            # the parser folds a bare carriage return into a newline
            data = ET.tostring(root, encoding="utf-8").replace(b"\r", b"&#xD;")
        except (TypeError, ValueError) as exc:
            raise EncodeError(f"value is not XML serializable: {exc}") from exc
        try:
            ET.fromstring(data)
        except ET.ParseError as exc:
            raise EncodeError(f"value does not produce well-formed XML: {exc}") from exc
        return data

    def decode(self, data: bytes, target: Optional[type] = None) -> Any:
        try:
            root = ET.fromstring(data)
        except ET.ParseError as exc:
            raise DecodeError(f"payload is not valid XML: {exc}") from exc
        return _read(root, target)


def _fill(elem: ET.Element, plain: Any) -> None:
    if isinstance(plain, Mapping):
        for key, item in plain.items():
            _append(elem, str(key), item)
    elif isinstance(plain, list):
        for item in plain:
            _append(elem, ITEM_TAG, item)
    elif plain is not None:
        elem.text = _scalar_text(plain)


def _append(parent: ET.Element, tag: str, plain: Any) -> None:
    # nil values are omitted; a nested sequence repeats the tag
    if plain is None:
        return
    if isinstance(plain, list):
        for item in plain:
            _append(parent, tag, item)
        return
    _fill(ET.SubElement(parent, tag), plain)


def _scalar_text(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (str, int, float)):
        return str(value)
    raise TypeError(f"cannot render {type(value).__name__} as XML text")


def _read(elem: ET.Element, target: Any) -> Any:
    target, _ = unwrap_optional(target)

    if target is None or target is Any:
        return _read_untyped(elem)

    if dataclasses.is_dataclass(target) and isinstance(target, type):
        hints = field_hints(target)
        kwargs = {}
        for f in dataclasses.fields(target):
            if not f.init:
                continue
            children = [] if f.name.startswith("_") else elem.findall(f.name)
            hint = hints.get(f.name)
            is_seq, item_type = sequence_item_type(hint)
            if not children:
                kwargs[f.name] = missing_value(f)
            elif is_seq:
                container = typing.get_origin(unwrap_optional(hint)[0]) or list
                kwargs[f.name] = container(_read(child, item_type) for child in children)
            else:
                kwargs[f.name] = _read(children[0], hint)
        return target(**kwargs)

    is_seq, item_type = sequence_item_type(target)
    if is_seq:
        container = typing.get_origin(target) or target
        return container(_read(child, item_type) for child in elem)

    origin = typing.get_origin(target) or target
    if isinstance(origin, type) and issubclass(origin, Mapping):
        args = typing.get_args(target)
        value_type = args[1] if len(args) == 2 else None
        return {child.tag: _read(child, value_type) for child in elem}

    return _parse_scalar(elem.text or "", origin)


def _read_untyped(elem: ET.Element) -> Any:
    if len(elem) == 0:
        return elem.text or ""
    result: dict[str, Any] = {}
    for child in elem:
        value = _read_untyped(child)
        if child.tag in result:
            existing = result[child.tag]
            if not isinstance(existing, list):
                result[child.tag] = existing = [existing]
            existing.append(value)
        else:
            result[child.tag] = value
    return result


def _parse_scalar(text: str, target: Any) -> Any:
    try:
        if target is str:
            return text
        if target is bool:
            lowered = text.strip().lower()
            if lowered in ("true", "1"):
                return True
            if lowered in ("false", "0"):
                return False
            raise ValueError(f"invalid boolean {text!r}")
        if target in (int, float):
            return target(text.strip())
    except ValueError as exc:
        raise DecodeError(f"cannot decode {text!r} into {target.__name__}: {exc}") from exc
    raise DecodeError(f"XMLSerializer cannot decode into {getattr(target, '__name__', target)!r}")
