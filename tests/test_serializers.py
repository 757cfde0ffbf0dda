from dataclasses import dataclass, field
from typing import Optional

import pytest

from message_verifier.errors import DecodeError, EncodeError
from message_verifier.serializers import (
    JSONSerializer,
    MsgPackSerializer,
    NullSerializer,
    Serializer,
    XMLSerializer,
    get_serializer,
)


@dataclass
class Item:
    sku: str
    qty: int = 1


@dataclass
class Order:
    id: int
    items: list[Item] = field(default_factory=list)
    note: Optional[str] = None
    paid: bool = False
    total: float = 0.0


@dataclass
class Session:
    user: str = ""
    _cache: str = ""


def test_builtins_satisfy_protocol() -> None:
    for name in ("null", "json", "xml", "msgpack"):
        assert isinstance(get_serializer(name), Serializer)


def test_get_serializer_unknown_name() -> None:
    with pytest.raises(ValueError, match="Unknown serializer"):
        get_serializer("yaml")


def test_null_serializer_passes_text_through() -> None:
    s = NullSerializer()
    assert s.encode("héllo") == "héllo".encode("utf-8")
    assert s.decode(s.encode("héllo")) == "héllo"
    assert s.decode(b"abc", str) == "abc"


def test_null_serializer_rejects_non_text() -> None:
    s = NullSerializer()
    with pytest.raises(EncodeError):
        s.encode({"a": 1})
    with pytest.raises(DecodeError):
        s.decode(b"abc", int)


def test_json_is_compact_and_ordered() -> None:
    s = JSONSerializer()
    assert s.encode(Item(sku="a", qty=2)) == b'{"sku":"a","qty":2}'
    assert s.encode({"b": 1, "a": [1, 2]}) == b'{"a":[1,2],"b":1}'
    assert s.encode({"name": "é"}) == '{"name":"é"}'.encode("utf-8")


def test_json_nested_round_trip() -> None:
    s = JSONSerializer()
    order = Order(id=7, items=[Item("a", 2), Item("b")], note="gift", paid=True, total=12.5)
    assert s.decode(s.encode(order), Order) == order


def test_json_drops_unexported_fields() -> None:
    s = JSONSerializer()
    data = s.encode(Session(user="bob", _cache="x"))
    assert data == b'{"user":"bob"}'
    assert s.decode(data, Session) == Session(user="bob")


def test_json_ignores_unknown_keys_and_fills_defaults() -> None:
    s = JSONSerializer()
    assert s.decode(b'{"id":3,"extra":true}', Order) == Order(id=3)


def test_json_shape_mismatch() -> None:
    s = JSONSerializer()
    with pytest.raises(DecodeError):
        s.decode(b"[1,2,3]", Order)
    with pytest.raises(DecodeError):
        s.decode(b'{"id":"seven"}', Order)
    with pytest.raises(DecodeError):
        s.decode(b"not json")


def test_json_rejects_unserializable_values() -> None:
    with pytest.raises(EncodeError):
        JSONSerializer().encode(object())
    with pytest.raises(EncodeError):
        JSONSerializer().encode(float("nan"))


def test_xml_layout() -> None:
    s = XMLSerializer()
    assert s.encode(Item(sku="a", qty=2)) == b"<Item><sku>a</sku><qty>2</qty></Item>"
    assert s.encode(Order(id=1, items=[Item("a"), Item("b")])) == (
        b"<Order><id>1</id><items><sku>a</sku><qty>1</qty></items>"
        b"<items><sku>b</sku><qty>1</qty></items><paid>false</paid><total>0.0</total></Order>"
    )


def test_xml_nested_round_trip() -> None:
    s = XMLSerializer()
    order = Order(id=7, items=[Item("a", 2), Item("b & c")], note="<gift>", paid=True, total=12.5)
    assert s.decode(s.encode(order), Order) == order


def test_xml_untyped_decode() -> None:
    s = XMLSerializer()
    data = s.encode({"name": "bob", "tags": ["x", "y"]})
    assert data == b"<message><name>bob</name><tags>x</tags><tags>y</tags></message>"
    assert s.decode(data) == {"name": "bob", "tags": ["x", "y"]}


def test_xml_scalar_payload() -> None:
    s = XMLSerializer(root_tag="value")
    assert s.encode(42) == b"<value>42</value>"
    assert s.decode(b"<value>42</value>", int) == 42


def test_xml_decode_errors() -> None:
    s = XMLSerializer()
    with pytest.raises(DecodeError):
        s.decode(b"<Item><sku>a</sku>", Item)
    with pytest.raises(DecodeError):
        s.decode(b"<Item><sku>a</sku><qty>many</qty></Item>", Item)


def test_msgpack_round_trip() -> None:
    s = MsgPackSerializer()
    order = Order(id=7, items=[Item("a", 2)], note=None, paid=True, total=1.5)
    assert s.decode(s.encode(order), Order) == order
    assert s.decode(s.encode({"raw": b"\x00\x01"})) == {"raw": b"\x00\x01"}


def test_msgpack_decode_errors() -> None:
    with pytest.raises(DecodeError):
        MsgPackSerializer().decode(b"\xc1")
    with pytest.raises(EncodeError):
        MsgPackSerializer().encode(object())


def test_json_null_keeps_defaults_for_non_nullable_fields() -> None:
    s = JSONSerializer()
    decoded = s.decode(b'{"id":3,"items":null,"note":null,"paid":null,"total":null}', Order)
    assert decoded == Order(id=3)
    assert decoded.items == []


def test_xml_preserves_carriage_returns() -> None:
    s = XMLSerializer()
    data = s.encode(Item(sku="a\r\nb\rc"))
    assert b"&#xD;" in data
    assert s.decode(data, Item) == Item(sku="a\r\nb\rc")


@pytest.mark.parametrize("value", [{"a b": 1}, {"1": 2}, {"": 3}, Item(sku="a\x00b"), {"ok": "bell\x07"}])
def test_xml_rejects_values_it_cannot_read_back(value) -> None:
    with pytest.raises(EncodeError):
        XMLSerializer().encode(value)
