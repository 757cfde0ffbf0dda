"""Keyed-hash factory resolution."""

from __future__ import annotations

import hashlib
from functools import partial
from typing import Any, Callable, Union

HashFactory = Callable[[], Any]
HasherSpec = Union[str, HashFactory, None]

DEFAULT_HASHER: HashFactory = hashlib.sha1

_NAMED: dict[str, HashFactory] = {
    "sha1": hashlib.sha1,
    "sha256": hashlib.sha256,
    "sha512": hashlib.sha512,
    "md5": hashlib.md5,
}


def resolve_hasher(spec: HasherSpec) -> HashFactory:
    """Return a zero-argument factory producing a fresh hash object.

    ``spec`` may be ``None`` (SHA-1), a factory such as ``hashlib.sha256``,
    or an algorithm name understood by :func:`hashlib.new`.
    """
    if spec is None:
        return DEFAULT_HASHER
    if callable(spec):
        return _fixed_size(spec, getattr(spec, "__name__", repr(spec)))
    name = str(spec).strip().lower().replace("-", "")
    if name in _NAMED:
        return _NAMED[name]
    if name not in hashlib.algorithms_available:
        raise ValueError(
            f"Unknown hash algorithm '{spec}'. Expected one of {', '.join(sorted(_NAMED))} "
            f"or another fixed-size algorithm from hashlib.algorithms_available."
        )
    return _fixed_size(partial(hashlib.new, name), spec)


def _fixed_size(factory: HashFactory, label: object) -> HashFactory:
    # extendable-output functions (shake_*) report a digest size of 0
    if not getattr(factory(), "digest_size", 0):
        raise ValueError(f"Hash algorithm '{label}' has no fixed digest size and cannot be used for HMAC.")
    return factory


def hasher_name(factory: HashFactory) -> str:
    """Best-effort algorithm name for a factory, used in reprs."""
    return getattr(factory(), "name", repr(factory))
