"""Token text format: ``<urlsafe-base64(data)>--<hex digest>``."""

from __future__ import annotations

import base64
import binascii
from dataclasses import dataclass

from .errors import DecodeError, MalformedTokenError

SEPARATOR = "--"


@dataclass(frozen=True)
class SignedToken:
    """The two halves of a token."""

    data: str
    digest: str

    def __str__(self) -> str:
        return join(self.data, self.digest)


def encode_data(raw: bytes) -> str:
    """Render serializer output in an alphabet that cannot contain the separator."""
    return base64.urlsafe_b64encode(raw).decode("ascii")


def decode_data(data: str) -> bytes:
    """Reverse :func:`encode_data`."""
    try:
        return base64.b64decode(data.encode("ascii"), altchars=b"-_", validate=True)
    except (binascii.Error, UnicodeEncodeError) as exc:
        raise DecodeError(f"token data is not valid base64: {exc}") from exc


def join(data: str, digest: str) -> str:
    return f"{data}{SEPARATOR}{digest}"


def split(token: str) -> SignedToken:
    """Split ``token`` into its data and digest halves.

    The URL-safe alphabet contains ``-``, so the data half may itself hold the
    separator. The hex digest never does, which makes the last separator the
    boundary. Generated tokens are pure ASCII, so anything else is rejected
    before it reaches the digest comparison.
    """
    if not isinstance(token, str) or not token.isascii():
        raise MalformedTokenError()
    data, sep, digest = token.rpartition(SEPARATOR)
    if not sep or not data or not digest:
        raise MalformedTokenError()
    return SignedToken(data=data, digest=digest)
