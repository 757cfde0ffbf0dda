"""HMAC-backed message generation and verification."""

from __future__ import annotations

import hmac
import logging
from typing import TYPE_CHECKING, Any, Optional, Union

from .errors import InvalidSignatureError, SecretNotSetError, SerializerNotSetError
from .hashers import HashFactory, HasherSpec, hasher_name, resolve_hasher
from .serializers.base import Serializer
from .token import SignedToken, decode_data, encode_data, join, split

if TYPE_CHECKING:
    from .config import VerifierConfig

logger = logging.getLogger("message_verifier.verifier")


class MessageVerifier:
    """Sign payloads into tamper-evident tokens and verify them on return.

    Tokens have the form ``<urlsafe-base64(payload)>--<hex hmac>``. The payload
    is readable by whoever holds the token; only its integrity is protected.

    Usage:
        verifier = MessageVerifier(secret=b"...", serializer=JSONSerializer())
        token = verifier.generate({"user_id": 42})
        verifier.verify(token)  # -> {"user_id": 42}
    """

    __slots__ = ("_secret", "_hasher", "_serializer")

    def __init__(
        self,
        secret: Union[bytes, str, None] = None,
        hasher: HasherSpec = None,
        serializer: Optional[Serializer] = None,
    ) -> None:
        if isinstance(secret, str):
            secret = secret.encode("utf-8")
        self._secret: bytes = bytes(secret or b"")
        self._hasher: HashFactory = resolve_hasher(hasher)
        self._serializer = serializer

    @classmethod
    def from_config(cls, config: "VerifierConfig") -> "MessageVerifier":
        return config.build()

    @property
    def hasher(self) -> HashFactory:
        return self._hasher

    @property
    def serializer(self) -> Optional[Serializer]:
        return self._serializer

    def __repr__(self) -> str:
        serializer = type(self._serializer).__name__ if self._serializer is not None else None
        return f"MessageVerifier(hasher={hasher_name(self._hasher)!r}, serializer={serializer!r})"

    def _check_configured(self) -> Serializer:
        if self._serializer is None:
            raise SerializerNotSetError()
        if not self._secret:
            raise SecretNotSetError()
        return self._serializer

    def digest_for(self, data: str) -> str:
        """Return the lowercase hex HMAC of ``data`` under the secret."""
        return hmac.new(self._secret, data.encode("utf-8"), self._hasher).hexdigest()

    def generate(self, value: Any) -> str:
        """Encode and sign ``value``, returning the token text."""
        serializer = self._check_configured()
        data = encode_data(serializer.encode(value))
        return join(data, self.digest_for(data))

    def verify(self, token: str, target: Optional[type] = None) -> Any:
        """Check ``token`` and return the payload it carries.

        ``target`` is handed to the serializer to shape the decoded value,
        e.g. a dataclass type.

        Raises:
            SerializerNotSetError: No serializer configured.
            SecretNotSetError: No secret configured.
            MalformedTokenError: ``token`` is not ``data--digest``.
            InvalidSignatureError: The digest does not match the data.
            DecodeError: The serializer rejected the verified payload.
        """
        serializer = self._check_configured()
        signed = self._check_signature(token)
        return serializer.decode(decode_data(signed.data), target)

    def is_valid(self, token: str) -> bool:
        """Return whether ``token`` carries a valid signature, without decoding it."""
        self._check_configured()
        try:
            self._check_signature(token)
        except InvalidSignatureError:
            return False
        return True

    def _check_signature(self, token: str) -> SignedToken:
        try:
            signed = split(token)
        except InvalidSignatureError:
            logger.debug("Rejected token: malformed")
            raise
        expected = self.digest_for(signed.data)
        if not hmac.compare_digest(expected.encode("ascii"), signed.digest.encode("utf-8")):
            logger.debug("Rejected token: signature mismatch")
            raise InvalidSignatureError()
        return signed
