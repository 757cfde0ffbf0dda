"""Message Verifier package.

Signs arbitrary payloads into tamper-evident tokens and verifies them when
they come back from an untrusted holder. Integrity only: the payload is
visible to anyone who holds the token.
"""

from .config import VerifierConfig
from .errors import (
    DecodeError,
    EncodeError,
    InvalidSignatureError,
    MalformedTokenError,
    MessageVerifierError,
    SecretNotSetError,
    SerializationError,
    SerializerNotSetError,
)
from .serializers import JSONSerializer, MsgPackSerializer, NullSerializer, Serializer, XMLSerializer, get_serializer
from .verifier import MessageVerifier

__all__ = [
    "MessageVerifier",
    "VerifierConfig",
    "Serializer",
    "NullSerializer",
    "JSONSerializer",
    "XMLSerializer",
    "MsgPackSerializer",
    "get_serializer",
    "MessageVerifierError",
    "SerializerNotSetError",
    "SecretNotSetError",
    "InvalidSignatureError",
    "MalformedTokenError",
    "SerializationError",
    "EncodeError",
    "DecodeError",
]
