"""Error taxonomy for message generation and verification."""

from __future__ import annotations


class MessageVerifierError(ValueError):
    """Base class for every failure raised by this package."""


class SerializerNotSetError(MessageVerifierError):
    """Raised when a verifier is used without a serializer."""

    def __init__(self) -> None:
        super().__init__("Serializer not set")


class SecretNotSetError(MessageVerifierError):
    """Raised when a verifier is used without a signing secret."""

    def __init__(self) -> None:
        super().__init__("Secret not set")


class InvalidSignatureError(MessageVerifierError):
    """Raised when a token's digest does not match its data."""

    def __init__(self, reason: str = "bad data (compare)") -> None:
        self.reason = reason
        super().__init__(f"Invalid signature - {reason}")


class MalformedTokenError(InvalidSignatureError):
    """Raised when a token lacks the ``data--digest`` shape."""

    def __init__(self) -> None:
        super().__init__("bad data --")


class SerializationError(MessageVerifierError):
    """Base class for serializer failures."""


class EncodeError(SerializationError):
    """Raised when a value cannot be encoded by a serializer."""


class DecodeError(SerializationError):
    """Raised when data cannot be decoded into the requested target."""
