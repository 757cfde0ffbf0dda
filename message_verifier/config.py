"""Configuration model for building verifiers."""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from typing import Mapping, Optional

from .serializers import get_serializer
from .verifier import MessageVerifier

ENV_PREFIX = "MESSAGE_VERIFIER_"


@dataclass(frozen=True)
class VerifierConfig:
    """Secret, hash algorithm and serializer name for one verifier."""

    secret: bytes = field(default=b"", repr=False)
    hasher: str = "sha1"
    serializer: str = "json"

    @classmethod
    def from_env(cls, prefix: str = ENV_PREFIX, environ: Optional[Mapping[str, str]] = None) -> "VerifierConfig":
        """Read ``<prefix>SECRET``, ``<prefix>HASHER`` and ``<prefix>SERIALIZER``.

        A missing secret stays empty; the resulting verifier refuses to sign
        until one is provided.
        """
        env = os.environ if environ is None else environ
        return cls(
            secret=env.get(f"{prefix}SECRET", "").encode("utf-8"),
            hasher=env.get(f"{prefix}HASHER", "sha1"),
            serializer=env.get(f"{prefix}SERIALIZER", "json"),
        )

    def build(self) -> MessageVerifier:
        return MessageVerifier(secret=self.secret, hasher=self.hasher, serializer=get_serializer(self.serializer))
