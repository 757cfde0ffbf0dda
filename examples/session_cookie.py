"""Round-trip a session payload through a signed cookie value."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field
from typing import List

from message_verifier import InvalidSignatureError, MessageVerifier, VerifierConfig


@dataclass
class Session:
    user_id: int
    roles: List[str] = field(default_factory=list)


def main() -> None:
    logging.basicConfig(level=logging.DEBUG)
    os.environ.setdefault("MESSAGE_VERIFIER_SECRET", "change-me")
    verifier = MessageVerifier.from_config(VerifierConfig.from_env())

    cookie = verifier.generate(Session(user_id=42, roles=["admin"]))
    print(f"cookie={cookie}")
    print(f"session={verifier.verify(cookie, Session)}")

    forged = cookie[:-1] + ("0" if cookie[-1] != "0" else "1")
    try:
        verifier.verify(forged, Session)
    except InvalidSignatureError as exc:
        print(f"forged cookie rejected: {exc}")


if __name__ == "__main__":
    main()
