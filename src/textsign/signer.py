"""
Signer / verifier capabilities.

Each algorithm implements one or both roles independently. There is no shared
base class: a keyed-hash identity plays both roles, an Ed25519 key pair is
split into a signer and a verifier that never share an object.
"""
from __future__ import annotations

from typing import BinaryIO, Protocol, runtime_checkable


@runtime_checkable
class TextSigner(Protocol):
    def sign(self, reader: BinaryIO) -> bytes:
        """Consume the whole reader and return the raw tag."""
        ...


@runtime_checkable
class TextVerifier(Protocol):
    def verify(self, reader: BinaryIO, sig: bytes) -> bool:
        """Consume the whole reader and check `sig` against it.

        False means authentication failed. A `sig` of the wrong length raises
        MalformedSignature instead.
        """
        ...
