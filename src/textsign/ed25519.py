"""
Ed25519 signatures (PyNaCl).

Signer and verifier are separate identities: the signer holds a 32-byte seed,
the verifier a 32-byte public key. Signatures are 64 raw bytes.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import BinaryIO, Union

from nacl.exceptions import BadSignatureError
from nacl.signing import SigningKey, VerifyKey

from textsign.const import FORMAT_SIZES, KEY_LEN, TextSignFormat
from textsign.errors import InvalidKeyLength, MalformedSignature
from textsign.keys import load_key_material, read_to_end

logger = logging.getLogger(__name__)


def _check_key_len(key: bytes) -> None:
    if len(key) != KEY_LEN:
        raise InvalidKeyLength(TextSignFormat.ED25519.value, KEY_LEN, len(key))


@dataclass(frozen=True)
class Ed25519Signer:
    key: SigningKey

    @classmethod
    def try_new(cls, key: bytes) -> "Ed25519Signer":
        _check_key_len(key)
        return cls(SigningKey(bytes(key)))

    @classmethod
    def load(cls, path: Union[str, Path]) -> "Ed25519Signer":
        return cls.try_new(load_key_material(path))

    @property
    def verifying_key_bytes(self) -> bytes:
        """The 32-byte public key paired with this seed."""
        return bytes(self.key.verify_key)

    def sign(self, reader: BinaryIO) -> bytes:
        buf = read_to_end(reader)
        return self.key.sign(buf).signature

    def __repr__(self) -> str:
        return "Ed25519Signer(key=<redacted>)"


@dataclass(frozen=True)
class Ed25519Verifier:
    key: VerifyKey

    @classmethod
    def try_new(cls, key: bytes) -> "Ed25519Verifier":
        _check_key_len(key)
        return cls(VerifyKey(bytes(key)))

    @classmethod
    def load(cls, path: Union[str, Path]) -> "Ed25519Verifier":
        return cls.try_new(load_key_material(path))

    def verify(self, reader: BinaryIO, sig: bytes) -> bool:
        # Never truncate or pad: anything but 64 bytes is a caller error.
        sig_len = FORMAT_SIZES[TextSignFormat.ED25519]["sig"]
        if len(sig) != sig_len:
            raise MalformedSignature(TextSignFormat.ED25519.value, sig_len, len(sig))
        buf = read_to_end(reader)
        try:
            self.key.verify(buf, bytes(sig))
        except (BadSignatureError, ValueError):
            logger.debug("ed25519 verification failed")
            return False
        logger.debug("ed25519 verification succeeded")
        return True
