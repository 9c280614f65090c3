"""
BLAKE3 keyed hash.

Symmetric: the same 32-byte key signs and verifies. Sign and verify both run
the keyed mode of BLAKE3; the unkeyed hash is never used here.
"""
from __future__ import annotations

import hmac
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import BinaryIO, Union

import blake3

from textsign.const import FORMAT_SIZES, KEY_LEN, TextSignFormat
from textsign.errors import InvalidKeyLength, MalformedSignature
from textsign.keys import iter_chunks, load_key_material

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Blake3:
    key: bytes

    def __post_init__(self) -> None:
        if len(self.key) != KEY_LEN:
            raise InvalidKeyLength(TextSignFormat.BLAKE3.value, KEY_LEN, len(self.key))

    @classmethod
    def try_new(cls, key: bytes) -> "Blake3":
        """Build from any secret of at least 32 bytes; only the first 32 are used."""
        if len(key) < KEY_LEN:
            raise InvalidKeyLength(TextSignFormat.BLAKE3.value, KEY_LEN, len(key), exact=False)
        if len(key) > KEY_LEN:
            logger.warning("blake3 key is %d bytes, using the first %d", len(key), KEY_LEN)
        return cls(bytes(key[:KEY_LEN]))

    @classmethod
    def load(cls, path: Union[str, Path]) -> "Blake3":
        return cls.try_new(load_key_material(path))

    def _keyed_digest(self, reader: BinaryIO) -> bytes:
        h = blake3.blake3(key=self.key)
        for chunk in iter_chunks(reader):
            h.update(chunk)
        return h.digest()

    def sign(self, reader: BinaryIO) -> bytes:
        return self._keyed_digest(reader)

    def verify(self, reader: BinaryIO, sig: bytes) -> bool:
        tag_len = FORMAT_SIZES[TextSignFormat.BLAKE3]["sig"]
        if len(sig) != tag_len:
            raise MalformedSignature(TextSignFormat.BLAKE3.value, tag_len, len(sig))
        expected = self._keyed_digest(reader)
        ok = hmac.compare_digest(expected, bytes(sig))
        logger.debug("blake3 verification %s", "succeeded" if ok else "failed")
        return ok

    def __repr__(self) -> str:
        return "Blake3(key=<redacted>)"
