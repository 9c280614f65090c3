from __future__ import annotations

from enum import Enum


class TextSignFormat(str, Enum):
    BLAKE3 = "blake3"
    ED25519 = "ed25519"

    @classmethod
    def parse(cls, value: "str | TextSignFormat") -> "TextSignFormat":
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            known = ", ".join(f.value for f in cls)
            raise ValueError(f"Unknown format: {value!r} (expected one of: {known})") from None


KEY_LEN = 32
BLAKE3_TAG_LEN = 32
ED25519_SIG_LEN = 64

# Read size when draining an input reader
HASH_CHUNK_SIZE = 64 * 1024

FORMAT_SIZES = {
    TextSignFormat.BLAKE3: {"key": KEY_LEN, "sig": BLAKE3_TAG_LEN},
    TextSignFormat.ED25519: {"key": KEY_LEN, "sig": ED25519_SIG_LEN},
}
