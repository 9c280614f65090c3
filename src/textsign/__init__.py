"""
textsign — sign and verify byte streams with a BLAKE3 keyed hash or Ed25519.
"""

__version__ = "0.1.0"

from textsign.blake3_keyed import Blake3
from textsign.const import TextSignFormat
from textsign.ed25519 import Ed25519Signer, Ed25519Verifier
from textsign.errors import InvalidKeyLength, IoError, MalformedSignature, TextSignError
from textsign.keys import get_reader, load_key_material, read_to_end
from textsign.process import load_signer, load_verifier, process_text_sign, process_text_verify
from textsign.signer import TextSigner, TextVerifier

__all__ = [
    "Blake3",
    "Ed25519Signer",
    "Ed25519Verifier",
    "InvalidKeyLength",
    "IoError",
    "MalformedSignature",
    "TextSignError",
    "TextSignFormat",
    "TextSigner",
    "TextVerifier",
    "get_reader",
    "load_key_material",
    "load_signer",
    "load_verifier",
    "process_text_sign",
    "process_text_verify",
    "read_to_end",
]
