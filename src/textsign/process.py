"""
Dispatch: resolve the format to an identity, then run exactly one sign or
verify over the input. Any failure aborts the operation; nothing is retried.
"""
from __future__ import annotations

import logging
from pathlib import Path
from typing import Callable, Dict, Union

from textsign.blake3_keyed import Blake3
from textsign.const import TextSignFormat
from textsign.ed25519 import Ed25519Signer, Ed25519Verifier
from textsign.keys import get_reader
from textsign.signer import TextSigner, TextVerifier

logger = logging.getLogger(__name__)

PathLike = Union[str, Path]

_SIGNERS: Dict[TextSignFormat, Callable[[PathLike], TextSigner]] = {
    TextSignFormat.BLAKE3: Blake3.load,
    TextSignFormat.ED25519: Ed25519Signer.load,
}

_VERIFIERS: Dict[TextSignFormat, Callable[[PathLike], TextVerifier]] = {
    TextSignFormat.BLAKE3: Blake3.load,
    TextSignFormat.ED25519: Ed25519Verifier.load,
}


def load_signer(format: Union[str, TextSignFormat], key: PathLike) -> TextSigner:
    fmt = TextSignFormat.parse(format)
    logger.debug("Loading %s signer from %s", fmt.value, key)
    return _SIGNERS[fmt](key)


def load_verifier(format: Union[str, TextSignFormat], key: PathLike) -> TextVerifier:
    fmt = TextSignFormat.parse(format)
    logger.debug("Loading %s verifier from %s", fmt.value, key)
    return _VERIFIERS[fmt](key)


def process_text_sign(input: PathLike, key: PathLike, format: Union[str, TextSignFormat]) -> bytes:
    """Sign the content at `input` ("-" for stdin) and return the raw tag."""
    signer = load_signer(format, key)
    with get_reader(input) as reader:
        return signer.sign(reader)


def process_text_verify(
    input: PathLike,
    key: PathLike,
    format: Union[str, TextSignFormat],
    sig: bytes,
) -> bool:
    """Verify `sig` over the content at `input` ("-" for stdin)."""
    verifier = load_verifier(format, key)
    with get_reader(input) as reader:
        return verifier.verify(reader, sig)
