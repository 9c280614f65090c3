"""
Key material and input readers.

Keys are raw bytes on disk: no envelope, no metadata. Length checks belong to
the algorithm that consumes the key, not to the loader.
"""
from __future__ import annotations

import logging
import sys
from contextlib import contextmanager
from pathlib import Path
from typing import BinaryIO, Iterator, Union

from textsign.const import HASH_CHUNK_SIZE
from textsign.errors import IoError

logger = logging.getLogger(__name__)

STDIN_MARKER = "-"


def load_key_material(path: Union[str, Path]) -> bytes:
    """Read the whole key file as opaque bytes."""
    path = Path(path)
    try:
        key = path.read_bytes()
    except OSError as e:
        raise IoError(f"Cannot read key file {path}: {e}") from e
    logger.debug("Loaded key material from %s (%d bytes)", path, len(key))
    return key


def iter_chunks(reader: BinaryIO) -> Iterator[bytes]:
    """Yield the reader's contents in fixed-size chunks until EOF."""
    while True:
        try:
            chunk = reader.read(HASH_CHUNK_SIZE)
        except OSError as e:
            raise IoError(f"Failed reading input: {e}") from e
        if not chunk:
            break
        yield chunk


def read_to_end(reader: BinaryIO) -> bytes:
    """Drain a binary reader. The reader is neither closed nor repositioned."""
    return b"".join(iter_chunks(reader))


@contextmanager
def get_reader(input: Union[str, Path]) -> Iterator[BinaryIO]:
    """Open the content to authenticate. "-" is standard input."""
    if str(input) == STDIN_MARKER:
        logger.debug("Reading input from stdin")
        yield sys.stdin.buffer
        return

    path = Path(input)
    try:
        f = path.open("rb")
    except OSError as e:
        raise IoError(f"Cannot open input {path}: {e}") from e
    logger.debug("Reading input from %s", path)
    with f:
        yield f
