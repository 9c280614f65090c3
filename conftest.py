"""
Shared fixtures for the textsign test suite.
"""
from pathlib import Path

import pytest
from nacl.signing import SigningKey

ZERO_KEY = b"\x00" * 32
CANONICAL_TEST_PRIVATE_KEY = bytes.fromhex("a665a45920422f9d417e4867efdc4fb8a04a1f3fff1fa07e998e86f7f7a27ae3")


@pytest.fixture(autouse=True)
def _isolated_config(tmp_path, monkeypatch):
    """Keep the user's environment and ~/.textsign out of every test."""
    monkeypatch.setenv("TEXTSIGN_CONFIG", str(tmp_path / "no-config.json"))
    monkeypatch.delenv("TEXTSIGN_FORMAT", raising=False)
    monkeypatch.delenv("TEXTSIGN_KEY", raising=False)


@pytest.fixture
def zero_key_file(tmp_path) -> Path:
    p = tmp_path / "blake3.key"
    p.write_bytes(ZERO_KEY)
    return p


@pytest.fixture
def ed25519_keys(tmp_path):
    """Write a fixed Ed25519 seed and its public key; return (sk_path, pk_path)."""
    sk = SigningKey(CANONICAL_TEST_PRIVATE_KEY)
    sk_path = tmp_path / "ed25519.sk"
    pk_path = tmp_path / "ed25519.pk"
    sk_path.write_bytes(CANONICAL_TEST_PRIVATE_KEY)
    pk_path.write_bytes(bytes(sk.verify_key))
    return sk_path, pk_path


@pytest.fixture
def input_file(tmp_path) -> Path:
    p = tmp_path / "input.txt"
    p.write_bytes(b"hello world")
    return p
