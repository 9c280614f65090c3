"""Ed25519 signer and verifier."""
import io

import pytest
from nacl.signing import SigningKey

from textsign.ed25519 import Ed25519Signer, Ed25519Verifier
from textsign.errors import InvalidKeyLength, IoError, MalformedSignature
from textsign.signer import TextSigner, TextVerifier

SEED = bytes.fromhex("a665a45920422f9d417e4867efdc4fb8a04a1f3fff1fa07e998e86f7f7a27ae3")


def _pair(seed: bytes = SEED):
    signer = Ed25519Signer.try_new(seed)
    verifier = Ed25519Verifier.try_new(signer.verifying_key_bytes)
    return signer, verifier


def test_roles_are_split():
    """Signer only signs, verifier only verifies."""
    signer, verifier = _pair()
    assert isinstance(signer, TextSigner)
    assert not isinstance(signer, TextVerifier)
    assert isinstance(verifier, TextVerifier)
    assert not isinstance(verifier, TextSigner)


def test_roundtrip():
    """Ed25519 sign and verify."""
    signer, verifier = _pair()
    msg = b"test message for signing"
    sig = signer.sign(io.BytesIO(msg))
    assert len(sig) == 64
    assert verifier.verify(io.BytesIO(msg), sig)


def test_matches_nacl_detached_signature():
    """Signatures match PyNaCl's detached signature."""
    signer, _ = _pair()
    msg = b"interop"
    expected = SigningKey(SEED).sign(msg).signature
    assert signer.sign(io.BytesIO(msg)) == expected


def test_verifying_key_matches_nacl():
    """The derived public key matches PyNaCl's."""
    signer, _ = _pair()
    assert signer.verifying_key_bytes == bytes(SigningKey(SEED).verify_key)
    assert len(signer.verifying_key_bytes) == 32


def test_generated_keypair_roundtrip():
    """A freshly generated keypair signs and verifies."""
    sk = SigningKey.generate()
    signer = Ed25519Signer.try_new(bytes(sk))
    verifier = Ed25519Verifier.try_new(bytes(sk.verify_key))
    sig = signer.sign(io.BytesIO(b"random key"))
    assert verifier.verify(io.BytesIO(b"random key"), sig)


def test_unrelated_public_key_returns_false():
    """Another keypair's public key returns False, not an error."""
    signer, _ = _pair()
    other = SigningKey.generate()
    verifier = Ed25519Verifier.try_new(bytes(other.verify_key))
    sig = signer.sign(io.BytesIO(b"msg"))
    assert verifier.verify(io.BytesIO(b"msg"), sig) is False


def test_tampered_message_returns_false():
    """A changed message returns False."""
    signer, verifier = _pair()
    sig = signer.sign(io.BytesIO(b"hello world"))
    assert verifier.verify(io.BytesIO(b"hello worlD"), sig) is False


def test_tampered_signature_returns_false():
    """A changed signature returns False."""
    signer, verifier = _pair()
    sig = bytearray(signer.sign(io.BytesIO(b"msg")))
    sig[0] ^= 0x80
    assert verifier.verify(io.BytesIO(b"msg"), bytes(sig)) is False


def test_all_zero_signature_returns_false():
    """An all-zero 64-byte signature returns False."""
    _, verifier = _pair()
    assert verifier.verify(io.BytesIO(b"msg"), b"\x00" * 64) is False


@pytest.mark.parametrize("length", [0, 32, 63, 65, 128])
def test_wrong_signature_length_is_malformed(length):
    """Signatures that are not 64 bytes raise MalformedSignature."""
    _, verifier = _pair()
    with pytest.raises(MalformedSignature) as exc:
        verifier.verify(io.BytesIO(b"msg"), b"\x01" * length)
    assert exc.value.expected == 64
    assert exc.value.actual == length


def test_valid_signature_with_trailing_byte_is_malformed():
    """A valid signature plus one byte is malformed, not truncated."""
    signer, verifier = _pair()
    sig = signer.sign(io.BytesIO(b"msg"))
    with pytest.raises(MalformedSignature):
        verifier.verify(io.BytesIO(b"msg"), sig + b"\x00")


@pytest.mark.parametrize("length", [0, 16, 31, 33, 64])
def test_signer_key_must_be_32_bytes(length):
    """Ed25519 seeds must be exactly 32 bytes."""
    with pytest.raises(InvalidKeyLength):
        Ed25519Signer.try_new(b"\x00" * length)


@pytest.mark.parametrize("length", [0, 31, 33])
def test_verifier_key_must_be_32_bytes(length):
    """Ed25519 public keys must be exactly 32 bytes."""
    with pytest.raises(InvalidKeyLength):
        Ed25519Verifier.try_new(b"\x00" * length)


def test_load_from_files(ed25519_keys):
    """Signer and verifier load from raw key files."""
    sk_path, pk_path = ed25519_keys
    signer = Ed25519Signer.load(sk_path)
    verifier = Ed25519Verifier.load(pk_path)
    sig = signer.sign(io.BytesIO(b"from files"))
    assert verifier.verify(io.BytesIO(b"from files"), sig)


def test_load_missing_file(tmp_path):
    """A missing public key file is an IoError."""
    with pytest.raises(IoError):
        Ed25519Verifier.load(tmp_path / "missing.pk")
