"""
textsign CLI

Commands:
  textsign sign   -i <input|-> -k <key> [--format blake3|ed25519]
  textsign verify -i <input|-> -k <key> [--format ...] --sig <base64url>

Tags are printed as unpadded URL-safe base64.
"""
from __future__ import annotations

import base64
import binascii
import logging
import sys
from typing import Optional

import click

from textsign.config import resolve_format, resolve_key_path
from textsign.const import TextSignFormat
from textsign.errors import MalformedSignature, TextSignError
from textsign.process import process_text_sign, process_text_verify

FORMAT_CHOICES = [f.value for f in TextSignFormat]


def _b64e(raw: bytes) -> str:
    return base64.urlsafe_b64encode(raw).decode("ascii").rstrip("=")


def _b64d(s: str) -> bytes:
    # Be tolerant of missing padding in base64 strings copied from terminals.
    s = (s or "").strip()
    pad = (-len(s)) % 4
    if pad:
        s += "=" * pad
    return base64.urlsafe_b64decode(s.encode("ascii"))


def _format_or_fail(format_: Optional[str]) -> TextSignFormat:
    try:
        return resolve_format(format_)
    except ValueError as e:
        raise click.UsageError(str(e))


def _key_or_fail(key: Optional[str]) -> str:
    path = resolve_key_path(key)
    if path is None:
        raise click.UsageError("No key given (use --key, TEXTSIGN_KEY or the config file)")
    return str(path)


@click.group()
@click.option("-v", "--verbose", is_flag=True, help="Enable debug logging.")
def main(verbose: bool) -> None:
    """Sign and verify text with BLAKE3 keyed hashes or Ed25519."""
    logging.basicConfig(format="%(levelname)s %(name)s: %(message)s")
    logging.getLogger("textsign").setLevel(logging.DEBUG if verbose else logging.WARNING)


@main.command("sign")
@click.option("-i", "--input", "input_", default="-", show_default=True, help="Input file, or - for stdin.")
@click.option("-k", "--key", default=None, help="Key file.")
@click.option("--format", "format_", type=click.Choice(FORMAT_CHOICES, case_sensitive=False), default=None)
def sign_cmd(input_: str, key: Optional[str], format_: Optional[str]) -> None:
    """Sign the input and print the tag."""
    fmt = _format_or_fail(format_)
    try:
        tag = process_text_sign(input_, _key_or_fail(key), fmt)
    except TextSignError as e:
        raise click.ClickException(str(e))
    click.echo(_b64e(tag))


@main.command("verify")
@click.option("-i", "--input", "input_", default="-", show_default=True, help="Input file, or - for stdin.")
@click.option("-k", "--key", default=None, help="Key file.")
@click.option("--format", "format_", type=click.Choice(FORMAT_CHOICES, case_sensitive=False), default=None)
@click.option("--sig", required=True, help="Signature as URL-safe base64.")
def verify_cmd(input_: str, key: Optional[str], format_: Optional[str], sig: str) -> None:
    """Verify a tag against the input."""
    fmt = _format_or_fail(format_)
    try:
        raw_sig = _b64d(sig)
    except (binascii.Error, ValueError) as e:
        raise click.BadParameter(f"not valid base64: {e}", param_hint="--sig")
    try:
        ok = process_text_verify(input_, _key_or_fail(key), fmt, raw_sig)
    except MalformedSignature as e:
        raise click.BadParameter(str(e), param_hint="--sig")
    except TextSignError as e:
        raise click.ClickException(str(e))

    if ok:
        click.secho("✓ Signature verified", fg="green")
    else:
        click.secho("✗ Signature invalid", fg="red")
        sys.exit(1)


if __name__ == "__main__":
    main()
